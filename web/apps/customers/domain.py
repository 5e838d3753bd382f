"""Customer snapshot and customer-level errors.

Other apps only ever see customers through ``CustomerSnapshot``; the ORM
model stays behind ``CustomerRepository``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerSnapshot:
    """Read-only view of a persisted customer.

    Attributes:
        id: Storage identifier.
        last_name: Family name.
        first_name: Given name, may be empty.
        email: Unique contact address.
        kind: ``"P"`` for private customers, ``"F"`` for business customers.
    """

    id: int
    last_name: str
    first_name: str
    email: str
    kind: str


class EmailExists(ValueError):
    """Raised when a customer with the same email is already stored."""

    def __init__(self, email: str):
        super().__init__("EMAIL_EXISTS")
        self.email = email


class CustomerMissing(ValueError):
    def __init__(self, customer_id: int):
        super().__init__("NOT_FOUND")
        self.customer_id = customer_id


class CustomerHasOrders(ValueError):
    """Raised when deleting a customer that still has orders."""

    def __init__(self, customer_id: int):
        super().__init__("CUSTOMER_HAS_ORDERS")
        self.customer_id = customer_id
