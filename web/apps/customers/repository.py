"""Django ORM access for customers."""

from django.db import IntegrityError, transaction
from django.db.models import ProtectedError

from apps.orders.references import MAX_IDENTIFIER

from .domain import CustomerHasOrders, CustomerMissing, CustomerSnapshot, EmailExists
from .models import CustomerModel


def to_snapshot(obj: CustomerModel) -> CustomerSnapshot:
    return CustomerSnapshot(
        id=obj.id,
        last_name=obj.last_name,
        first_name=obj.first_name,
        email=obj.email,
        kind=obj.kind,
    )


class CustomerRepository:
    """Finds, creates, updates and deletes customers as ``CustomerSnapshot`` values."""

    def find_by_id(self, customer_id: int) -> CustomerSnapshot | None:
        if customer_id > MAX_IDENTIFIER:
            return None
        obj = CustomerModel.objects.filter(id=customer_id).first()
        return to_snapshot(obj) if obj else None

    def create(self, last_name: str, first_name: str, email: str, kind: str) -> CustomerSnapshot:
        """Persist a new customer.

        Raises:
            EmailExists: If the email address is already taken.
        """
        if CustomerModel.objects.filter(email__iexact=email).exists():
            raise EmailExists(email)
        try:
            with transaction.atomic():
                obj = CustomerModel.objects.create(
                    last_name=last_name,
                    first_name=first_name,
                    email=email,
                    kind=kind,
                )
        except IntegrityError:
            # concurrent insert with the same email
            raise EmailExists(email)
        return to_snapshot(obj)

    def update(self, customer_id: int, last_name: str, first_name: str, email: str, kind: str) -> CustomerSnapshot:
        """Overwrite the attributes of an existing customer.

        The customer may keep its own email address; only an address held
        by a different customer is rejected.

        Raises:
            CustomerMissing: If no customer has ``customer_id``.
            EmailExists: If ``email`` belongs to another customer.
        """
        try:
            with transaction.atomic():
                obj = CustomerModel.objects.select_for_update().filter(id=customer_id).first()
                if obj is None:
                    raise CustomerMissing(customer_id)
                if CustomerModel.objects.filter(email__iexact=email).exclude(id=customer_id).exists():
                    raise EmailExists(email)
                obj.last_name = last_name
                obj.first_name = first_name
                obj.email = email
                obj.kind = kind
                obj.save(update_fields=["last_name", "first_name", "email", "kind", "updated_at"])
        except IntegrityError:
            raise EmailExists(email)
        return to_snapshot(obj)

    def delete(self, customer_id: int) -> bool:
        """Delete a customer without orders.

        Returns:
            bool: False when there was no such customer.

        Raises:
            CustomerHasOrders: If orders still reference the customer.
        """
        if customer_id > MAX_IDENTIFIER:
            return False
        try:
            with transaction.atomic():
                deleted, _ = CustomerModel.objects.filter(id=customer_id).delete()
        except ProtectedError:
            raise CustomerHasOrders(customer_id)
        return deleted > 0
