"""HTTP views for the customer resource."""

import logging

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.orders.links import SELF, Link, render_link_header
from apps.orders.references import ReferenceMapper, ResourceKind

from .domain import CustomerHasOrders, CustomerMissing, CustomerSnapshot, EmailExists
from .repository import CustomerRepository
from .schemas import CreateCustomerDTO, CustomerReadDTO, UpdateCustomerDTO

logger = logging.getLogger(__name__)


def customer_body(customer: CustomerSnapshot) -> dict:
    return CustomerReadDTO(
        id=customer.id,
        last_name=customer.last_name,
        first_name=customer.first_name,
        email=customer.email,
        kind=customer.kind,
    ).model_dump()


def customer_response(customer: CustomerSnapshot, mapper: ReferenceMapper) -> Response:
    """200 response with the customer body and its ``self`` link."""
    self_link = Link(SELF, mapper.to_reference(ResourceKind.CUSTOMER, customer.id))
    return Response(customer_body(customer), status=200, headers={"Link": render_link_header([self_link])})


class CustomersCollectionView(APIView):
    """Create (POST) and update (PUT) customers."""

    def post(self, request):
        try:
            dto = CreateCustomerDTO.model_validate(request.data)
        except ValidationError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = CustomerRepository().create(
                last_name=dto.last_name,
                first_name=dto.first_name,
                email=dto.email,
                kind=dto.kind,
            )
        except EmailExists as e:
            return Response({"detail": str(e), "reference": e.email}, status=status.HTTP_409_CONFLICT)

        logger.info("customer created", extra={"customer_id": customer.id})
        location = ReferenceMapper.for_request(request).to_reference(ResourceKind.CUSTOMER, customer.id)
        return Response(status=status.HTTP_201_CREATED, headers={"Location": location})

    def put(self, request):
        try:
            dto = UpdateCustomerDTO.model_validate(request.data)
        except ValidationError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        try:
            customer = CustomerRepository().update(
                dto.id,
                last_name=dto.last_name,
                first_name=dto.first_name,
                email=dto.email,
                kind=dto.kind,
            )
        except CustomerMissing as e:
            return Response({"detail": str(e), "reference": e.customer_id}, status=status.HTTP_404_NOT_FOUND)
        except EmailExists as e:
            return Response({"detail": str(e), "reference": e.email}, status=status.HTTP_409_CONFLICT)

        logger.info("customer updated", extra={"customer_id": customer.id})
        return customer_response(customer, ReferenceMapper.for_request(request))


class CustomerDetailView(APIView):
    """Read (GET) or delete (DELETE) one customer."""

    def get(self, request, pk: int):
        customer = CustomerRepository().find_by_id(pk)
        if customer is None:
            return Response({"detail": "NOT_FOUND"}, status=status.HTTP_404_NOT_FOUND)
        return customer_response(customer, ReferenceMapper.for_request(request))

    def delete(self, request, pk: int):
        try:
            deleted = CustomerRepository().delete(pk)
        except CustomerHasOrders as e:
            return Response({"detail": str(e), "reference": e.customer_id}, status=status.HTTP_409_CONFLICT)
        if deleted:
            logger.info("customer deleted", extra={"customer_id": pk})
        return Response(status=status.HTTP_204_NO_CONTENT)
