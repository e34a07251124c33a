"""Customer API views.

Exposes the ``CustomerUseCase`` via HTTP using a DRF ViewSet.
Domain exceptions are not caught here: they propagate to
``modules.core.exception_handler``, which maps their kind to a status
code and the standard error body.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.customers.dtos import CustomerOutputDTO, RegisterCustomerDTO
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.serializers import (
    CustomerRequestSerializer,
    CustomerResponseSerializer,
    ErrorResponseSerializer,
)
from modules.customers.services import CustomerUseCase

_BAD_REQUEST = OpenApiResponse(ErrorResponseSerializer, description="Invalid input or duplicate CPF.")
_NOT_FOUND = OpenApiResponse(ErrorResponseSerializer, description="Record not found.")


class CustomerViewSet(ViewSet):
    """ViewSet for customer registration and look-ups.

    Uses ``CustomerUseCase`` with ``CustomerDjangoRepository`` (DIP).
    All ORM access goes through the use case / repository layer.
    """

    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._use_case = CustomerUseCase(repository=CustomerDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=CustomerResponseSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /api/v1/customers/"""
        customers = self._use_case.find_customer_all()
        return Response(
            [dto.model_dump(mode="json") for dto in CustomerOutputDTO.from_entities(customers)]
        )

    @extend_schema(responses={200: CustomerResponseSerializer, 404: _NOT_FOUND})
    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/customers/{pk}/"""
        customer = self._use_case.find_customer_by_id(pk)
        return Response(CustomerOutputDTO.from_entity(customer).model_dump(mode="json"))

    @extend_schema(responses={200: CustomerResponseSerializer, 404: _NOT_FOUND})
    @action(detail=False, methods=["get"], url_path=r"cpf/(?P<cpf>[^/]+)")
    def by_cpf(self, request: Request, cpf: str) -> Response:
        """GET /api/v1/customers/cpf/{cpf}/"""
        customer = self._use_case.find_customer_by_cpf(cpf)
        return Response(CustomerOutputDTO.from_entity(customer).model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    @extend_schema(
        request=CustomerRequestSerializer,
        responses={201: CustomerResponseSerializer, 400: _BAD_REQUEST},
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/customers/"""
        dto = RegisterCustomerDTO.model_validate(request.data)
        customer = self._use_case.register_customer(dto.name, dto.email, dto.cpf)
        out = CustomerOutputDTO.from_entity(customer)
        return Response(out.model_dump(mode="json"), status=status.HTTP_201_CREATED)
