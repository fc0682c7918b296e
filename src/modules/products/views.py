"""Product API views.

Exposes ``ProductService`` over HTTP using a DRF ViewSet.  Request bodies
are validated by ``validate_request`` before a handler runs; domain
exceptions raised by the service are translated into status codes here.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.mixins import ListModelMixin
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import error_response
from modules.core.validation import validate_request
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound, ProductPersistenceError
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ErrorSerializer,
    ProductCreateSerializer,
    ProductSerializer,
    ProductUpdateSerializer,
    ProductUpdateResponseSerializer,
)
from modules.products.services import ProductService

PRODUCT_NOT_FOUND = "Product not found"
PRODUCT_UPDATED = "Product updated successfully"

_not_found = OpenApiResponse(ErrorSerializer, description="Product not found")
_invalid = OpenApiResponse(ErrorSerializer, description="Invalid input")


def _failed(verb: str) -> OpenApiResponse:
    return OpenApiResponse(ErrorSerializer, description=f"Failed to {verb} product")


def _not_found_response() -> Response:
    return error_response(PRODUCT_NOT_FOUND, status.HTTP_404_NOT_FOUND)


def _internal_error_response(verb: str, exc: ProductPersistenceError) -> Response:
    return error_response(
        f"Failed to {verb} product",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        message=str(exc),
    )


@extend_schema(tags=["Products"])
class ProductViewSet(ListModelMixin, GenericViewSet):
    """ViewSet for Product CRUD operations.

    All ORM access goes through ``ProductService`` and the repository named
    by ``repository_class``.  No pagination, filtering or ordering.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    pagination_class = None
    filter_backends: list = []
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list_products()

    @extend_schema(
        summary="List all products",
        responses={200: ProductSerializer(many=True)},
    )
    def list(self, request: Request, *args, **kwargs) -> Response:
        """GET /api/v1/products/"""
        return super().list(request, *args, **kwargs)

    @extend_schema(
        summary="Retrieve a product by ID",
        responses={200: ProductSerializer, 404: _not_found},
    )
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return _not_found_response()
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        summary="Create a new product",
        request=ProductCreateSerializer,
        responses={201: ProductSerializer, 400: _invalid, 500: _failed("create")},
    )
    @validate_request(CreateProductDTO)
    def create(self, request: Request, dto: CreateProductDTO) -> Response:
        """POST /api/v1/products/"""
        try:
            product = self._service.create_product(dto)
        except ProductPersistenceError as exc:
            return _internal_error_response("create", exc)

        out = ProductSerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(
        summary="Update a product by ID",
        request=ProductUpdateSerializer,
        responses={
            200: ProductUpdateResponseSerializer,
            400: _invalid,
            404: _not_found,
            500: _failed("update"),
        },
    )
    @validate_request(UpdateProductDTO)
    def update(
        self, request: Request, pk: str, *, dto: UpdateProductDTO
    ) -> Response:
        """PUT/PATCH /api/v1/products/{pk}/

        Only the supplied fields change.
        """
        try:
            product = self._service.update_product(pk, dto)
        except ProductNotFound:
            return _not_found_response()
        except ProductPersistenceError as exc:
            return _internal_error_response("update", exc)

        return Response(
            {"message": PRODUCT_UPDATED, "product": ProductSerializer(product).data}
        )

    @extend_schema(
        summary="Partially update a product by ID",
        request=ProductUpdateSerializer,
        responses={
            200: ProductUpdateResponseSerializer,
            400: _invalid,
            404: _not_found,
            500: _failed("update"),
        },
    )
    def partial_update(self, request: Request, pk: str) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    @extend_schema(
        summary="Delete a product by ID",
        responses={
            204: OpenApiResponse(description="Product deleted"),
            404: _not_found,
            500: _failed("delete"),
        },
    )
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            self._service.delete_product(pk)
        except ProductNotFound:
            return _not_found_response()
        except ProductPersistenceError as exc:
            return _internal_error_response("delete", exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
