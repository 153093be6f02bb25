# productmanager/catalog/products/views.py
import logging
from django.urls import reverse
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from productmanager.utils.response import (
    api_response,
    not_found_response,
    server_error_response,
    validation_error_response,
)
from productmanager.utils.exception_handler import normalize_validation_errors
from .filters import API_PAGE_SIZE
from .results import Outcome
from .serializers import (
    ProductFullSerializer,
    ProductListQuerySerializer,
    ProductListSerializer,
    ProductStatusSerializer,
    ProductWriteSerializer,
)
from .services import ProductService

logger = logging.getLogger(__name__)

LIST_PARAMETERS = [
    OpenApiParameter("name", OpenApiTypes.STR, description="Case-insensitive part of the product name"),
    OpenApiParameter("minPrice", OpenApiTypes.DECIMAL),
    OpenApiParameter("maxPrice", OpenApiTypes.DECIMAL),
    OpenApiParameter("isActive", OpenApiTypes.BOOL),
    OpenApiParameter("sortBy", OpenApiTypes.STR, enum=["name", "price"]),
    OpenApiParameter("ascending", OpenApiTypes.BOOL),
    OpenApiParameter("page", OpenApiTypes.INT),
    OpenApiParameter("pageSize", OpenApiTypes.INT, description=f"Defaults to {API_PAGE_SIZE}"),
]


@extend_schema(tags=["Products"])
class ProductViewSet(viewsets.ViewSet):
    """
    JSON API over the product catalog.

    Every handler goes through ProductService, so the storage backend
    (ORM or raw SQL) is whatever PRODUCT_REPOSITORY_BACKEND selects.
    """
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = "[^/]+"

    def get_service(self):
        return ProductService()

    def _handle_exception(self, exc: Exception, where: str = ""):
        logger.exception("%s: %s", where, str(exc))
        return server_error_response()

    def _result_response(self, result, success_status=status.HTTP_200_OK, headers=None):
        if result.outcome is Outcome.OK:
            return api_response(success_status, result.value, headers=headers)
        if result.outcome is Outcome.NOT_FOUND:
            return not_found_response(result.reason or "Product not found.")
        if result.outcome is Outcome.INVALID:
            return validation_error_response(result.errors)
        return server_error_response(result.reason)

    @extend_schema(
        summary="List products (filter, sort, paginate)",
        parameters=LIST_PARAMETERS,
        responses={200: ProductListSerializer},
    )
    def list(self, request):
        query = ProductListQuerySerializer(data=request.query_params.dict())
        if not query.is_valid():
            return validation_error_response(normalize_validation_errors(query.errors))
        try:
            page = self.get_service().list_products(query.to_filter(default_page_size=API_PAGE_SIZE))
            return api_response(status.HTTP_200_OK, page.as_dict())
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.list")

    @extend_schema(
        summary="Retrieve a product",
        responses={200: ProductFullSerializer, 404: OpenApiResponse(description="Product not found")},
    )
    def retrieve(self, request, pk=None):
        try:
            product = self.get_service().get_product(pk)
            if product is None:
                return not_found_response(f"Product {pk} not found")
            return api_response(status.HTTP_200_OK, product)
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.retrieve")

    @extend_schema(
        summary="Create a product",
        request=ProductWriteSerializer,
        responses={201: ProductFullSerializer, 400: OpenApiResponse(description="Validation errors")},
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(normalize_validation_errors(serializer.errors))
        try:
            result = self.get_service().create_product(serializer.validated_data)
            headers = None
            if result.ok:
                location = reverse("api-products-detail", kwargs={"pk": result.value["id"]})
                headers = {"Location": request.build_absolute_uri(location)}
            return self._result_response(result, status.HTTP_201_CREATED, headers=headers)
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.create")

    @extend_schema(
        summary="Update a product",
        request=ProductWriteSerializer,
        responses={
            200: ProductFullSerializer,
            400: OpenApiResponse(description="Validation errors"),
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def update(self, request, pk=None):
        serializer = ProductWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(normalize_validation_errors(serializer.errors))
        try:
            result = self.get_service().update_product(pk, serializer.validated_data)
            return self._result_response(result)
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.update")

    @extend_schema(
        summary="Delete a product",
        responses={204: None, 404: OpenApiResponse(description="Product not found")},
    )
    def destroy(self, request, pk=None):
        try:
            result = self.get_service().delete_product(pk)
            if result.ok:
                return api_response(status.HTTP_204_NO_CONTENT)
            return self._result_response(result)
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.destroy")

    @extend_schema(
        summary="Set product status (put on sale / take off sale)",
        request=ProductStatusSerializer,
        responses={
            200: ProductFullSerializer,
            400: OpenApiResponse(description="Validation errors"),
            404: OpenApiResponse(description="Product not found"),
        },
    )
    @action(detail=True, methods=["put"], url_path="status")
    def set_status(self, request, pk=None):
        serializer = ProductStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return validation_error_response(normalize_validation_errors(serializer.errors))
        try:
            result = self.get_service().set_product_status(pk, serializer.validated_data["is_active"])
            return self._result_response(result)
        except Exception as exc:
            return self._handle_exception(exc, "ProductViewSet.set_status")
