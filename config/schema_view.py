"""OpenAPI document view for the product API."""
import logging

from drf_spectacular.views import SpectacularAPIView
from rest_framework import permissions

from productmanager.utils.response import server_error_response

logger = logging.getLogger(__name__)


class ProductSchemaView(SpectacularAPIView):
    """Public schema endpoint; a generation failure is logged and answered with the generic 500 body."""

    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        try:
            return super().get(request, *args, **kwargs)
        except Exception:
            logger.exception("OpenAPI schema generation failed")
            return server_error_response()
