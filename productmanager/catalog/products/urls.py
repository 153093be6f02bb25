from rest_framework.routers import DefaultRouter

from .views import ProductViewSet

router = DefaultRouter(trailing_slash=False)
router.include_root_view = False
router.register(r"products", ProductViewSet, basename="api-products")

urlpatterns = router.urls
