from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import OrderViewSet

app_name = 'orders'

router = SimpleRouter(trailing_slash=False)
router.register(r'order', OrderViewSet, basename='order')

urlpatterns = [
    path('', include(router.urls)),
]

# Available endpoints:
# GET    /api/order                - List own orders
# POST   /api/order                - Place order
# DELETE /api/order/{id}/delete    - Delete own order
