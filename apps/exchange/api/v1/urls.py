from django.urls import path, include
from rest_framework.routers import SimpleRouter

from apps.exchange.api.v1.views import ConversionViewSet, ExchangeViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'conversions', ConversionViewSet, basename='conversion')

urlpatterns = [
    path('exchange-rate', ExchangeViewSet.as_view({'get': 'exchange_rate'}), name='exchange-rate'),
    path('convert', ExchangeViewSet.as_view({'get': 'convert'}), name='convert'),
    path('', include(router.urls)),
]
