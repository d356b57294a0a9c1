from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import ContractViewSet

router = DefaultRouter()
router.register(r'contracts', ContractViewSet, basename='contract')

# Las rutas propias van antes del router para que "calendar" no se tome como id
urlpatterns = [
    path('contracts/calendar/', ContractViewSet.as_view({'get': 'calendar'}), name='contract-calendar'),
    path('contracts/<int:pk>/toggle/<str:flag>/', ContractViewSet.as_view({'post': 'toggle'}), name='contract-toggle'),
    path('contracts/<int:pk>/status/', ContractViewSet.as_view({'patch': 'set_status'}), name='contract-status'),
    path(
        'contracts/<int:pk>/final-payment-reminder/',
        ContractViewSet.as_view({'post': 'final_payment_reminder'}),
        name='contract-final-payment-reminder',
    ),
    path(
        'contracts/<int:pk>/workflow/',
        ContractViewSet.as_view({'get': 'workflow', 'patch': 'update_workflow'}),
        name='contract-workflow',
    ),
    path('', include(router.urls)),
]
