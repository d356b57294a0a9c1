from django.urls import path, include
from rest_framework.routers import DefaultRouter
from .views import InvestmentViewSet

router = DefaultRouter()
router.register(r'investments', InvestmentViewSet, basename='investment')

# /investments/                  (GET: Listar, POST: Crear)
# /investments/{id}/             (GET, PUT/PATCH: Actualizar y rehacer cuotas, DELETE)
# /investments/{id}/installments/{inst_id}/pay/  (PATCH: marcar pagada/pendiente)

urlpatterns = [
    path('investments/categories/', InvestmentViewSet.as_view({'get': 'categories'}), name='investment-categories'),
    path(
        'investments/<int:pk>/installments/<int:inst_pk>/pay/',
        InvestmentViewSet.as_view({'patch': 'pay_installment'}),
        name='pay-installment',
    ),
    path('', include(router.urls)),
]
