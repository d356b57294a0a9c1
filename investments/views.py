import logging

from django.shortcuts import get_object_or_404
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .models import Installment, Investment
from .schedule import PAID
from .serializers import InstallmentPaymentSerializer, InstallmentSerializer, InvestmentSerializer
from .services import known_categories, mark_installment

logger = logging.getLogger(__name__)


class InvestmentViewSet(viewsets.ModelViewSet):
    """
    CRUD de inversiones.
    Al borrar una inversión se borran también todas sus cuotas.
    """

    serializer_class = InvestmentSerializer
    permission_classes = [IsAuthenticated]

    def get_queryset(self):
        return Investment.objects.prefetch_related('installments')

    def pay_installment(self, request, pk=None, inst_pk=None):
        """
        Marca una cuota como pagada o pendiente.
        PATCH body opcional: { "paid": true }; sin body alterna el estado.
        """
        inst = get_object_or_404(Installment, pk=inst_pk, investment_id=pk)

        serializer = InstallmentPaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        paid = serializer.validated_data.get('paid')
        if paid is None:
            paid = inst.status != PAID

        mark_installment(inst, paid)
        logger.info("Cuota %s de la inversión %s: %s", inst.installment_number, pk, inst.status)
        return Response(InstallmentSerializer(inst).data)

    def categories(self, request):
        return Response(known_categories(Investment.objects.only('category')))
