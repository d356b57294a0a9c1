import logging
from datetime import datetime, timedelta

from django.utils import timezone
from rest_framework import status, viewsets
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .amounts import compute_amounts
from .calendar import events_by_day, matches_search, sort_for_listing
from .models import Contract
from .serializers import ContractSerializer, ContractStatusSerializer, WorkflowSerializer
from .workflow import apply_template, ensure_delivery_tasks, new_id

logger = logging.getLogger(__name__)

TOGGLE_FLAGS = ("deposit_paid", "final_payment_paid", "event_completed")
FINAL_PAYMENT_REMINDER = "finalPayment"
REMINDER_LEAD = timedelta(minutes=30)


class ContractViewSet(viewsets.ModelViewSet):
    """
    CRUD de contratos.
    Los montos (total, seña y saldo) se recalculan y guardan en cada alta o edición.
    """

    queryset = Contract.objects.all()
    serializer_class = ContractSerializer
    permission_classes = [IsAuthenticated]

    def list(self, request, *args, **kwargs):
        search = request.query_params.get("search", "")
        contracts = [c for c in self.get_queryset() if matches_search(c, search)]
        contracts = sort_for_listing(contracts, timezone.localdate())
        return Response(self.get_serializer(contracts, many=True).data)

    def perform_create(self, serializer):
        contract = serializer.save()
        self._store_amounts(contract)

    def perform_update(self, serializer):
        contract = serializer.save()
        self._store_amounts(contract)

    def _store_amounts(self, contract):
        calc = compute_amounts(contract)
        contract.total_amount = calc.total_amount
        contract.deposit_amount = calc.deposit_amount
        contract.remaining_amount = calc.remaining_amount
        contract.save(update_fields=["total_amount", "deposit_amount", "remaining_amount", "updated_at"])
        logger.info(
            "Contrato %s: total=%s seña=%s saldo=%s",
            contract.pk, calc.total_amount, calc.deposit_amount, calc.remaining_amount,
        )

    def toggle(self, request, pk=None, flag=None):
        """Marca o desmarca seña pagada, saldo pagado o evento realizado."""
        contract = self.get_object()
        if flag not in TOGGLE_FLAGS:
            return Response({'detail': f'Campo no válido: {flag}'}, status=status.HTTP_400_BAD_REQUEST)
        setattr(contract, flag, not getattr(contract, flag))
        contract.save(update_fields=[flag, "updated_at"])
        return Response({flag: getattr(contract, flag)})

    def set_status(self, request, pk=None):
        contract = self.get_object()
        serializer = ContractStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        contract.status = serializer.validated_data["status"]
        contract.save(update_fields=["status", "updated_at"])
        return Response(self.get_serializer(contract).data)

    def final_payment_reminder(self, request, pk=None):
        """
        Programa el aviso de saldo 30 minutos antes del evento.
        Reemplaza cualquier aviso de saldo anterior.
        """
        contract = self.get_object()
        if not contract.event_date:
            return Response({'detail': 'El contrato no tiene fecha de evento'}, status=status.HTTP_400_BAD_REQUEST)
        try:
            event_time = datetime.strptime(contract.event_time or "00:00", "%H:%M").time()
        except ValueError:
            return Response({'detail': 'Hora de evento inválida'}, status=status.HTTP_400_BAD_REQUEST)

        event_at = timezone.make_aware(datetime.combine(contract.event_date, event_time))
        send_at = (event_at - REMINDER_LEAD).isoformat()
        contract.reminders = [
            r for r in (contract.reminders or []) if r.get("type") != FINAL_PAYMENT_REMINDER
        ] + [{"type": FINAL_PAYMENT_REMINDER, "send_at": send_at}]
        contract.save(update_fields=["reminders", "updated_at"])
        return Response({'reminders': contract.reminders})

    def calendar(self, request):
        today = timezone.localdate()
        try:
            year = int(request.query_params.get("year", today.year))
            month = int(request.query_params.get("month", today.month))
        except ValueError:
            return Response({'detail': 'Año o mes inválido'}, status=status.HTTP_400_BAD_REQUEST)
        if not 1 <= month <= 12:
            return Response({'detail': 'Año o mes inválido'}, status=status.HTTP_400_BAD_REQUEST)

        status_filter = request.query_params.get("status", "all")
        days = events_by_day(self.get_queryset(), year, month, status_filter)
        return Response({
            day: [self._session_data(session) for session in sessions]
            for day, sessions in days.items()
        })

    def _session_data(self, session):
        # el contrato completo, con fecha, hora y lugar de esa sesión
        data = dict(self.get_serializer(session["contract"]).data)
        data.update({k: v for k, v in session.items() if k != "contract"})
        data["session"] = data.pop("index")
        return data

    def workflow(self, request, pk=None):
        """Workflow del contrato con las tareas de entrega de sus productos."""
        contract = self.get_object()
        return Response({'workflow': ensure_delivery_tasks(contract.workflow, contract.store_items)})

    def update_workflow(self, request, pk=None):
        contract = self.get_object()
        serializer = WorkflowSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        if "template" in serializer.validated_data:
            workflow = apply_template(serializer.validated_data["template"])
        else:
            workflow = [
                {**cat, "id": cat.get("id") or new_id(), "tasks": [
                    {**task, "id": task.get("id") or new_id()} for task in cat.get("tasks", [])
                ]}
                for cat in serializer.validated_data["workflow"]
            ]
        contract.workflow = ensure_delivery_tasks(workflow, contract.store_items)
        contract.save(update_fields=["workflow", "updated_at"])
        logger.info("Contrato %s: workflow actualizado (%s categorías)", contract.pk, len(contract.workflow))
        return Response({'workflow': contract.workflow})
