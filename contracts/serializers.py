from rest_framework import serializers

from .amounts import compute_amounts
from .calendar import booking_status
from .models import Contract
from .workflow import progress


class ContractSerializer(serializers.ModelSerializer):
    amounts = serializers.SerializerMethodField()
    booking_status = serializers.SerializerMethodField()
    workflow_progress = serializers.SerializerMethodField()

    class Meta:
        model = Contract
        fields = [
            'id', 'client_name', 'client_email', 'client_phone',
            'event_type', 'event_date', 'event_time', 'event_location', 'contract_date',
            'package_title', 'package_duration', 'payment_method',
            'services', 'store_items', 'travel_fee',
            'total_amount', 'deposit_amount', 'remaining_amount',
            'deposit_paid', 'final_payment_paid', 'event_completed', 'status',
            'message', 'form_snapshot', 'reminders', 'workflow',
            'created_at', 'updated_at',
            'amounts', 'booking_status', 'workflow_progress',
        ]
        read_only_fields = [
            'deposit_amount', 'remaining_amount', 'reminders', 'workflow',
            'created_at', 'updated_at',
        ]

    def get_amounts(self, obj):
        # siempre recalculado, nunca se toma lo guardado
        return compute_amounts(obj).as_dict()

    def get_booking_status(self, obj):
        return booking_status(obj)

    def get_workflow_progress(self, obj):
        done, total = progress(obj.workflow)
        return {'done': done, 'total': total}

    def _validate_items(self, value):
        if not isinstance(value, list) or not all(isinstance(item, dict) for item in value):
            raise serializers.ValidationError("Debe ser una lista de objetos.")
        return value

    def validate_services(self, value):
        return self._validate_items(value)

    def validate_store_items(self, value):
        return self._validate_items(value)

    def validate_travel_fee(self, value):
        if value < 0:
            raise serializers.ValidationError("El costo de traslado no puede ser negativo.")
        return value


class ContractStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Contract.STATUS_CHOICES, allow_blank=True)


class WorkflowTaskSerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    title = serializers.CharField(max_length=200)
    done = serializers.BooleanField(default=False)
    due = serializers.CharField(required=False, allow_null=True, allow_blank=True)  # YYYY-MM-DD
    note = serializers.CharField(required=False, allow_blank=True)


class WorkflowCategorySerializer(serializers.Serializer):
    id = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(max_length=100)
    tasks = WorkflowTaskSerializer(many=True, required=False)


class WorkflowSerializer(serializers.Serializer):
    """
    Edición del workflow: la lista completa de categorías o una plantilla
    (`{"categories": [...]}`) que la reemplaza.
    """

    workflow = WorkflowCategorySerializer(many=True, required=False)
    template = serializers.DictField(required=False)

    def validate_template(self, value):
        categories = WorkflowCategorySerializer(data=value.get("categories", []), many=True)
        categories.is_valid(raise_exception=True)
        return {"categories": categories.validated_data}

    def validate(self, attrs):
        if ("workflow" in attrs) == ("template" in attrs):
            raise serializers.ValidationError("Enviar workflow o template, no ambos.")
        return attrs
