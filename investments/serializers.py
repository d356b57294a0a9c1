from rest_framework import serializers

from .models import Installment, Investment
from .schedule import per_installment_value
from .services import investment_status, save_investment, schedule_snapshot


class InstallmentSerializer(serializers.ModelSerializer):
    class Meta:
        model = Installment
        fields = ['id', 'investment', 'installment_number', 'amount', 'due_date', 'status', 'paid_at']
        read_only_fields = fields


class InvestmentSerializer(serializers.ModelSerializer):
    """
    Alta y edición de inversiones.
    Guardar pasa por save_investment, que rehace las cuotas cuando hace falta.
    """

    installments = InstallmentSerializer(many=True, read_only=True)
    status = serializers.SerializerMethodField()
    per_installment_preview = serializers.SerializerMethodField()

    class Meta:
        model = Investment
        fields = [
            'id', 'date', 'category', 'description',
            'total_value', 'installments_count', 'installment_value',
            'payment_method', 'product_url', 'product_image_url',
            'created_at', 'installments', 'status', 'per_installment_preview',
        ]
        read_only_fields = ['id', 'installment_value', 'created_at']

    def get_status(self, obj):
        return investment_status(obj.installments.all())

    def get_per_installment_preview(self, obj):
        return per_installment_value(obj.total_value, obj.installments_count)

    def validate_total_value(self, value):
        if value <= 0:
            raise serializers.ValidationError("El valor total debe ser mayor que 0.")
        return value

    def validate_installments_count(self, value):
        if value < 1:
            raise serializers.ValidationError("Debe haber al menos una cuota.")
        return value

    def create(self, validated_data):
        return save_investment(Investment(**validated_data))

    def update(self, instance, validated_data):
        previous = schedule_snapshot(instance)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        return save_investment(instance, previous)


class InstallmentPaymentSerializer(serializers.Serializer):
    paid = serializers.BooleanField(required=False, allow_null=True, default=None)
