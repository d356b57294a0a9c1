from decimal import Decimal

from django.db import models

from .calendar import BOOKING_STATUSES


class Contract(models.Model):
    """Contrato de un cliente del estudio (evento, servicios contratados y pagos)."""

    STATUS_CHOICES = [(s, s.replace("_", " ").capitalize()) for s in BOOKING_STATUSES]

    client_name = models.CharField(max_length=200)
    client_email = models.EmailField(blank=True)
    client_phone = models.CharField(max_length=40, blank=True)

    event_type = models.CharField(max_length=100, blank=True)
    event_date = models.DateField(null=True, blank=True)
    event_time = models.CharField(max_length=5, blank=True)  # HH:MM
    event_location = models.CharField(max_length=255, blank=True)
    contract_date = models.DateField(null=True, blank=True)

    package_title = models.CharField(max_length=200, blank=True)
    package_duration = models.CharField(max_length=100, blank=True)
    payment_method = models.CharField(max_length=50, blank=True)

    # [{"name": ..., "price": "R$ 1.200", "quantity": 1}, ...]
    services = models.JSONField(default=list, blank=True)
    # [{"name": ..., "price": 150.0, "quantity": 2}, ...]
    store_items = models.JSONField(default=list, blank=True)
    travel_fee = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))

    # último cálculo guardado; total_amount también sirve de respaldo si no hay servicios
    total_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    deposit_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    remaining_amount = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)

    deposit_paid = models.BooleanField(default=False)
    final_payment_paid = models.BooleanField(default=False)
    event_completed = models.BooleanField(default=False)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, blank=True)

    message = models.TextField(blank=True)
    form_snapshot = models.JSONField(null=True, blank=True)
    reminders = models.JSONField(default=list, blank=True)
    # categorías con tareas; ver contracts/workflow.py
    workflow = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.client_name} - {self.event_date or 'sin fecha'}"

    class Meta:
        ordering = ["-created_at"]
