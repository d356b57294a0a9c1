from decimal import Decimal

from django.db import models

from .schedule import PAID, PENDING


class Investment(models.Model):
    """Compra del estudio (equipo, publicidad, software...) pagada en cuotas."""

    date = models.DateField(verbose_name="Fecha")
    category = models.CharField(max_length=100, default="publicidad", verbose_name="Categoría")
    description = models.CharField(max_length=255, verbose_name="Producto / Descripción")
    total_value = models.DecimalField(max_digits=12, decimal_places=2, verbose_name="Valor total")
    installments_count = models.PositiveIntegerField(default=1, verbose_name="Número de cuotas")
    installment_value = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        verbose_name="Valor por cuota"
    )
    payment_method = models.CharField(max_length=50, default="tarjeta", verbose_name="Forma de pago")
    product_url = models.URLField(blank=True, verbose_name="Link del producto")
    product_image_url = models.URLField(blank=True, verbose_name="Imagen del producto")

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.description} - {self.total_value}"

    class Meta:
        verbose_name = "Inversión"
        verbose_name_plural = "Inversiones"
        ordering = ['-date']


class Installment(models.Model):
    STATUS_CHOICES = [
        (PENDING, 'Pendiente'),
        (PAID, 'Pagado'),
    ]

    investment = models.ForeignKey(Investment, on_delete=models.CASCADE, related_name="installments")
    installment_number = models.PositiveIntegerField()
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    due_date = models.DateField()
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=PENDING)
    paid_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Cuota {self.installment_number} de {self.investment.description}"

    class Meta:
        ordering = ['investment_id', 'installment_number']
        constraints = [
            models.UniqueConstraint(
                fields=['investment', 'installment_number'],
                name='unique_installment_number_per_investment',
            ),
        ]
