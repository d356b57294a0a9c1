from decimal import Decimal

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Investment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(verbose_name="Fecha")),
                ("category", models.CharField(default="publicidad", max_length=100, verbose_name="Categoría")),
                ("description", models.CharField(max_length=255, verbose_name="Producto / Descripción")),
                ("total_value", models.DecimalField(decimal_places=2, max_digits=12, verbose_name="Valor total")),
                ("installments_count", models.PositiveIntegerField(default=1, verbose_name="Número de cuotas")),
                ("installment_value", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12, verbose_name="Valor por cuota")),
                ("payment_method", models.CharField(default="tarjeta", max_length=50, verbose_name="Forma de pago")),
                ("product_url", models.URLField(blank=True, verbose_name="Link del producto")),
                ("product_image_url", models.URLField(blank=True, verbose_name="Imagen del producto")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Inversión",
                "verbose_name_plural": "Inversiones",
                "ordering": ["-date"],
            },
        ),
        migrations.CreateModel(
            name="Installment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("installment_number", models.PositiveIntegerField()),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                ("due_date", models.DateField()),
                ("status", models.CharField(choices=[("pendiente", "Pendiente"), ("pagado", "Pagado")], default="pendiente", max_length=10)),
                ("paid_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "investment",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="installments",
                        to="investments.investment",
                    ),
                ),
            ],
            options={"ordering": ["investment_id", "installment_number"]},
        ),
        migrations.AddConstraint(
            model_name="installment",
            constraint=models.UniqueConstraint(
                fields=("investment", "installment_number"),
                name="unique_installment_number_per_investment",
            ),
        ),
    ]
