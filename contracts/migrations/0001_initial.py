from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Contract",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("client_name", models.CharField(max_length=200)),
                ("client_email", models.EmailField(blank=True, max_length=254)),
                ("client_phone", models.CharField(blank=True, max_length=40)),
                ("event_type", models.CharField(blank=True, max_length=100)),
                ("event_date", models.DateField(blank=True, null=True)),
                ("event_time", models.CharField(blank=True, max_length=5)),
                ("event_location", models.CharField(blank=True, max_length=255)),
                ("contract_date", models.DateField(blank=True, null=True)),
                ("package_title", models.CharField(blank=True, max_length=200)),
                ("package_duration", models.CharField(blank=True, max_length=100)),
                ("payment_method", models.CharField(blank=True, max_length=50)),
                ("services", models.JSONField(blank=True, default=list)),
                ("store_items", models.JSONField(blank=True, default=list)),
                ("travel_fee", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=12)),
                ("total_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("deposit_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("remaining_amount", models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True)),
                ("deposit_paid", models.BooleanField(default=False)),
                ("final_payment_paid", models.BooleanField(default=False)),
                ("event_completed", models.BooleanField(default=False)),
                (
                    "status",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("pending", "Pending"),
                            ("booked", "Booked"),
                            ("delivered", "Delivered"),
                            ("cancelled", "Cancelled"),
                            ("pending_payment", "Pending payment"),
                            ("confirmed", "Confirmed"),
                            ("pending_approval", "Pending approval"),
                            ("released", "Released"),
                        ],
                        max_length=20,
                    ),
                ),
                ("message", models.TextField(blank=True)),
                ("form_snapshot", models.JSONField(blank=True, null=True)),
                ("reminders", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={"ordering": ["-created_at"]},
        ),
    ]
