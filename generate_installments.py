import os
import django

# Configurar Django
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings")
django.setup()

from investments.models import Investment
from investments.services import create_installments_for


def run():
    print("🔵 Generando cuotas para inversiones sin installments...")

    # Todas las inversiones que todavía no tienen cuotas
    investments = Investment.objects.filter(installments__isnull=True)

    total = 0
    for inv in investments:
        if create_installments_for(inv):
            total += 1

    print(f"✅ Listo: Se generaron cuotas para {total} inversiones.")


if __name__ == "__main__":
    run()
