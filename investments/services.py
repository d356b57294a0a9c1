import logging

from django.db import transaction
from django.utils import timezone

from utils.money import to_decimal
from .models import Installment, Investment
from .schedule import PAID, PENDING, generate_installments, installment_value

logger = logging.getLogger(__name__)

BASE_CATEGORIES = ['publicidad', 'equipo', 'software', 'otros']


def _build(investment):
    return [
        Installment(
            investment=investment,
            installment_number=s.installment_number,
            amount=s.amount,
            due_date=s.due_date,
            status=s.status,
            paid_at=s.paid_at,
        )
        for s in generate_installments(
            investment.pk, investment.date, investment.total_value, investment.installments_count
        )
    ]


def create_installments_for(investment):
    """
    Crea las cuotas de una inversión que todavía no tiene ninguna.
    """
    if investment.pk is None:
        raise ValueError("La inversión debe guardarse antes de generar sus cuotas.")

    with transaction.atomic():
        if investment.installments.exists():
            return []
        created = Installment.objects.bulk_create(_build(investment))

    logger.info("Cuotas creadas para la inversión %s: %d", investment.pk, len(created))
    return created


def regenerate_installments(investment):
    """
    Borra todas las cuotas de la inversión y las vuelve a crear.
    Se hace en una sola transacción: nunca quedan visibles cuotas viejas y nuevas a la vez.
    Las fechas de pago (paid_at) anteriores se pierden.
    """
    if investment.pk is None:
        raise ValueError("La inversión debe guardarse antes de generar sus cuotas.")

    with transaction.atomic():
        deleted, _ = Installment.objects.filter(investment=investment).delete()
        created = Installment.objects.bulk_create(_build(investment))

    logger.info(
        "Cuotas regeneradas para la inversión %s: %d borradas, %d creadas",
        investment.pk, deleted, len(created),
    )
    return created


def schedule_snapshot(investment):
    return (investment.date, to_decimal(investment.total_value), int(investment.installments_count or 1))


def needs_regeneration(previous, investment) -> bool:
    """`previous` es el schedule_snapshot anterior (None si la inversión es nueva)."""
    if previous is None:
        return True
    return previous != schedule_snapshot(investment)


def save_investment(investment, previous=None):
    """
    Guarda la inversión y rehace su plan de cuotas si cambió la fecha, el total o el número de cuotas.
    `previous` es el schedule_snapshot anterior (None para una inversión nueva).
    """
    investment.installments_count = max(1, int(investment.installments_count or 1))
    investment.installment_value = installment_value(investment.total_value, investment.installments_count)

    with transaction.atomic():
        investment.save()
        if needs_regeneration(previous, investment):
            regenerate_installments(investment)
    return investment


def mark_installment(installment, paid: bool):
    installment.status = PAID if paid else PENDING
    installment.paid_at = timezone.now() if paid else None
    installment.save(update_fields=['status', 'paid_at'])
    return installment


def investment_status(installments) -> str:
    installments = list(installments)
    if installments and all(i.status == PAID for i in installments):
        return PAID
    return PENDING


def known_categories(investments=None):
    if investments is None:
        investments = Investment.objects.all()
    categories = list(BASE_CATEGORIES)
    for inv in investments:
        category = (inv.category or '').strip()
        if category and category not in categories:
            categories.append(category)
    return categories
