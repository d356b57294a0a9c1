"""Tests for installment persistence and regeneration."""

from datetime import date
from decimal import Decimal

import pytest

from investments.models import Installment, Investment
from investments.schedule import PAID, PENDING
from investments.services import (
    BASE_CATEGORIES,
    create_installments_for,
    investment_status,
    known_categories,
    mark_installment,
    needs_regeneration,
    regenerate_installments,
    save_investment,
    schedule_snapshot,
)

pytestmark = pytest.mark.django_db


@pytest.fixture
def lens() -> Investment:
    """Lens bought in three installments."""
    return save_investment(Investment(
        date=date(2024, 1, 31),
        category="equipo",
        description="Lente 50mm 1.8",
        total_value=Decimal("100.00"),
        installments_count=3,
    ))


def _amounts(investment):
    return [i.amount for i in investment.installments.order_by("installment_number")]


class TestSaveInvestment:
    def test_new_investment_gets_schedule(self, lens: Investment) -> None:
        installments = list(lens.installments.order_by("installment_number"))

        assert [i.amount for i in installments] == [Decimal("33.34"), Decimal("33.33"), Decimal("33.33")]
        assert [i.due_date for i in installments] == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31)]
        assert all(i.status == PENDING and i.paid_at is None for i in installments)
        assert lens.installment_value == Decimal("33.33")

    def test_unrelated_edit_keeps_installments(self, lens: Investment) -> None:
        before_ids = set(lens.installments.values_list("id", flat=True))
        first = lens.installments.get(installment_number=1)
        mark_installment(first, True)

        previous = schedule_snapshot(lens)
        lens.description = "Lente 50mm f/1.8 STM"
        save_investment(lens, previous)

        assert set(lens.installments.values_list("id", flat=True)) == before_ids
        assert lens.installments.get(installment_number=1).status == PAID

    def test_schedule_edit_regenerates_everything(self, lens: Investment) -> None:
        before_ids = set(lens.installments.values_list("id", flat=True))
        mark_installment(lens.installments.get(installment_number=1), True)

        previous = schedule_snapshot(lens)
        lens.total_value = Decimal("150.00")
        lens.installments_count = 4
        save_investment(lens, previous)

        assert _amounts(lens) == [Decimal("37.50")] * 4
        assert not before_ids & set(lens.installments.values_list("id", flat=True))
        assert not lens.installments.filter(status=PAID).exists()
        assert lens.installment_value == Decimal("37.50")

    def test_count_below_one_is_clamped(self) -> None:
        investment = save_investment(Investment(
            date=date(2024, 2, 1), description="Plugin", total_value=Decimal("30"), installments_count=0,
        ))

        assert investment.installments_count == 1
        assert _amounts(investment) == [Decimal("30.00")]


class TestRegeneration:
    def test_regenerating_twice_gives_same_schedule(self, lens: Investment) -> None:
        regenerate_installments(lens)
        first = [(i.installment_number, i.amount, i.due_date) for i in lens.installments.all()]
        regenerate_installments(lens)
        second = [(i.installment_number, i.amount, i.due_date) for i in lens.installments.all()]

        assert first == second
        assert lens.installments.count() == 3

    def test_failed_regeneration_keeps_old_installments(self, lens: Investment, monkeypatch) -> None:
        before = set(lens.installments.values_list("id", flat=True))

        def boom(*args, **kwargs):
            raise RuntimeError("store unavailable")

        monkeypatch.setattr(Installment.objects, "bulk_create", boom)
        with pytest.raises(RuntimeError):
            regenerate_installments(lens)

        assert set(lens.installments.values_list("id", flat=True)) == before

    def test_needs_regeneration(self, lens: Investment) -> None:
        previous = schedule_snapshot(lens)

        assert needs_regeneration(None, lens)
        assert not needs_regeneration(previous, lens)
        lens.date = date(2024, 2, 1)
        assert needs_regeneration(previous, lens)

    def test_create_does_not_duplicate(self, lens: Investment) -> None:
        assert create_installments_for(lens) == []
        assert lens.installments.count() == 3

    def test_unsaved_investment_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            create_installments_for(Investment(date=date(2024, 1, 1), total_value=Decimal("10")))
        with pytest.raises(ValueError):
            regenerate_installments(Investment(date=date(2024, 1, 1), total_value=Decimal("10")))

    def test_deleting_investment_deletes_installments(self, lens: Investment) -> None:
        lens.delete()

        assert Installment.objects.count() == 0


class TestPayments:
    def test_mark_and_unmark(self, lens: Investment) -> None:
        inst = lens.installments.get(installment_number=2)

        mark_installment(inst, True)
        inst.refresh_from_db()
        assert inst.status == PAID
        assert inst.paid_at is not None

        mark_installment(inst, False)
        inst.refresh_from_db()
        assert inst.status == PENDING
        assert inst.paid_at is None

    def test_investment_status(self, lens: Investment) -> None:
        assert investment_status(lens.installments.all()) == PENDING
        for inst in lens.installments.all():
            mark_installment(inst, True)
        assert investment_status(lens.installments.all()) == PAID

    def test_no_installments_is_pending(self) -> None:
        assert investment_status([]) == PENDING


class TestCategories:
    def test_base_and_used_categories(self, lens: Investment) -> None:
        save_investment(Investment(
            date=date(2024, 3, 1), category=" cursos ", description="Curso", total_value=Decimal("90"),
        ))

        assert known_categories() == BASE_CATEGORIES + ["cursos"]
