from __future__ import annotations

import json

import pytest

from src.invoice_periods.invoice_periods.analytics.service import AnalyticsService
from src.invoice_periods.invoice_periods.core.enums import InvoiceStatus
from src.invoice_periods.invoice_periods.core.exceptions import ValidationError
from src.invoice_periods.invoice_periods.invoices.memory_repository import InMemoryInvoiceRepository
from src.invoice_periods.invoice_periods.invoices.model import InvoiceFolder, InvoiceRecord


def _invoice(invoice_id, status, amount, **kwargs):
    defaults = dict(
        user_id="u1",
        issue_date="2024-01-15",
        total_hours=10,
        total_days=2,
        client_name="Acme",
        folder_id="f1",
    )
    defaults.update(kwargs)
    return InvoiceRecord(invoice_id=invoice_id, status=status, total_amount=amount, **defaults)


@pytest.fixture
def repo():
    repo = InMemoryInvoiceRepository()
    repo.add_folder(InvoiceFolder(folder_id="f1", user_id="u1", name="Client work"))
    repo.add_folder(InvoiceFolder(folder_id="f2", user_id="u1", name="Old", deleted_at="2024-01-01"))
    repo.add_folder(InvoiceFolder(folder_id="f3", user_id="u2", name="Someone else"))

    repo.add_invoice(_invoice("i1", InvoiceStatus.PAID, 1000, issue_date="2024-01-15"))
    repo.add_invoice(_invoice("i2", InvoiceStatus.SENT, 500, issue_date="2024-02-01", currency="PHP"))
    repo.add_invoice(_invoice("i3", InvoiceStatus.OVERDUE, 250, issue_date="2024-02-20", client_name=""))
    repo.add_invoice(_invoice("i4", InvoiceStatus.DRAFT, 100, folder_id=None, issue_date="2023-12-30"))
    repo.add_invoice(_invoice("i5", InvoiceStatus.PAID, 9999, is_archived=True))
    repo.add_invoice(_invoice("i6", InvoiceStatus.PAID, 7777, deleted_at="2024-03-01"))
    repo.add_invoice(_invoice("i7", InvoiceStatus.PAID, 4242, user_id="u2", folder_id="f3"))
    return repo


def test_folder_analytics_aggregates_active_invoices(repo):
    result = AnalyticsService(repo).folder_analytics(user_id="u1", folder_id="f1")

    assert result.folder_name == "Client work"
    assert result.invoice_count == 3
    assert result.total_amount == 1750
    assert result.total_hours == 30
    assert result.total_days == 6
    assert result.paid_amount == 1000
    assert result.pending_amount == 500
    assert result.overdue_amount == 250
    assert (result.paid_count, result.sent_count, result.overdue_count, result.draft_count) == (1, 1, 1, 0)
    assert result.currency_breakdown["USD"].count == 2
    assert result.currency_breakdown["PHP"].total == 500
    assert result.client_breakdown["Unknown"].total == 250
    assert result.oldest_invoice_date == "2024-01-15"
    assert result.newest_invoice_date == "2024-02-20"


def test_folder_analytics_hides_foreign_and_deleted_folders(repo):
    svc = AnalyticsService(repo)

    assert svc.folder_analytics(user_id="u1", folder_id="f2") is None
    assert svc.folder_analytics(user_id="u1", folder_id="f3") is None
    assert svc.folder_analytics(user_id="u1", folder_id="missing") is None


def test_all_folders_skips_deleted(repo):
    result = AnalyticsService(repo).all_folders_analytics(user_id="u1")

    assert [a.folder_id for a in result] == ["f1"]


def test_global_analytics_archived_toggle(repo):
    svc = AnalyticsService(repo)

    assert svc.global_analytics(user_id="u1").invoice_count == 4
    assert svc.global_analytics(user_id="u1", include_archived=True).invoice_count == 5


def test_unfiled_analytics_only_counts_own_invoices(repo):
    result = AnalyticsService(repo).unfiled_analytics(user_id="u1")

    assert result.invoice_count == 1
    assert result.draft_count == 1
    assert result.folder_id is None


def test_empty_set_has_zero_averages():
    result = AnalyticsService(InMemoryInvoiceRepository()).global_analytics(user_id="nobody")

    assert result.invoice_count == 0
    assert result.average_amount == 0
    assert result.average_hours_per_invoice == 0
    assert result.oldest_invoice_date is None


def test_analytics_by_status(repo):
    result = AnalyticsService(repo).analytics_by_status(user_id="u1")

    assert set(result) == {"PAID", "SENT", "OVERDUE", "DRAFT"}
    assert result["PAID"].count == 1
    assert result["PAID"].average_amount == 1000


def test_analytics_by_client_sorted_by_amount(repo):
    result = AnalyticsService(repo).analytics_by_client(user_id="u1")

    assert [c.client_name for c in result] == ["Acme", "Unknown"]
    acme = result[0]
    assert acme.invoice_count == 3
    assert acme.paid_amount == 1000
    assert acme.pending_amount == 600
    assert acme.last_invoice_date == "2024-02-01"


def test_monthly_analytics_covers_all_months(repo):
    result = AnalyticsService(repo).monthly_analytics(user_id="u1", year=2024)

    assert [m.month for m in result] == [f"2024-{m:02d}" for m in range(1, 13)]
    assert (result[0].invoiced, result[0].paid, result[0].count) == (1000, 1000, 1)
    assert (result[1].invoiced, result[1].paid, result[1].count) == (750, 0, 2)
    assert result[1].hours == 20
    assert all(m.count == 0 for m in result[2:])


def test_load_seed(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps(
            {
                "folders": [{"id": "f1", "userId": "u1", "name": "Retainers"}],
                "invoices": [
                    {
                        "id": "i1",
                        "userId": "u1",
                        "folderId": "f1",
                        "status": "PAID",
                        "issueDate": "2024-01-31",
                        "totalAmount": 1200,
                        "totalHours": 24,
                        "totalDays": 3,
                        "to": {"name": "Globex"},
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    repo = InMemoryInvoiceRepository()

    assert repo.load_seed(seed) == 1
    assert repo.user_ids() == ["u1"]
    result = AnalyticsService(repo).folder_analytics(user_id="u1", folder_id="f1")
    assert result.paid_amount == 1200
    assert "Globex" in result.client_breakdown


def test_load_seed_rejects_unknown_status(tmp_path):
    seed = tmp_path / "seed.json"
    seed.write_text(
        json.dumps({"invoices": [{"id": "i1", "userId": "u1", "status": "LOST", "issueDate": "2024-01-31"}]}),
        encoding="utf-8",
    )

    with pytest.raises(ValidationError):
        InMemoryInvoiceRepository().load_seed(seed)


@pytest.mark.parametrize(
    "overrides",
    [
        {"totalAmount": "abc"},
        {"totalHours": "nan"},
        {"totalDays": 2.5},
        {"isArchived": "yes"},
    ],
)
def test_load_seed_rejects_malformed_fields(tmp_path, overrides):
    raw = {"id": "i1", "userId": "u1", "status": "PAID", "issueDate": "2024-01-31"}
    raw.update(overrides)
    seed = tmp_path / "seed.json"
    seed.write_text(json.dumps({"invoices": [raw]}), encoding="utf-8")

    with pytest.raises(ValidationError):
        InMemoryInvoiceRepository().load_seed(seed)
