"""Validate an invoice seed file and print per-user totals.

Usage: python scripts/check_seed.py [seed.json]   (defaults to INVOICE_SEED_PATH)
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.invoice_periods.invoice_periods.analytics.service import AnalyticsService
from src.invoice_periods.invoice_periods.invoices.memory_repository import InMemoryInvoiceRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    seed_path = sys.argv[1] if len(sys.argv) > 1 else getattr(settings, "INVOICE_SEED_PATH", None)
    if not seed_path:
        raise SystemExit("No seed file given and INVOICE_SEED_PATH is not set")

    repo = InMemoryInvoiceRepository()
    count = repo.load_seed(Path(seed_path))
    analytics = AnalyticsService(repo)

    print(f"OK: {count} invoices in {seed_path}")
    for user_id in repo.user_ids():
        summary = analytics.global_analytics(user_id=user_id)
        print(f"  {user_id}: {summary.invoice_count} active, total {summary.total_amount:.2f}, paid {summary.paid_amount:.2f}")


if __name__ == "__main__":
    main()
