"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; period logic lives in services and pure functions.
"""

from datetime import date
from pathlib import Path

from src.invoice_periods.invoice_periods.container import build_container
from src.invoice_periods.invoice_periods.work_hours.generator import generate_work_hours_for_period
from src.invoice_periods.invoice_periods.work_hours.totals import calculate_work_totals


def main():
    container = build_container(invoice_seed_path=str(Path(__file__).with_name("invoices_seed.json")))

    period = container.period_service.detect("BOTH_15TH_AND_LAST", date(2024, 1, 10))
    print(period.label, period.start, period.end)

    days = generate_work_hours_for_period(period.start, period.end, container.default_hours_per_day)
    print(calculate_work_totals(days).to_dict())

    for option in container.period_service.options(date(2024, 1, 10)):
        print(" -", option.label)

    print(container.analytics_service.global_analytics(user_id="user_1").to_dict())


if __name__ == "__main__":
    main()
