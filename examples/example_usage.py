"""Example: drive the service layer directly.

Registers the next expected punch for employee 1 and prints the month's bank of hours.
"""

from ponto.common.datetime_utils import business_today
from ponto.main import create_container


def main():
    container = create_container()
    today = business_today(container.tz)

    next_punch = container.punch_service.next_expected_punch(1, today=today)
    if next_punch is not None:
        record = container.punch_service.punch(1, next_punch)
        print(f"{record.record_type.value} at {record.timestamp:%H:%M} ({record.reason})")

    result = container.bank_hours_service.bank_hours(1, today.replace(day=1), today)
    print(
        f"{result.start_date} .. {result.end_date}: overtime={result.total_overtime_hours:.2f}h "
        f"owed={result.total_owed_hours:.2f}h balance={result.balance_hours:+.2f}h"
    )


if __name__ == "__main__":
    main()
