"""Date window and base-time planning for village forecast requests.

The service publishes a new forecast batch every three hours starting at
02:00 local time. Callers pass the current time explicitly so that both
functions stay pure.
"""

from datetime import datetime, timedelta

from threeday.models.common import DateStr, TimeSlot

BASE_TIME_SLOTS: tuple[int, ...] = (2, 5, 8, 11, 14, 17, 20, 23)
WINDOW_DAYS = 3


def compute_date_window(now: datetime, days: int = WINDOW_DAYS) -> list[DateStr]:
    """Today plus the following calendar days as YYYYMMDD strings."""
    today = now.date()
    return [(today + timedelta(days=i)).strftime("%Y%m%d") for i in range(days)]


def compute_base_time(now: datetime) -> TimeSlot:
    """Most recent published slot for the hour of ``now``.

    Hours before 02:00 map to "2300" without moving the base date back a day.
    """
    hour = now.hour
    slot = BASE_TIME_SLOTS[-1]
    for start in BASE_TIME_SLOTS:
        if start <= hour < start + 3:
            slot = start
            break
    return f"{slot:02d}00"
