"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Tuple
from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Advance by calendar months, clamping to the last day of shorter months"""
    return from_date + relativedelta(months=months)


def start_of_week(day: date) -> date:
    """Monday of the week containing `day`"""
    return day - timedelta(days=day.weekday())


def month_bounds(day: date) -> Tuple[date, date]:
    """First and last day of the month containing `day`"""
    first = day.replace(day=1)
    last = first + relativedelta(months=1) - timedelta(days=1)
    return first, last
