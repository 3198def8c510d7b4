import datetime

from dateutil.relativedelta import relativedelta

from .models import DateRange


def month_range(now):
    """First and last calendar day of `now`'s month, in UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)
    else:
        now = now.astimezone(datetime.timezone.utc)
    start = datetime.datetime(now.year, now.month, 1, tzinfo=datetime.timezone.utc)
    end = start + relativedelta(months=1, days=-1)
    return DateRange(start=start.date(), end=end.date())


def get_start_and_end_dates(now=None):
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    date_range = month_range(now)
    print(f"Date range: {date_range.start_str} to {date_range.end_str}")
    return date_range.start_str, date_range.end_str
