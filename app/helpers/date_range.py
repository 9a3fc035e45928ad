from datetime import date, datetime
from typing import Optional

from app.helpers.exception_handler import CustomException


def check_date_range(start_date: Optional[date], end_date: Optional[date]) -> None:
    if start_date and end_date and start_date > end_date:
        raise CustomException(http_code=400, code='400', message='start_date must be on or before end_date')


def at_current_time(day: date) -> datetime:
    """The given calendar day at the current wall-clock time of day."""
    return datetime.combine(day, datetime.now().time().replace(microsecond=0))
