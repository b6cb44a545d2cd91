from datetime import datetime, timedelta
from typing import Optional, Tuple

from medtransport.core.config import settings
from medtransport.core.exceptions import RangeErrorCode, RangeValidationError
from medtransport.core.utils import parse_instant


def validate_range(from_raw: str, to_raw: str, max_days: Optional[int] = None) -> Tuple[datetime, datetime]:
    """
    Validate a ``[from, to)`` schedule window.

    Rules are checked in order and the first failure wins: unparseable
    ``from``, unparseable ``to``, empty or backwards window, window longer
    than ``max_days``. The length is the raw instant difference over a fixed
    24h day, so DST never enters into it.

    Returns naive UTC ``(from_date, to_date)``.
    """
    if max_days is None:
        max_days = settings.SCHEDULE_RANGE_MAX_DAYS

    from_date = parse_instant(from_raw)
    if from_date is None:
        raise RangeValidationError(RangeErrorCode.INVALID_FROM)

    to_date = parse_instant(to_raw)
    if to_date is None:
        raise RangeValidationError(RangeErrorCode.INVALID_TO)

    if to_date <= from_date:
        raise RangeValidationError(RangeErrorCode.INVALID_RANGE)

    if (to_date - from_date) / timedelta(days=1) > max_days:
        raise RangeValidationError(RangeErrorCode.RANGE_TOO_LARGE)

    return from_date, to_date
