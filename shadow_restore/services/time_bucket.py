"""Turn a calendar date plus a time bucket into a target timestamp."""

from datetime import datetime
from typing import Iterable, Optional, Union

from ..config import Settings, settings as default_settings
from ..errors import DateParseError
from ..models.common import TimeBucket


def parse_date(value: str, formats: Iterable[str]) -> datetime:
    """Parse ``value`` with the first format that accepts it."""
    formats = list(formats)
    text = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise DateParseError(value, formats)


def target_time(
    date: str,
    bucket: Union[TimeBucket, str],
    cfg: Optional[Settings] = None,
) -> datetime:
    cfg = cfg or default_settings
    bucket = TimeBucket(bucket)
    day = parse_date(date, cfg.date_formats)
    return day.replace(hour=bucket.hour, minute=0, second=0, microsecond=0)
