# ABOUTME: Common type definitions shared by request models
# ABOUTME: Provides the UTC timestamp type used for request time intervals

from datetime import UTC, date, datetime, time
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator, TypeAdapter

from market_client.config.settings import get_settings


def _promote_date(v: Any) -> Any:
    """Turns a plain `date` into UTC midnight of the same calendar day."""
    if isinstance(v, date) and not isinstance(v, datetime):
        return datetime.combine(v, time.min, tzinfo=UTC)
    return v


def _to_utc(v: datetime) -> datetime:
    """Interprets naive values in the configured timezone and converts to UTC."""
    if v.tzinfo is None:
        v = v.replace(tzinfo=get_settings().tzinfo)
    try:
        return v.astimezone(UTC)
    except OverflowError as e:
        raise ValueError(f"Timestamp {v.isoformat()} is out of range once converted to UTC") from e


# Timezone-aware UTC datetime; accepts `date`, naive and aware `datetime` and ISO strings.
Timestamp = Annotated[datetime, BeforeValidator(_promote_date), AfterValidator(_to_utc)]

TIMESTAMP_ADAPTER: TypeAdapter[datetime] = TypeAdapter(Timestamp)
