from collections.abc import Callable
from datetime import datetime, UTC

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(UTC)


def month_of(moment: datetime) -> str:
    """Billing period key (YYYY-MM) for a UTC moment"""
    return moment.astimezone(UTC).strftime("%Y-%m")
