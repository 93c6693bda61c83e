from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from usage import UsageSnapshot

FILLED_CHAR = "█"
EMPTY_CHAR = "░"
DEFAULT_BAR_WIDTH = 20

ERROR_THRESHOLD = 90
WARNING_THRESHOLD = 75


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; the bar needs 2.5 -> 3.
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _bar_percentage(used: float, total: float) -> int:
    if total <= 0:
        return 100 if used > 0 else 0
    return max(0, min(100, round_half_up(used / total * 100)))


def create_progress_bar(
    used: float, total: float, width: int = DEFAULT_BAR_WIDTH
) -> str:
    # Fill count comes from the rounded percentage, not the raw ratio.
    percentage = _bar_percentage(used, total)
    filled = round_half_up(percentage / 100 * width)
    empty = width - filled
    return FILLED_CHAR * filled + EMPTY_CHAR * empty


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    # repr keeps 12.25 a tie instead of its binary expansion.
    tenths = Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(tenths)


def usage_percentage(used: float, quota: float) -> float:
    if quota <= 0:
        return 0.0
    return used * 100 / quota


def select_variant(percentage: float) -> str:
    if percentage >= ERROR_THRESHOLD:
        return "error"
    if percentage >= WARNING_THRESHOLD:
        return "warning"
    return "info"


def format_usage_message(snapshot: UsageSnapshot) -> str:
    percentage = usage_percentage(snapshot.used, snapshot.quota)
    bar = create_progress_bar(snapshot.used, snapshot.quota)
    return (
        f"{bar} {format_number(percentage)}%\n"
        f"{format_number(snapshot.used)}/{format_number(snapshot.quota)}"
        f" • {format_number(snapshot.remaining)} left"
    )
