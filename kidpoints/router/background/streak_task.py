from datetime import date, datetime, timezone
from typing import Callable, Iterable, List, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from kidpoints.exceptions import MalformedActivityDate
from kidpoints.schema.streaks_schema import BadgeAward

_TIMESTAMP = TypeAdapter(datetime)


##############
### streak ###
##############

def day_key(value) -> date:
    """
    Map an activity timestamp to its calendar day.

    Aware datetimes are converted to UTC first; naive ones are truncated as-is.

    Raises:
        MalformedActivityDate: the value is not a date, datetime or ISO-8601 string.
    """
    if isinstance(value, str):
        try:
            value = _TIMESTAMP.validate_python(value)
        except ValidationError:
            raise MalformedActivityDate(value) from None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    raise MalformedActivityDate(value)


def _rule_days(activities: Iterable) -> List[Tuple[str, date]]:
    # every date is parsed so a bad record fails the whole evaluation
    return [((a.description or "").lower(), day_key(a.date)) for a in activities]


def _days_for(rule_days: Iterable[Tuple[str, date]], rule_name: str) -> List[date]:
    rule = (rule_name or "").lower()
    return sorted({day for description, day in rule_days if description == rule})


def sorted_activity_days(activities: Iterable, rule_name: str) -> List[date]:
    """Distinct days, ascending, on which an activity for `rule_name` was logged."""
    return _days_for(_rule_days(activities), rule_name)


def count_consecutive_days(days: Sequence[date]) -> int:
    """Longest run of consecutive calendar days in an ascending, distinct sequence."""
    if not days:
        return 0

    streak = 1
    max_streak = 1
    for prev, curr in zip(days, days[1:]):
        if (curr - prev).days == 1:
            streak += 1
            max_streak = max(max_streak, streak)
        else:
            streak = 1
    return max_streak


def _satisfiable(badge) -> bool:
    return badge.required_days >= 1 and bool((badge.activity_type or "").strip())


def badge_progress(activities: Iterable, badges: Iterable) -> List[Tuple[object, int]]:
    """Pair every badge with the child's longest streak for its rule."""
    rule_days = _rule_days(activities)
    return [
        (badge, count_consecutive_days(_days_for(rule_days, badge.activity_type)))
        for badge in badges
    ]


def evaluate_child_badges(
    child_id: int,
    activities: Iterable,
    badges: Iterable,
    already_awarded: Callable[[int, int], bool],
) -> List[BadgeAward]:
    """
    Decide which badges a child has newly earned.

    Each badge is judged on its own: the child's longest run of consecutive days
    with an activity whose description matches the badge's activity_type
    (case-insensitively) must reach required_days, and the child must not hold
    the badge yet. Badges with required_days < 1 or a blank activity_type are
    never awarded.

    Parameters:
        child_id (int): The child being evaluated.
        activities (Iterable): The child's activities, in any order.
        badges (Iterable): The parent's badge catalog.
        already_awarded (Callable[[int, int], bool]): Answers whether
            (child_id, badge_id) is already recorded.

    Returns:
        List[BadgeAward]: At most one award per badge, in catalog order.
    """
    awards = []
    for badge, streak in badge_progress(activities, badges):
        if not _satisfiable(badge):
            continue
        if streak >= badge.required_days and not already_awarded(child_id, badge.id):
            awards.append(BadgeAward(child_id=child_id, badge_id=badge.id))
    return awards
