from collections import Counter, defaultdict
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional

from kidpoints.model.activities import Activity
from kidpoints.model.child_badges import ChildBadge
from kidpoints.model.users import User
from kidpoints.router.api.logics.child_logic import get_children
from kidpoints.router.api.logics.redemption_logic import get_requests_for_children
from kidpoints.router.background.streak_task import day_key
from kidpoints.schema.report_schema import CountRow, PointsTrendRow, RewardReportRow

TOP_N = 5


def _selected_children(db: Session, parent: User, child: Optional[str]) -> List[User]:
    children = get_children(db, parent.id)
    if child and child != "all":
        children = [c for c in children if c.name == child]
    return children


def _activities(db: Session, children: List[User]) -> List[Activity]:
    child_ids = [c.id for c in children]
    if not child_ids:
        return []
    return db.query(Activity).filter(Activity.child_id.in_(child_ids)).all()


def _top(counter: Counter) -> List[CountRow]:
    # ties keep first-seen order
    return [CountRow(name=name, count=count) for name, count in counter.most_common(TOP_N)]


def rewards_report_logic(db: Session, parent: User) -> List[RewardReportRow]:
    requests = get_requests_for_children(db, [c.id for c in get_children(db, parent.id)])
    return [
        RewardReportRow(
            id=r.id,
            child=r.child.name,
            reward=r.reward.name,
            date=r.request_date,
            status=r.status,
        )
        for r in requests
    ]


def top_rules_logic(db: Session, parent: User, child: Optional[str] = None) -> List[CountRow]:
    """The most frequently logged rules, counting point-earning activities only."""
    activities = _activities(db, _selected_children(db, parent, child))
    return _top(Counter(a.description for a in activities if a.points > 0))


def points_trend_logic(db: Session, parent: User, child: Optional[str] = None) -> List[PointsTrendRow]:
    totals = defaultdict(int)
    for a in _activities(db, _selected_children(db, parent, child)):
        totals[day_key(a.date)] += a.points
    return [PointsTrendRow(date=day, points=points) for day, points in sorted(totals.items())]


def top_badges_logic(db: Session, parent: User, child: Optional[str] = None) -> List[CountRow]:
    child_ids = [c.id for c in _selected_children(db, parent, child)]
    if not child_ids:
        return []
    awards = (
        db.query(ChildBadge)
        .options(joinedload(ChildBadge.badge))
        .filter(ChildBadge.child_id.in_(child_ids))
        .order_by(ChildBadge.id)
        .all()
    )
    return _top(Counter(cb.badge.name for cb in awards))
