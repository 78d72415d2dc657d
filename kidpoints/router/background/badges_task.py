from typing import Iterable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from kidpoints.log import get_logger
from kidpoints.model.activities import Activity
from kidpoints.model.badges import Badge
from kidpoints.model.child_badges import ChildBadge
from kidpoints.model.users import User
from kidpoints.router.background.streak_task import evaluate_child_badges
from kidpoints.schema.streaks_schema import ActivityRecord, BadgeAward, BadgeRecord
from datetime import datetime

log = get_logger(__name__)

#############
### Badge ###
#############

def award_badges(db: Session, awards: Iterable[BadgeAward]) -> List[ChildBadge]:
    """
    Insert one ChildBadge per award.

    Each row is committed on its own; a row rejected by the unique
    (child_id, badge_id) constraint is rolled back and skipped so the rest of
    the run still lands.

    Returns:
        List[ChildBadge]: The rows actually inserted.
    """
    inserted = []
    for award in awards:
        child_badge = ChildBadge(
            child_id=award.child_id,
            badge_id=award.badge_id,
            date_earned=datetime.now(),
        )
        db.add(child_badge)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            log.warning(
                "Badge %s already awarded to child %s, skipping",
                award.badge_id, award.child_id,
            )
            continue
        inserted.append(child_badge)
    return inserted


def allot_badges_for_parent(db: Session, parent_id: int) -> List[ChildBadge]:
    """
    Evaluate every child of a parent against the parent's badge catalog and
    record the newly earned badges.
    """
    badges = [
        BadgeRecord.model_validate(b)
        for b in db.query(Badge).filter(Badge.parent_id == parent_id).all()
    ]
    children = db.query(User).filter(User.parent_id == parent_id, User.role == "child").all()

    awards = []
    for child in children:
        activities = [
            ActivityRecord.model_validate(a)
            for a in db.query(Activity).filter(Activity.child_id == child.id).all()
        ]
        held = {
            row.badge_id
            for row in db.query(ChildBadge.badge_id).filter(ChildBadge.child_id == child.id).all()
        }
        awards.extend(
            evaluate_child_badges(
                child.id,
                activities,
                badges,
                lambda child_id, badge_id, held=held: badge_id in held,
            )
        )

    inserted = award_badges(db, awards)
    log.info("Parent %s: %d new badge(s) awarded", parent_id, len(inserted))
    return inserted


def allot_badges_for_all_parents(db: Session) -> int:
    """Run the allotment for every parent. Returns the number of new awards."""
    parent_ids = [row.id for row in db.query(User.id).filter(User.role == "parent").all()]
    return sum(len(allot_badges_for_parent(db, parent_id)) for parent_id in parent_ids)
