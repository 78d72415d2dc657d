from kidpoints.celery_app import celery_app
from kidpoints.database.db import SessionLocal
from kidpoints.router.background.badges_task import (
    allot_badges_for_all_parents,
    allot_badges_for_parent,
)


@celery_app.task(name="kidpoints.tasks.allot_badges")
def allot_badges(parent_id: int) -> int:
    db = SessionLocal()
    try:
        return len(allot_badges_for_parent(db, parent_id))
    finally:
        db.close()


@celery_app.task(name="kidpoints.tasks.allot_badges_nightly")
def allot_badges_nightly() -> int:
    db = SessionLocal()
    try:
        return allot_badges_for_all_parents(db)
    finally:
        db.close()
