from celery import Celery
from celery.schedules import crontab
from kidpoints.config import settings

celery_app = Celery(
    "kidpoints",
    broker=settings.CELERY_BROKER_URL,
    backend=settings.CELERY_RESULT_BACKEND,
    include=["kidpoints.tasks"],
)

celery_app.conf.update(
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,
    worker_send_task_events=False,
    worker_enable_remote_control=False,
)

celery_app.conf.beat_schedule = {
    "allot_badges_nightly": {
        "task": "kidpoints.tasks.allot_badges_nightly",
        "schedule": crontab(minute=0, hour=settings.BADGE_ALLOT_HOUR),
    },
}
