from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from kidpoints.exceptions import MalformedActivityDate
from kidpoints.router.background.streak_task import (
    badge_progress,
    count_consecutive_days,
    day_key,
    evaluate_child_badges,
    sorted_activity_days,
)
from kidpoints.schema.streaks_schema import ActivityRecord, BadgeAward, BadgeRecord

CHILD_ID = 7


def never_awarded(child_id, badge_id):
    return False


def activity(day, description="Homework", hour=9, points=5):
    return ActivityRecord(
        child_id=CHILD_ID,
        description=description,
        points=points,
        date=datetime.combine(day, datetime.min.time()) + timedelta(hours=hour),
    )


def days_from(start, count):
    return [start + timedelta(days=i) for i in range(count)]


def badge(badge_id=1, required_days=5, activity_type="Homework"):
    return BadgeRecord(
        id=badge_id,
        name=f"Badge {badge_id}",
        required_days=required_days,
        activity_type=activity_type,
        parent_id=1,
    )


JAN_1 = date(2024, 1, 1)


class TestCountConsecutiveDays:
    def test_empty(self):
        assert count_consecutive_days([]) == 0

    def test_single_day(self):
        assert count_consecutive_days([JAN_1]) == 1

    def test_gap_resets_run(self):
        days = [JAN_1 + timedelta(days=d) for d in (0, 1, 2, 4, 5, 6)]
        assert count_consecutive_days(days) == 3

    def test_longest_run_wins_wherever_it_is(self):
        days = days_from(JAN_1, 4) + days_from(JAN_1 + timedelta(days=10), 2)
        assert count_consecutive_days(days) == 4

    def test_crosses_month_boundary(self):
        assert count_consecutive_days(days_from(date(2024, 2, 27), 4)) == 4


class TestSortedActivityDays:
    def test_dedupes_and_sorts(self):
        acts = [
            activity(date(2024, 1, 3)),
            activity(JAN_1, hour=8),
            activity(JAN_1, hour=20),
            activity(date(2024, 1, 2), description="Reading"),
        ]
        assert sorted_activity_days(acts, "homework") == [JAN_1, date(2024, 1, 3)]

    def test_aware_timestamps_use_utc_day(self):
        late_evening = datetime(2024, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert day_key(late_evening) == date(2024, 1, 2)

    def test_day_key_accepts_dates_and_iso_strings(self):
        assert day_key(JAN_1) == JAN_1
        assert day_key("2024-01-01T18:00:00") == JAN_1
        assert day_key("2024-01-01T10:00:00.000Z") == JAN_1
        assert day_key("2024-01-01T23:30:00-05:00") == date(2024, 1, 2)


class TestEvaluateChildBadges:
    def test_five_consecutive_days_awards(self):
        acts = [activity(d) for d in days_from(JAN_1, 5)]
        awards = evaluate_child_badges(CHILD_ID, acts, [badge(required_days=5)], never_awarded)
        assert awards == [BadgeAward(child_id=CHILD_ID, badge_id=1)]

    def test_one_day_short_does_not_award(self):
        acts = [activity(d) for d in days_from(JAN_1, 5)]
        assert evaluate_child_badges(CHILD_ID, acts, [badge(required_days=6)], never_awarded) == []

    def test_gap_breaks_streak(self):
        acts = [activity(JAN_1), activity(date(2024, 1, 2)), activity(date(2024, 1, 4))]
        assert evaluate_child_badges(CHILD_ID, acts, [badge(required_days=3)], never_awarded) == []

    def test_same_day_duplicates_count_once(self):
        acts = [activity(JAN_1, hour=8), activity(JAN_1, hour=17), activity(date(2024, 1, 2))]
        assert evaluate_child_badges(CHILD_ID, acts, [badge(required_days=2)], never_awarded) == [
            BadgeAward(child_id=CHILD_ID, badge_id=1)
        ]
        assert evaluate_child_badges(CHILD_ID, acts, [badge(required_days=3)], never_awarded) == []

    def test_already_held_badge_is_never_reawarded(self):
        acts = [activity(d) for d in days_from(JAN_1, 10)]
        awards = evaluate_child_badges(CHILD_ID, acts, [badge(required_days=5)], lambda c, b: True)
        assert awards == []

    def test_already_awarded_is_asked_about_this_child_and_badge(self):
        calls = []

        def held(child_id, badge_id):
            calls.append((child_id, badge_id))
            return badge_id == 2

        acts = [activity(d) for d in days_from(JAN_1, 3)]
        badges = [badge(1, required_days=3), badge(2, required_days=3)]
        assert evaluate_child_badges(CHILD_ID, acts, badges, held) == [BadgeAward(child_id=CHILD_ID, badge_id=1)]
        assert calls == [(CHILD_ID, 1), (CHILD_ID, 2)]

    def test_unrelated_rule_never_awards(self):
        acts = [activity(d, description="Homework") for d in days_from(JAN_1, 7)]
        assert evaluate_child_badges(CHILD_ID, acts, [badge(activity_type="Reading", required_days=1)], never_awarded) == []

    def test_rule_name_matches_case_insensitively(self):
        acts = [activity(JAN_1, description="Homework"), activity(date(2024, 1, 2), description="HOMEWORK")]
        awards = evaluate_child_badges(CHILD_ID, acts, [badge(activity_type="homework", required_days=2)], never_awarded)
        assert awards == [BadgeAward(child_id=CHILD_ID, badge_id=1)]

    def test_old_streak_still_qualifies(self):
        # the longest run anywhere in history counts, not the run ending today
        long_ago = date.today() - timedelta(days=90)
        acts = [activity(d) for d in days_from(long_ago, 10)]
        acts.append(activity(date.today()))
        awards = evaluate_child_badges(CHILD_ID, acts, [badge(required_days=10)], never_awarded)
        assert awards == [BadgeAward(child_id=CHILD_ID, badge_id=1)]

    def test_unsatisfiable_badges_never_award(self):
        acts = [activity(d, description="") for d in days_from(JAN_1, 3)] + [activity(JAN_1)]
        badges = [badge(1, required_days=0), badge(2, required_days=-3), badge(3, activity_type="  ", required_days=1)]
        assert evaluate_child_badges(CHILD_ID, acts, badges, never_awarded) == []

    def test_no_activities_or_no_badges(self):
        assert evaluate_child_badges(CHILD_ID, [], [badge(required_days=1)], never_awarded) == []
        assert evaluate_child_badges(CHILD_ID, [activity(JAN_1)], [], never_awarded) == []

    def test_badges_are_judged_independently(self):
        acts = [activity(d) for d in days_from(JAN_1, 3)] + [activity(d, "Reading") for d in days_from(JAN_1, 1)]
        homework = badge(1, required_days=3)
        reading = badge(2, required_days=2, activity_type="Reading")
        alone = evaluate_child_badges(CHILD_ID, acts, [homework], never_awarded)
        together = evaluate_child_badges(CHILD_ID, acts, [reading, homework], never_awarded)
        assert alone == together == [BadgeAward(child_id=CHILD_ID, badge_id=1)]

    def test_deterministic_regardless_of_input_order(self):
        acts = [activity(d) for d in days_from(JAN_1, 4)]
        badges = [badge(1, required_days=4), badge(2, required_days=2)]
        first = evaluate_child_badges(CHILD_ID, acts, badges, never_awarded)
        second = evaluate_child_badges(CHILD_ID, list(reversed(acts)), badges, never_awarded)
        assert first == second == [
            BadgeAward(child_id=CHILD_ID, badge_id=1),
            BadgeAward(child_id=CHILD_ID, badge_id=2),
        ]

    def test_malformed_date_is_raised(self):
        acts = [activity(JAN_1), SimpleNamespace(description="Reading", date="last tuesday")]
        with pytest.raises(MalformedActivityDate):
            evaluate_child_badges(CHILD_ID, acts, [badge(required_days=1)], never_awarded)

    def test_malformed_date_rejected_by_record(self):
        with pytest.raises(ValidationError):
            ActivityRecord(child_id=CHILD_ID, description="Homework", points=5, date="not a date")


def test_badge_progress_reports_streak_per_badge():
    acts = [activity(d) for d in days_from(JAN_1, 3)]
    progress = badge_progress(acts, [badge(1), badge(2, activity_type="Reading")])
    assert [(b.id, streak) for b, streak in progress] == [(1, 3), (2, 0)]


def test_utc_timestamp_strings_build_a_streak():
    acts = [
        SimpleNamespace(description="Homework", date="2024-01-01T09:00:00.000Z"),
        SimpleNamespace(description="Homework", date="2024-01-02T09:00:00.000Z"),
    ]
    awards = evaluate_child_badges(CHILD_ID, acts, [badge(required_days=2)], never_awarded)
    assert awards == [BadgeAward(child_id=CHILD_ID, badge_id=1)]
