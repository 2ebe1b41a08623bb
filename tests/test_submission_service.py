from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from sqlalchemy.exc import OperationalError

from nodue.models import db
from nodue.services import submission_service
from nodue.services.submission_service import SubmissionDecision
from nodue.utils.helpers import format_timestamp, utc_now

NOW = datetime(2025, 3, 1, 10, 0)


def setting(enabled=True, scheduled_start=None, scheduled_end=None):
    return SimpleNamespace(enabled=enabled, scheduled_start=scheduled_start, scheduled_end=scheduled_end)


def test_batch_setting_takes_precedence():
    batch, global_ = setting(enabled=False), setting()

    assert submission_service.resolve_setting(batch, global_) is batch
    assert submission_service.resolve_setting(None, global_) is global_
    assert submission_service.resolve_setting(None, None) is None


def test_no_setting_allows():
    assert submission_service.evaluate_setting(None, NOW) == SubmissionDecision(True)


def test_disabled_setting_blocks():
    decision = submission_service.evaluate_setting(setting(enabled=False), NOW)

    assert decision.allowed is False
    assert 'disabled by administration' in decision.reason


def test_disabled_wins_over_open_window():
    decision = submission_service.evaluate_setting(
        setting(enabled=False, scheduled_start=NOW - timedelta(days=1)), NOW
    )

    assert decision.reason == submission_service.DISABLED_MESSAGE


def test_future_start_blocks_with_start_time():
    start = NOW + timedelta(days=2)

    decision = submission_service.evaluate_setting(setting(scheduled_start=start), NOW)

    assert decision.allowed is False
    assert format_timestamp(start) in decision.reason


def test_past_end_closes_window():
    decision = submission_service.evaluate_setting(
        setting(scheduled_start=NOW - timedelta(days=10), scheduled_end=NOW - timedelta(seconds=1)), NOW
    )

    assert decision == SubmissionDecision(False, submission_service.CLOSED_MESSAGE)


def test_inside_window_allows():
    decision = submission_service.evaluate_setting(
        setting(scheduled_start=NOW - timedelta(days=1), scheduled_end=NOW + timedelta(days=1)), NOW
    )

    assert decision.allowed is True
    assert decision.reason is None


def test_timezone_aware_now_is_compared_in_utc():
    start = datetime(2025, 3, 1, 12, 0)
    ist = timezone(timedelta(hours=5, minutes=30))
    # 17:00 IST is 11:30 UTC, still before the start
    now = datetime(2025, 3, 1, 17, 0, tzinfo=ist)

    assert submission_service.evaluate_setting(setting(scheduled_start=start), now).allowed is False


def test_is_allowed_without_any_settings(app):
    assert submission_service.is_allowed('2021-2025') == SubmissionDecision(True)


def test_is_allowed_uses_batch_setting(app, add_setting):
    start = utc_now() + timedelta(days=3)
    add_setting('2021-2025', enabled=True, scheduled_start=start)
    add_setting(enabled=True)

    decision = submission_service.is_allowed('2021-2025')

    assert decision.allowed is False
    assert format_timestamp(start) in decision.reason


def test_is_allowed_falls_back_to_global(app, add_setting):
    add_setting('2020-2024', enabled=True)
    add_setting(enabled=False)

    decision = submission_service.is_allowed('2021-2025')

    assert decision.allowed is False
    assert decision.reason == submission_service.DISABLED_MESSAGE


def test_is_allowed_fails_open(app, monkeypatch):
    def broken_lookup(batch_name):
        raise OperationalError('SELECT', {}, Exception('connection lost'))

    monkeypatch.setattr(submission_service, 'find_batch_setting', broken_lookup)

    assert submission_service.is_allowed('2021-2025') == SubmissionDecision(True)


def test_failed_lookup_rolls_back_session(app, monkeypatch):
    rollbacks = []

    def broken_lookup(batch_name):
        raise OperationalError('SELECT', {}, Exception('current transaction is aborted'))

    monkeypatch.setattr(submission_service, 'find_batch_setting', broken_lookup)
    monkeypatch.setattr(db.session, 'rollback', lambda: rollbacks.append(True))

    assert submission_service.is_allowed('2021-2025').allowed is True
    assert rollbacks == [True]
