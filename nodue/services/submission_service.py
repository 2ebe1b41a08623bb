"""
Submission window gate

Decides whether students of a batch may submit a new application. A
batch-scoped setting takes precedence over the global one; with neither in
place submissions are open.
"""

from datetime import datetime
from typing import Any, Dict, NamedTuple, Optional
from sqlalchemy.exc import SQLAlchemyError
from nodue.models import db, BatchSubmissionSetting, GlobalSubmissionSetting
from nodue.utils.helpers import format_timestamp, log_error, to_naive_utc, utc_now

DISABLED_MESSAGE = 'Submissions are currently disabled by administration'
CLOSED_MESSAGE = 'Submission window has closed'


class SubmissionDecision(NamedTuple):
    allowed: bool
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'allowed': self.allowed, 'reason': self.reason}


ALLOWED = SubmissionDecision(True)


def resolve_setting(batch_setting: Any, global_setting: Any) -> Any:
    """Batch setting if present, else the global one, else None"""
    if batch_setting is not None:
        return batch_setting
    return global_setting


def evaluate_setting(setting: Any, now: datetime) -> SubmissionDecision:
    """
    Apply a resolved setting at a point in time

    Args:
        setting: Object with enabled, scheduled_start and scheduled_end, or None
        now: Current time (naive UTC or timezone-aware)
    """
    if setting is None:
        return ALLOWED

    if not setting.enabled:
        return SubmissionDecision(False, DISABLED_MESSAGE)

    now = to_naive_utc(now)

    if setting.scheduled_start is not None:
        start = to_naive_utc(setting.scheduled_start)
        if now < start:
            return SubmissionDecision(False, f"Submissions will open on {format_timestamp(start)}")

    if setting.scheduled_end is not None:
        end = to_naive_utc(setting.scheduled_end)
        if now > end:
            return SubmissionDecision(False, CLOSED_MESSAGE)

    return ALLOWED


def find_batch_setting(batch_name: Optional[str]) -> Optional[BatchSubmissionSetting]:
    if not batch_name:
        return None
    return BatchSubmissionSetting.query.filter_by(batch_name=batch_name).one_or_none()


def find_global_setting() -> Optional[GlobalSubmissionSetting]:
    return GlobalSubmissionSetting.query.order_by(GlobalSubmissionSetting.id).first()


def is_allowed(batch_name: Optional[str], now: Optional[datetime] = None) -> SubmissionDecision:
    """
    Whether a new application may be submitted for the batch right now

    A failed settings lookup allows submission rather than locking students out.
    """
    if now is None:
        now = utc_now()

    try:
        batch_setting = find_batch_setting(batch_name)
        global_setting = find_global_setting() if batch_setting is None else None
    except SQLAlchemyError as e:
        log_error(f"Submission settings lookup failed for batch {batch_name!r}, allowing submission", e)
        db.session.rollback()
        return ALLOWED

    return evaluate_setting(resolve_setting(batch_setting, global_setting), now)
