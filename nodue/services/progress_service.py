"""
Clearance progress model

Derives the verification steps, completion percentage, pending approvals and
permitted actions from an application record. Nothing here writes to the
application; the verification flags are owned by the approving departments.
"""

from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional

HOSTEL_STUDENT = 'hostel'
CLOSED_STATUSES = ('completed', 'rejected')


class Step(str, Enum):
    """Verification steps in the order departments sign off"""
    LIBRARY = 'library'
    HOSTEL = 'hostel'
    COLLEGE_OFFICE = 'college_office'
    FACULTY = 'faculty'
    HOD = 'hod'
    PAYMENT = 'payment'
    LAB = 'lab'

    @property
    def flag(self) -> str:
        return f"{self.value}_verified"

    @property
    def comment_field(self) -> str:
        return f"{self.value}_comment"


STEP_LABELS = {
    Step.LIBRARY: 'Library',
    Step.HOSTEL: 'Hostel',
    Step.COLLEGE_OFFICE: 'College Office',
    Step.FACULTY: 'Faculty',
    Step.HOD: 'HOD',
    Step.PAYMENT: 'Lab Charge Payment',
    Step.LAB: 'Lab Instructor',
}

# Steps that only apply to some student types; every other step is always required
CONDITIONAL_STEPS = {
    Step.HOSTEL: {HOSTEL_STUDENT},
}


class VerificationStep(NamedTuple):
    step: Step
    verified: bool
    required: bool
    comment: Optional[str] = None

    @property
    def satisfied(self) -> bool:
        return self.verified or not self.required

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.step.value,
            'label': STEP_LABELS[self.step],
            'verified': self.verified,
            'required': self.required,
            'comment': self.comment,
        }


class ClearanceActions(NamedTuple):
    submit_application: bool
    pay_lab_charge: bool
    download_certificate: bool

    def to_dict(self) -> Dict[str, bool]:
        return self._asdict()


def _field(app: Any, name: str) -> Any:
    # Applications arrive either as model instances or as plain dicts
    if isinstance(app, dict):
        return app.get(name)
    return getattr(app, name, None)


def is_required(step: Step, student_type: Optional[str]) -> bool:
    allowed_types = CONDITIONAL_STEPS.get(step)
    if allowed_types is None:
        return True
    return student_type in allowed_types


def is_verified(app: Any, step: Step) -> bool:
    return bool(_field(app, step.flag))


def required_steps(app: Any, student_type: Optional[str]) -> List[VerificationStep]:
    """
    Ordered verification steps for an application

    Args:
        app: Application model or dict, or None
        student_type: The owning student's type (hostel, day, ...)

    Returns:
        One VerificationStep per Step, empty when there is no application
    """
    if app is None:
        return []
    return [
        VerificationStep(
            step=step,
            verified=is_verified(app, step),
            required=is_required(step, student_type),
            comment=_field(app, step.comment_field),
        )
        for step in Step
    ]


def progress(app: Any, student_type: Optional[str]) -> float:
    """
    Completion percentage in [0, 100]

    Steps that do not apply to the student count as already satisfied.
    """
    steps = required_steps(app, student_type)
    if not steps:
        return 0.0
    satisfied = sum(1 for step in steps if step.satisfied)
    return satisfied / len(steps) * 100


def pending_count(app: Any, student_type: Optional[str]) -> int:
    """Number of required steps still awaiting verification"""
    return sum(1 for step in required_steps(app, student_type) if not step.satisfied)


def pending_steps(app: Any, student_type: Optional[str]) -> List[Step]:
    return [step.step for step in required_steps(app, student_type) if not step.satisfied]


def can_pay_lab_charge(app: Any) -> bool:
    if app is None:
        return False
    return is_verified(app, Step.HOD) and not is_verified(app, Step.PAYMENT)


def can_download_certificate(app: Any) -> bool:
    if app is None:
        return False
    return is_verified(app, Step.LAB)


def allowed_actions(app: Any, submissions_allowed: bool) -> ClearanceActions:
    """
    Actions the dashboard may offer

    Args:
        app: The current application, or None
        submissions_allowed: Decision of the submission window gate
    """
    return ClearanceActions(
        submit_application=bool(submissions_allowed),
        pay_lab_charge=can_pay_lab_charge(app),
        download_certificate=can_download_certificate(app),
    )


def is_active(app: Any) -> bool:
    return _field(app, 'status') not in CLOSED_STATUSES


def summarize(applications: List[Any], student_type: Optional[str],
              submissions_allowed: bool) -> Dict[str, Any]:
    """
    Dashboard view of a student's applications

    Args:
        applications: Applications ordered newest first
        student_type: The owning student's type
        submissions_allowed: Decision of the submission window gate

    Returns:
        Stats, the current application's steps, progress and actions
    """
    current = applications[0] if applications else None
    return {
        'stats': {
            'active_applications': sum(1 for app in applications if is_active(app)),
            'pending_approvals': pending_count(current, student_type),
            'completed': sum(1 for app in applications if _field(app, 'status') == 'completed'),
        },
        'current_application_id': _field(current, 'id') if current is not None else None,
        'steps': [step.to_dict() for step in required_steps(current, student_type)],
        'progress': progress(current, student_type),
        'pending_count': pending_count(current, student_type),
        'pending_steps': [step.value for step in pending_steps(current, student_type)],
        'actions': allowed_actions(current, submissions_allowed).to_dict(),
    }
