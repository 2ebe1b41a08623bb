"""
Database models initialization
"""

from nodue.models.database import db, init_db, check_connection
from nodue.models.user import (
    StudentProfile, StaffProfile, UserRole, SubjectAssignment, Batch,
    FACULTY_ROLES, STAFF_ROLES
)
from nodue.models.clearance import (
    Application, Notification, BatchSubmissionSetting, GlobalSubmissionSetting
)

# Export all models
__all__ = [
    'db', 'init_db', 'check_connection',
    'StudentProfile', 'StaffProfile', 'UserRole', 'SubjectAssignment', 'Batch',
    'FACULTY_ROLES', 'STAFF_ROLES',
    'Application', 'Notification', 'BatchSubmissionSetting', 'GlobalSubmissionSetting'
]
