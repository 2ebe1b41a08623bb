"""
Deletion of person records and their dependents
"""

from typing import Iterable
from sqlalchemy.exc import SQLAlchemyError
from nodue.models import (
    db, StudentProfile, StaffProfile, UserRole, SubjectAssignment,
    Notification, FACULTY_ROLES, STAFF_ROLES
)
from nodue.utils.exceptions import DatabaseError, NotFoundError
from nodue.utils.helpers import log_error, log_info
from nodue.utils.validators import validate_identifier


class DeletionService:
    """Removes faculty, staff and students along with their dependent records"""

    @staticmethod
    def _get_staff_member(staff_id: str, roles: Iterable[str], label: str) -> StaffProfile:
        member = db.session.get(StaffProfile, staff_id)
        has_role = UserRole.query.filter(
            UserRole.user_id == staff_id, UserRole.role.in_(list(roles))
        ).first() is not None
        if member is None or not has_role:
            raise NotFoundError(f"{label} not found")
        return member

    @staticmethod
    def _commit(description: str) -> None:
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            log_error(f"Failed to delete {description}", e)
            raise DatabaseError(f"Failed to delete {description}") from e

    @staticmethod
    def delete_faculty(faculty_id: str) -> str:
        """
        Delete a faculty member, their roles and subject assignments
        
        Args:
            faculty_id: Staff profile id
            
        Returns:
            Name of the deleted faculty member
        """
        faculty_id = validate_identifier(faculty_id, "Faculty id")
        member = DeletionService._get_staff_member(faculty_id, FACULTY_ROLES, "Faculty")
        name = member.name

        SubjectAssignment.query.filter_by(faculty_id=faculty_id).delete(synchronize_session=False)
        UserRole.query.filter_by(user_id=faculty_id).delete(synchronize_session=False)
        db.session.delete(member)
        DeletionService._commit(f"faculty {faculty_id}")

        log_info(f"Deleted faculty {faculty_id} ({name})")
        return name

    @staticmethod
    def delete_staff(staff_id: str) -> str:
        """
        Delete a staff member and their roles
        
        Args:
            staff_id: Staff profile id
            
        Returns:
            Name of the deleted staff member
        """
        staff_id = validate_identifier(staff_id, "Staff id")
        member = DeletionService._get_staff_member(staff_id, STAFF_ROLES, "Staff")
        name = member.name

        UserRole.query.filter_by(user_id=staff_id).delete(synchronize_session=False)
        db.session.delete(member)
        DeletionService._commit(f"staff {staff_id}")

        log_info(f"Deleted staff {staff_id} ({name})")
        return name

    @staticmethod
    def delete_student(student_id: str) -> str:
        """
        Delete a student with their applications, notifications and roles
        
        Args:
            student_id: Student profile id
            
        Returns:
            Name of the deleted student
        """
        student_id = validate_identifier(student_id, "Student id")
        student = db.session.get(StudentProfile, student_id)
        if student is None:
            raise NotFoundError("Student not found")
        name = student.name

        Notification.query.filter_by(user_id=student_id).delete(synchronize_session=False)
        UserRole.query.filter_by(user_id=student_id).delete(synchronize_session=False)
        db.session.delete(student)
        DeletionService._commit(f"student {student_id}")

        log_info(f"Deleted student {student_id} ({name})")
        return name
