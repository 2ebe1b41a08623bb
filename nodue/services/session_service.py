"""
Session identity lookups

Sign-in itself is handled upstream; by the time a request reaches this
service the session carries the user's id and role.
"""

from typing import Any, Dict, Optional
from flask import session
from nodue.models import db, StudentProfile
from nodue.utils.exceptions import AuthenticationError, AuthorizationError, ProfileIncompleteError

ADMIN_ROLE = 'admin'
STUDENT_ROLE = 'student'


class SessionService:
    """Session service class"""

    @staticmethod
    def get_current_user() -> Optional[Dict[str, Any]]:
        """Get current user id and role from the session"""
        user_id = session.get('user_id')
        role = session.get('user_role')
        if not user_id or not role:
            return None
        return {'id': user_id, 'role': role}

    @staticmethod
    def require_auth() -> Dict[str, Any]:
        """Require authentication - raise exception if not authenticated"""
        user = SessionService.get_current_user()
        if not user:
            raise AuthenticationError("Authentication required")
        return user

    @staticmethod
    def require_role(role: str) -> Dict[str, Any]:
        user = SessionService.require_auth()
        if user['role'] != role:
            raise AuthorizationError(f"{role.replace('_', ' ').title()} access required")
        return user

    @staticmethod
    def require_admin() -> Dict[str, Any]:
        return SessionService.require_role(ADMIN_ROLE)

    @staticmethod
    def require_student_profile() -> StudentProfile:
        """
        Resolve the signed-in student's profile
        
        Raises:
            ProfileIncompleteError: If the profile is missing or not completed
        """
        user = SessionService.require_role(STUDENT_ROLE)
        profile = db.session.get(StudentProfile, user['id'])
        if profile is None or not profile.profile_completed:
            raise ProfileIncompleteError("Please complete your profile")
        return profile
