"""
Custom exceptions for the No-Due clearance service
"""

class NoDueException(Exception):
    """Base exception for the No-Due clearance service"""
    status_code = 500

class ValidationError(NoDueException):
    """Validation error"""
    status_code = 400

class AuthenticationError(NoDueException):
    """Authentication error"""
    status_code = 401

class AuthorizationError(NoDueException):
    """Authorization error"""
    status_code = 403

class NotFoundError(NoDueException):
    """Requested record does not exist"""
    status_code = 404

class ProfileIncompleteError(NoDueException):
    """Student has not finished the profile-completion flow"""
    status_code = 409

class DatabaseError(NoDueException):
    """Database error"""
    pass
