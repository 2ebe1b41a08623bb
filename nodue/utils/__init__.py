"""
Utilities package initialization
"""

from nodue.utils.exceptions import (
    NoDueException, ValidationError, AuthenticationError,
    AuthorizationError, NotFoundError, ProfileIncompleteError, DatabaseError
)
from nodue.utils.validators import (
    ALL, validate_required, validate_string_length, validate_identifier,
    normalize_criterion, validate_choice
)
from nodue.utils.helpers import (
    setup_logging, log_error, log_info, utc_now, to_naive_utc,
    format_timestamp, isoformat, create_response
)

__all__ = [
    'NoDueException', 'ValidationError', 'AuthenticationError',
    'AuthorizationError', 'NotFoundError', 'ProfileIncompleteError', 'DatabaseError',
    'ALL', 'validate_required', 'validate_string_length', 'validate_identifier',
    'normalize_criterion', 'validate_choice',
    'setup_logging', 'log_error', 'log_info', 'utc_now', 'to_naive_utc',
    'format_timestamp', 'isoformat', 'create_response'
]
