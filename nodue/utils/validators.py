"""
Validation utilities
"""

from typing import Any, Iterable, Optional
from nodue.utils.exceptions import ValidationError

ALL = 'all'


def validate_required(value: Any, field_name: str) -> None:
    """
    Validate required field
    
    Args:
        value: Value to validate
        field_name: Name of the field for error message
        
    Raises:
        ValidationError: If value is empty or None
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")


def validate_string_length(value: str, min_length: int = 1, max_length: Optional[int] = None, 
                          field_name: str = "Field") -> None:
    """
    Validate string length
    
    Args:
        value: String to validate
        min_length: Minimum length
        max_length: Maximum length
        field_name: Name of the field for error message
        
    Raises:
        ValidationError: If length is invalid
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    
    if len(value) < min_length:
        raise ValidationError(f"{field_name} must be at least {min_length} characters")
    
    if max_length and len(value) > max_length:
        raise ValidationError(f"{field_name} must be no more than {max_length} characters")


def validate_identifier(value: Any, field_name: str = "Identifier") -> str:
    """
    Validate a record identifier taken from a URL or request body
    
    Returns:
        The stripped identifier
    """
    validate_required(value, field_name)
    value = str(value).strip()
    validate_string_length(value, 1, 64, field_name)
    return value


def normalize_criterion(value: Optional[str]) -> str:
    """Blank or missing filter values mean no filtering on that dimension"""
    if value is None:
        return ALL
    value = value.strip()
    return value or ALL


def validate_choice(value: str, choices: Iterable[str], field_name: str) -> str:
    """
    Validate a categorical filter value against the allowed choices
    
    Raises:
        ValidationError: If the value is neither the "all" sentinel nor a known choice
    """
    choices = set(choices)
    if value != ALL and value not in choices:
        raise ValidationError(f"{field_name} must be one of: {', '.join(sorted(choices))}")
    return value
