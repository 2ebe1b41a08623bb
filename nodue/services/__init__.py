"""
Services package initialization
"""

from nodue.services.session_service import SessionService
from nodue.services.deletion_service import DeletionService
from nodue.services.notification_service import NotificationFeed

__all__ = ['SessionService', 'DeletionService', 'NotificationFeed']
