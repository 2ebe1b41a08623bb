"""
Notification feed for a user
"""

from typing import Any, Dict, Iterator, List
from nodue.models import db, Notification
from nodue.utils.exceptions import NotFoundError


class NotificationFeed:
    """Newest-first view over a user's notifications"""

    def __init__(self, user_id: str, batch_size: int = 50):
        self.user_id = user_id
        self.batch_size = batch_size

    def _query(self):
        return (Notification.query
                .filter_by(user_id=self.user_id)
                .order_by(Notification.created_at.desc(), Notification.id.desc()))

    def __iter__(self) -> Iterator[Notification]:
        return iter(self._query().yield_per(self.batch_size))

    def latest(self, limit: int = 5) -> List[Dict[str, Any]]:
        return [notification.to_dict() for notification in self._query().limit(limit)]

    @property
    def unread_count(self) -> int:
        return Notification.query.filter_by(user_id=self.user_id, read=False).count()

    def mark_read(self, notification_id: int) -> Notification:
        notification = Notification.query.filter_by(id=notification_id, user_id=self.user_id).first()
        if notification is None:
            raise NotFoundError("Notification not found")
        notification.read = True
        db.session.commit()
        return notification

    def mark_all_read(self) -> int:
        updated = (Notification.query
                   .filter_by(user_id=self.user_id, read=False)
                   .update({'read': True}, synchronize_session=False))
        db.session.commit()
        return updated
