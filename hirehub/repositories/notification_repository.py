from typing import List

from sqlalchemy import select, update

from hirehub.db.tables import Notification
from hirehub.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    model = Notification

    def _for_user(self, user_id: str):
        return (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.notification_id.desc())
        )

    def get_by_user(self, user_id: str) -> List[Notification]:
        return list(self.db.scalars(self._for_user(user_id)))

    def get_unread_by_user(self, user_id: str) -> List[Notification]:
        return list(self.db.scalars(self._for_user(user_id).where(Notification.is_read.is_(False))))

    def get_recent_by_user(self, user_id: str, limit: int = 20) -> List[Notification]:
        return list(self.db.scalars(self._for_user(user_id).limit(limit)))

    def mark_all_read(self, user_id: str) -> int:
        result = self.db.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount or 0
