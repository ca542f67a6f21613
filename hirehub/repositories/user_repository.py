from datetime import datetime
from typing import List, Optional

from sqlalchemy import select

from hirehub.db.tables import User
from hirehub.repositories.base import BaseRepository, contains


class UserRepository(BaseRepository[User]):
    model = User

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.email == email.strip().lower()))

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_by_role(self, role: str) -> List[User]:
        return list(self.db.scalars(select(User).where(User.role == role).order_by(User.full_name)))

    def search_by_name(self, name: str) -> List[User]:
        return list(self.db.scalars(select(User).where(contains(User.full_name, name)).order_by(User.full_name)))

    def get_due_for_deletion(self, now: datetime) -> List[User]:
        return list(self.db.scalars(
            select(User).where(
                User.deletion_scheduled_at.is_not(None),
                User.deletion_scheduled_at <= now,
            )
        ))
