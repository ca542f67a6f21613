from typing import Optional

from sqlalchemy import select

from hirehub.db.tables import PasswordReset
from hirehub.repositories.base import BaseRepository


class PasswordResetRepository(BaseRepository[PasswordReset]):
    model = PasswordReset

    def get_by_token_hash(self, token_hash: str) -> Optional[PasswordReset]:
        return self.db.scalar(select(PasswordReset).where(PasswordReset.token_hash == token_hash))
