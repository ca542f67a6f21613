"""
User Service - accounts, login, password reset and account lifecycle.
"""

import logging
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from hirehub.core.auth import create_access_token, hash_password, verify_password
from hirehub.core.config import get_settings
from hirehub.core.exceptions import DuplicateEmailError, NotFoundError
from hirehub.db.tables import PasswordReset, User, utcnow
from hirehub.repositories import (
    ApplicationRepository, PasswordResetRepository, ResumeRepository, UserRepository
)
from hirehub.schemas.schemas import AuthResponse, LoginRequest, UserCreate, UserUpdate
from hirehub.services import email_templates
from hirehub.services.email_service import EmailService
from hirehub.utils.file_upload import delete_stored_file
from hirehub.utils.tokens import build_reset_link, generate_reset_token, hash_token

logger = logging.getLogger(__name__)

DEFAULT_DELETION_DAYS = 30


class UserService:
    def __init__(self, db: Session, email_service: EmailService):
        self.db = db
        self.users = UserRepository(db)
        self.resets = PasswordResetRepository(db)
        self.resumes = ResumeRepository(db)
        self.applications = ApplicationRepository(db)
        self.email_service = email_service
        self.settings = get_settings()

    # ------------------- QUERIES -------------------

    def get_all(self) -> List[User]:
        return self.users.get_all()

    def get_by_id(self, user_id: str) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError.for_entity("User", user_id)
        return user

    def get_by_role(self, role: str) -> List[User]:
        return self.users.get_by_role(role)

    def search_by_name(self, name: str) -> List[User]:
        return self.users.search_by_name(name)

    # ------------------- REGISTER / LOGIN -------------------

    def create(self, dto: UserCreate) -> User:
        email = dto.email.strip().lower()
        if self.users.email_exists(email):
            raise DuplicateEmailError(f"Email '{email}' is already registered.")

        user = User(
            full_name=dto.full_name.strip(),
            email=email,
            password_hash=hash_password(dto.password),
            role=dto.role.value,
            date_of_birth=dto.date_of_birth,
            gender=dto.gender,
            address=dto.address,
        )
        self.users.add(user)
        self.users.commit()
        logger.info("Registered user %s as %s", user.user_id, user.role)
        return user

    def login(self, dto: LoginRequest) -> Optional[AuthResponse]:
        """Returns None for unknown email, wrong password or a deactivated account."""
        user = self.users.get_by_email(dto.email)
        if user is None or not verify_password(dto.password, user.password_hash):
            logger.info("Failed login for %s", dto.email)
            return None
        if not user.is_active:
            logger.info("Login refused for deactivated user %s", user.user_id)
            return None

        token, expires_at = create_access_token(
            data={"sub": user.user_id, "role": user.role, "email": user.email}
        )
        return AuthResponse(token=token, expires_at=expires_at, role=user.role, user_id=user.user_id)

    # ------------------- UPDATE / DELETE -------------------

    def update(self, user_id: str, dto: UserUpdate) -> User:
        user = self.get_by_id(user_id)
        changes = dto.model_dump(exclude_unset=True)
        if changes.get("role") is not None:
            changes["role"] = dto.role.value
        for field, value in changes.items():
            if field in ("full_name", "role") and value is None:
                continue
            setattr(user, field, value)
        self.users.update(user)
        self.users.commit()
        return user

    def delete(self, user_id: str) -> None:
        user = self.get_by_id(user_id)
        self._purge(user)
        self.users.commit()
        logger.info("Deleted user %s", user_id)

    def delete_permanently(self, user_id: str) -> bool:
        user = self.users.get_by_id(user_id)
        if user is None:
            return False
        self._purge(user)
        self.users.commit()
        logger.info("Permanently deleted user %s", user_id)
        return True

    def _purge(self, user: User) -> None:
        """Remove the user with every row and resume file that belongs to it."""
        if user.job_seeker is not None:
            seeker_id = user.job_seeker.job_seeker_id
            for application in self.applications.get_by_job_seeker(seeker_id):
                self.db.delete(application)
            self.db.flush()
            for resume in self.resumes.get_by_job_seeker(seeker_id):
                delete_stored_file(resume.file_path, self.settings.upload_dir)
                self.db.delete(resume)
            self.db.flush()
        # Employer jobs, their applications, notifications and reset tokens cascade
        self.users.delete(user)

    # ------------------- ACCOUNT LIFECYCLE -------------------

    def deactivate(self, user_id: str) -> bool:
        user = self.users.get_by_id(user_id)
        if user is None or not user.is_active:
            return False
        user.is_active = False
        user.deactivated_at = utcnow()
        self.users.commit()
        logger.info("Deactivated user %s", user_id)
        return True

    def reactivate(self, user_id: str) -> bool:
        user = self.users.get_by_id(user_id)
        if user is None or user.is_active:
            return False
        user.is_active = True
        user.deactivated_at = None
        user.deletion_scheduled_at = None
        self.users.commit()
        logger.info("Reactivated user %s", user_id)
        return True

    def schedule_deletion(self, user_id: str, days: int = DEFAULT_DELETION_DAYS) -> str:
        """Deactivate now and delete for good once `days` have passed."""
        if days <= 0:
            days = DEFAULT_DELETION_DAYS
        user = self.get_by_id(user_id)
        now = utcnow()
        user.is_active = False
        user.deactivated_at = user.deactivated_at or now
        user.deletion_scheduled_at = now + timedelta(days=days)
        self.users.commit()
        logger.info("User %s scheduled for deletion at %s", user_id, user.deletion_scheduled_at)
        return (
            f"Account deactivated and scheduled for permanent deletion on "
            f"{user.deletion_scheduled_at:%Y-%m-%d}. Reactivate before then to keep it."
        )

    def purge_scheduled_deletions(self, now: Optional[datetime] = None) -> int:
        due = self.users.get_due_for_deletion(now or utcnow())
        for user in due:
            self._purge(user)
        self.users.commit()
        if due:
            logger.info("Purged %d accounts scheduled for deletion", len(due))
        return len(due)

    # ------------------- PASSWORD RESET -------------------

    async def request_password_reset(self, email: str, origin_base_url: str) -> None:
        """Email a reset link. Unknown addresses are ignored without telling the caller."""
        user = self.users.get_by_email(email)
        if user is None:
            logger.info("Password reset requested for unknown email")
            return

        token = generate_reset_token()
        expire_hours = self.settings.password_reset_expire_hours
        self.resets.add(PasswordReset(
            user_id=user.user_id,
            token_hash=hash_token(token),
            expires_at=utcnow() + timedelta(hours=expire_hours),
        ))
        self.resets.commit()

        link = build_reset_link(origin_base_url, token)
        sent = await self.email_service.send_email(
            user.email,
            "Reset your HireHub password",
            email_templates.password_reset(user.full_name, link, expire_hours),
        )
        if not sent:
            logger.warning("Password reset email to user %s was not sent", user.user_id)

    def reset_password_with_token(self, token: str, new_password: str) -> bool:
        reset = self.resets.get_by_token_hash(hash_token(token))
        if reset is None or reset.used or reset.expires_at < utcnow():
            return False

        user = self.users.get_by_id(reset.user_id)
        if user is None:
            return False

        user.password_hash = hash_password(new_password)
        reset.used = True
        self.resets.commit()
        logger.info("Password reset for user %s", user.user_id)
        return True
