#!/usr/bin/env python3
"""
Create an Admin account.

Self-registration cannot create Admin accounts, so they are created here.
Usage: python scripts/create_admin.py
"""
import logging
import sys
from getpass import getpass

sys.path.insert(0, '.')

from pydantic import ValidationError

from hirehub.core.exceptions import DuplicateEmailError
from hirehub.db.database import get_db_session, init_db
from hirehub.schemas.schemas import UserCreate, UserRole
from hirehub.services.email_service import get_email_service
from hirehub.services.user_service import UserService

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger(__name__)


def create_admin():
    log.info("--- Admin User Creation ---")
    try:
        full_name = input("Full name: ").strip()
        email = input("Email: ").strip()
        while True:
            password = getpass("Password (6-20 characters): ")
            if password == getpass("Confirm the password: "):
                break
            log.warning("Passwords do not match. Please try again.")

        try:
            dto = UserCreate(full_name=full_name, email=email, password=password, role=UserRole.admin)
        except ValidationError as ve:
            log.error("Input validation failed: %s", ve)
            return

        with get_db_session() as db:
            try:
                user = UserService(db, get_email_service()).create(dto)
            except DuplicateEmailError as e:
                log.error(e.message)
                return
            log.info("Created admin %s (ID: %s)", user.email, user.user_id)

    except KeyboardInterrupt:
        log.info("\nAdmin creation cancelled.")


if __name__ == "__main__":
    log.info("Ensuring tables exist...")
    init_db()
    create_admin()
