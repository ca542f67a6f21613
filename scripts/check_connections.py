#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify the database and the email relay are reachable.
Usage: python scripts/check_connections.py
"""
import asyncio
import sys
sys.path.insert(0, '.')

import aiosmtplib

from hirehub.core.config import get_settings
from hirehub.db.database import test_db_connection


async def check_smtp(settings) -> bool:
    try:
        smtp = aiosmtplib.SMTP(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            use_tls=settings.smtp_use_ssl,
            start_tls=None if settings.smtp_use_ssl else True,
            timeout=10,
        )
        await smtp.connect()
        if settings.smtp_user:
            await smtp.login(settings.smtp_user, settings.smtp_password)
        await smtp.quit()
        return True
    except Exception as e:
        print(f"    SMTP error: {e}")
        return False


def main():
    settings = get_settings()
    print("=" * 50)
    print("HIREHUB - CONNECTION CHECK")
    print("=" * 50)

    print("\n[1] Database...")
    url = settings.sqlalchemy_url
    print(f"    URL: {url.replace(settings.postgres_password, '****') if settings.postgres_password else url}")
    if test_db_connection():
        print("    ✅ Database: CONNECTED")
    else:
        print("    ❌ Database: FAILED")

    print("\n[2] Email...")
    if settings.email_backend.lower() != "smtp":
        print(f"    ⚠️  Email backend is '{settings.email_backend}', emails are only logged")
    else:
        print(f"    Relay: {settings.smtp_host}:{settings.smtp_port}")
        if asyncio.run(check_smtp(settings)):
            print("    ✅ SMTP: CONNECTED")
        else:
            print("    ❌ SMTP: FAILED")

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
