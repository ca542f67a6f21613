"""
Token helpers for password reset links.

The raw token only ever travels in the emailed link; the database keeps
its sha256 hex digest.
"""

import hashlib
import secrets


def generate_reset_token(num_bytes: int = 32) -> str:
    """URL-safe random token (base64url, no padding)."""
    return secrets.token_urlsafe(num_bytes)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def build_reset_link(origin_base_url: str, token: str) -> str:
    return f"{origin_base_url.rstrip('/')}/reset-password?token={token}"
