"""
Identifier, timestamp and password hashing helpers
"""

import hashlib
import hmac
import secrets
import time

USER_PREFIX = 'USR'
RESERVATION_PREFIX = 'RES'
PAYMENT_PREFIX = 'PAY'


def generate_id(prefix: str) -> str:
    """<PREFIX>_<12 hex chars>; unique by probability only"""
    return f"{prefix}_{secrets.token_hex(6)}"


def now_ms() -> int:
    """Milliseconds since the epoch"""
    return int(time.time() * 1000)


def hash_password(password: str) -> str:
    # Single unsalted SHA-256 round, kept compatible with existing users.json files
    return hashlib.sha256(password.encode('utf-8')).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    return hmac.compare_digest(hash_password(password), password_hash)
