import hashlib
import hmac
import logging
import secrets
from typing import Dict, Tuple
from workspace_auth.core.collaborators import CredentialExchange
from workspace_auth.schemas.auth import CredentialResult

logger = logging.getLogger(__name__)

PASSWORD_ITERATIONS = 120_000
MIN_PASSWORD_LENGTH = 8

def _hash_password(password: str, salt_hex: str) -> str:
    salt = bytes.fromhex(salt_hex)
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PASSWORD_ITERATIONS).hex()

def normalize_email(email: str) -> str:
    return email.strip().lower()

class InMemoryCredentialExchange(CredentialExchange):
    """
    Process-local stand-in for the real credential service.
    Only checks credentials; issuing the session token and cookie is the
    session issuer's job and does not happen here.
    """

    def __init__(self):
        # email -> (salt_hex, password_hash)
        self._users: Dict[str, Tuple[str, str]] = {}

    async def sign_up(self, email: str, password: str) -> CredentialResult:
        key = normalize_email(email)
        if key in self._users:
            return CredentialResult(success=False, error="Email already registered")
        if len(password) < MIN_PASSWORD_LENGTH:
            return CredentialResult(success=False, error=f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

        salt_hex = secrets.token_hex(16)
        self._users[key] = (salt_hex, _hash_password(password, salt_hex))
        logger.info(f"Registered user: {key}")
        return CredentialResult(success=True)

    async def sign_in(self, email: str, password: str) -> CredentialResult:
        record = self._users.get(normalize_email(email))
        if record is None:
            return CredentialResult(success=False, error="Invalid credentials")

        salt_hex, expected = record
        if not hmac.compare_digest(_hash_password(password, salt_hex), expected):
            return CredentialResult(success=False, error="Invalid credentials")
        return CredentialResult(success=True)

# Global Accessor
credential_exchange = InMemoryCredentialExchange()
