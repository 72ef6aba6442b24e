"""
Administrator authentication.

CredentialVerifier is the interface the CLI depends on, so a hashed-password
implementation can replace PlaintextCredentialVerifier without changes to
callers.
"""

import logging
from abc import ABC, abstractmethod
from database import get_db_session, AdminUser

logger = logging.getLogger(__name__)


class CredentialVerifier(ABC):
    """Checks a username/password pair."""

    @abstractmethod
    def verify(self, username: str, password: str) -> bool:
        """Return True if the pair identifies an authorized administrator."""

    def authenticate(self, username: str, password: str) -> bool:
        authenticated = self.verify(username, password)
        if authenticated:
            logger.info(f"Administrator '{username}' logged in")
        else:
            logger.warning(f"Failed login attempt for '{username}'")
        return authenticated


class PlaintextCredentialVerifier(CredentialVerifier):
    """
    Exact match against the admin_users table.

    Passwords are stored and compared as plaintext. Storage failures are
    raised, never reported as a failed login.
    """

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def verify(self, username: str, password: str) -> bool:
        with get_db_session(self.session_factory) as db:
            match = db.query(AdminUser)\
                .filter_by(username=username, password=password)\
                .first()
        return match is not None
