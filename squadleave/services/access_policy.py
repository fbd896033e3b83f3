"""Credential check for managers allowed to edit leave data."""

import secrets
from typing import Iterable, Optional

import structlog

from squadleave.core.config import Settings, get_settings
from squadleave.core.security import verify_password
from squadleave.shared.exceptions import AuthenticationError
from squadleave.shared.validators import normalize_email

logger = structlog.get_logger(__name__)


class AccessPolicy:
    """
    Decides whether an e-mail/password pair may manage data.

    Only whitelisted e-mails can authenticate. The password is checked
    against a bcrypt hash; a shared master password is accepted as well
    when one is configured.

    Attributes:
        whitelist: Normalized e-mails allowed to log in
        password_hash: bcrypt hash of the managers' password
        master_password: Shared legacy password, empty when disabled
    """

    def __init__(
        self,
        whitelist: Iterable[str] = (),
        password_hash: str = "",
        master_password: str = "",
    ):
        self.whitelist = frozenset(normalize_email(email) for email in whitelist if email)
        self.password_hash = password_hash
        self.master_password = master_password

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AccessPolicy":
        """Builds the policy from application settings."""
        settings = settings or get_settings()
        return cls(
            whitelist=settings.access_whitelist,
            password_hash=settings.admin_password_hash,
            master_password=settings.master_password,
        )

    def is_allowed(self, email: str) -> bool:
        """True when the e-mail is on the whitelist."""
        return normalize_email(email) in self.whitelist

    def authenticate(self, email: str, password: str) -> Optional[str]:
        """
        Checks credentials.

        Args:
            email: Login e-mail, case and surrounding spaces ignored
            password: Plain password

        Returns:
            Normalized e-mail of the actor, or None when rejected
        """
        actor = normalize_email(email)
        if not actor or not password or actor not in self.whitelist:
            logger.info("login_rejected", email=actor, reason="not_whitelisted")
            return None

        if verify_password(password, self.password_hash):
            logger.info("login_succeeded", email=actor)
            return actor

        if self.master_password and secrets.compare_digest(password.encode("utf-8"), self.master_password.encode("utf-8")):
            logger.warning("login_with_master_password", email=actor)
            return actor

        logger.info("login_rejected", email=actor, reason="bad_password")
        return None

    def login(self, email: str, password: str) -> str:
        """
        Same as authenticate, raising instead of returning None.

        Raises:
            AuthenticationError: If the credentials are rejected
        """
        actor = self.authenticate(email, password)
        if actor is None:
            raise AuthenticationError("Incorrect e-mail or password")
        return actor
