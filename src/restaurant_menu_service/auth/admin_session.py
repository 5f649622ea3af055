"""Admin credential check and session flag.

The admin area is gated by a single username/password pair compared by
equality. A successful login issues an opaque session token; the token is the
"is admin authenticated" flag and lives only in this process, independently
of the catalog document.
"""

import logging
import secrets

logger = logging.getLogger(__name__)


class AdminCredentialValidator:
    """Validates the admin username and password.

    Uses dependency injection for configuration and simple return values for
    validation results.
    """

    def __init__(self, username: str, password: str) -> None:
        """Initialize validator with the admin credential.

        Args:
            username: Admin username
            password: Admin password

        Raises:
            ValueError: If username or password is empty
        """
        if not username or not password:
            raise ValueError("Admin username and password must be provided")

        self.username = username
        self.password = password

    def validate(self, username: str, password: str) -> bool:
        """Validate a login attempt.

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            bool: True if both match exactly, False otherwise
        """
        username_ok = secrets.compare_digest(username.encode(), self.username.encode())
        password_ok = secrets.compare_digest(password.encode(), self.password.encode())
        return username_ok and password_ok


class AdminSessionStore:
    """In-memory set of active admin session tokens."""

    def __init__(self, validator: AdminCredentialValidator) -> None:
        """Initialize the session store.

        Args:
            validator: Credential validator used by ``login``
        """
        self.validator = validator
        self._tokens: set[str] = set()

    def login(self, username: str, password: str) -> str | None:
        """Open an admin session.

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            str: New session token, or None if the credentials are wrong
        """
        if not self.validator.validate(username, password):
            logger.warning("Rejected admin login attempt")
            return None

        token = secrets.token_urlsafe(32)
        self._tokens.add(token)
        logger.info("Admin session opened")
        return token

    def logout(self, token: str) -> bool:
        """Close an admin session.

        Args:
            token: Session token to clear

        Returns:
            bool: True if the session existed, False otherwise
        """
        if token not in self._tokens:
            return False
        self._tokens.discard(token)
        logger.info("Admin session closed")
        return True

    def is_authenticated(self, token: str | None) -> bool:
        """Check the session flag for a token."""
        return token is not None and token in self._tokens
