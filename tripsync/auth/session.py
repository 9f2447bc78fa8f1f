"""Session manager: sign-in methods, session expiry and re-authentication.

Platform facilities (identity backend, biometric prompt, passkeys) are
injected as protocols. The only credentials held are the user id and email,
and they live in the CredentialVault.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum
from typing import Protocol

from tripsync.auth.vault import AUTH_TOKEN_KEY, USER_EMAIL_KEY, USER_UID_KEY, CredentialVault
from tripsync.config import Settings
from tripsync.db.context import UserContext

logger = logging.getLogger(__name__)

BIOMETRIC_REASON = "Use Face ID or Touch ID to access TripSync securely"


class SessionDuration(int, Enum):
    """How long a session stays valid after the last activity, in seconds."""

    ONE_HOUR = 3600
    ONE_DAY = 86400
    THREE_DAYS = 259200
    ONE_WEEK = 604800
    ONE_MONTH = 2592000
    THREE_MONTHS = 7776000
    NEVER = 0

    @property
    def display_name(self) -> str:
        return _DURATION_NAMES[self]

    @classmethod
    def from_seconds(cls, seconds: int) -> "SessionDuration":
        """Map a stored value back to a duration; unknown values fall back to one day."""
        try:
            return cls(seconds)
        except ValueError:
            return cls.ONE_DAY


_DURATION_NAMES = {
    SessionDuration.ONE_HOUR: "1 Hour",
    SessionDuration.ONE_DAY: "1 Day",
    SessionDuration.THREE_DAYS: "3 Days",
    SessionDuration.ONE_WEEK: "1 Week",
    SessionDuration.ONE_MONTH: "1 Month",
    SessionDuration.THREE_MONTHS: "3 Months",
    SessionDuration.NEVER: "Never",
}


class BiometricType(str, Enum):
    """Biometric hardware the device offers."""

    NONE = "none"
    FACE_ID = "face_id"
    TOUCH_ID = "touch_id"
    OPTIC_ID = "optic_id"

    @property
    def display_name(self) -> str:
        return _BIOMETRIC_NAMES[self]


_BIOMETRIC_NAMES = {
    BiometricType.NONE: "None Available",
    BiometricType.FACE_ID: "Face ID",
    BiometricType.TOUCH_ID: "Touch ID",
    BiometricType.OPTIC_ID: "Optic ID",
}


class AuthError(Exception):
    """Base class for authentication failures."""

    message = "Authentication failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class BiometricNotEnabledError(AuthError):
    message = "Biometric authentication is not enabled"


class BiometricFailedError(AuthError):
    message = "Biometric authentication failed"


class BiometricNotAvailableError(AuthError):
    message = "Biometric authentication is not available on this device"


class PasskeysNotEnabledError(AuthError):
    message = "Passkeys are not enabled"


class PasskeysNotSupportedError(AuthError):
    message = "Passkeys are not supported on this device"


class CredentialsNotFoundError(AuthError):
    message = "Stored credentials not found"


class SessionExpiredError(AuthError):
    message = "Your session has expired. Please sign in again."


class NotAuthenticatedError(AuthError):
    message = "No user is signed in"


class IdentityProvider(Protocol):
    """Remote account backend."""

    def sign_in(self, email: str, password: str) -> str:
        """Verify credentials and return the user id.

        Raises:
            AuthError: If the credentials are rejected
        """
        ...

    def sign_out(self) -> None:
        ...

    def current_user_id(self) -> str | None:
        """Id of the user the backend still considers signed in, if any."""
        ...


class BiometricPrompt(Protocol):
    def biometric_type(self) -> BiometricType:
        """Enrolled biometric kind; NONE when biometrics cannot be used."""
        ...

    def authenticate(self, reason: str) -> bool:
        ...


class PasskeyAuthenticator(Protocol):
    def assert_credential(self, allowed_user_id: str | None) -> str:
        """Run a passkey assertion and return the asserted user id.

        Raises:
            AuthError: If the assertion fails
        """
        ...

    def register_credential(self, user_id: str, display_name: str) -> None:
        """Create a passkey for the user with the platform authenticator.

        Raises:
            AuthError: If registration fails or is cancelled
        """
        ...


class SessionManager:
    """Tracks the signed-in user and session expiry."""

    def __init__(
        self,
        identity_provider: IdentityProvider,
        vault: CredentialVault,
        biometric_prompt: BiometricPrompt | None = None,
        passkeys: PasskeyAuthenticator | None = None,
        duration: SessionDuration = SessionDuration.ONE_DAY,
    ) -> None:
        """Initialize session manager.

        Args:
            identity_provider: Backend that verifies email/password
            vault: Storage for the user id and email
            biometric_prompt: Device biometric check, if the device has one
            passkeys: Passkey authenticator, if the platform supports passkeys
            duration: Inactivity window after which the session expires
        """
        self._identity = identity_provider
        self._vault = vault
        self._biometrics = biometric_prompt
        self._passkeys = passkeys
        self.duration = duration
        self._biometric_enabled = False
        self._passkeys_enabled = False
        self._logged_in = False
        self._last_active: datetime | None = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        identity_provider: IdentityProvider,
        vault: CredentialVault,
        biometric_prompt: BiometricPrompt | None = None,
        passkeys: PasskeyAuthenticator | None = None,
    ) -> "SessionManager":
        return cls(
            identity_provider,
            vault,
            biometric_prompt=biometric_prompt,
            passkeys=passkeys,
            duration=SessionDuration.from_seconds(settings.session_duration_s),
        )

    @property
    def biometric_enabled(self) -> bool:
        return self._biometric_enabled

    @property
    def passkeys_enabled(self) -> bool:
        return self._passkeys_enabled

    def biometric_type(self) -> BiometricType:
        if self._biometrics is None:
            return BiometricType.NONE
        return self._biometrics.biometric_type()

    def enable_biometrics(self) -> None:
        """Opt in to biometric sign-in and re-authentication.

        Raises:
            BiometricNotAvailableError: If the device has no usable biometrics
        """
        if not self._biometric_available():
            raise BiometricNotAvailableError()
        self._biometric_enabled = True
        logger.info(
            "Biometrics enabled",
            extra={"structured": {"biometric_type": self.biometric_type().value}},
        )

    def disable_biometrics(self) -> None:
        self._biometric_enabled = False

    def enable_passkeys(self) -> None:
        """Opt in to passkey sign-in.

        Raises:
            PasskeysNotSupportedError: If no passkey authenticator is available
        """
        if self._passkeys is None:
            raise PasskeysNotSupportedError()
        self._passkeys_enabled = True

    def disable_passkeys(self) -> None:
        self._passkeys_enabled = False

    def register_passkey(self, user_id: str, email: str) -> None:
        """Create a passkey for the user and opt in to passkey sign-in.

        Raises:
            PasskeysNotSupportedError: If no passkey authenticator is available
            AuthError: If the authenticator rejects the registration
        """
        if self._passkeys is None:
            raise PasskeysNotSupportedError()
        self._passkeys.register_credential(user_id, email)
        self._passkeys_enabled = True
        logger.info("Passkey registered", extra={"structured": {"user_id": user_id}})

    def login(self, email: str, password: str, now: datetime | None = None) -> str:
        """Sign in with email and password.

        Returns:
            The signed-in user id

        Raises:
            AuthError: If the identity provider rejects the credentials
        """
        user_id = self._identity.sign_in(email, password)
        self._save_session(user_id, email, now)
        logger.info("Signed in with password", extra={"structured": {"user_id": user_id}})
        return user_id

    def login_with_biometrics(self, now: datetime | None = None) -> str:
        """Restore the stored session after a successful biometric check.

        Raises:
            BiometricNotEnabledError: If the user has not opted in
            BiometricFailedError: If the prompt is unavailable or rejects
            CredentialsNotFoundError: If the vault holds no user id or email
            SessionExpiredError: If the backend no longer knows the stored user
        """
        if not self._biometric_enabled:
            raise BiometricNotEnabledError()

        if not self._biometric_available() or not self._biometrics.authenticate(BIOMETRIC_REASON):
            logger.warning("Biometric check failed")
            raise BiometricFailedError()

        user_id = self._vault.get(USER_UID_KEY)
        email = self._vault.get(USER_EMAIL_KEY)
        if user_id is None or email is None:
            raise CredentialsNotFoundError()

        if self._identity.current_user_id() != user_id:
            raise SessionExpiredError()

        self._logged_in = True
        self.update_last_active(now)
        logger.info("Signed in with biometrics", extra={"structured": {"user_id": user_id}})
        return user_id

    def login_with_passkey(self, now: datetime | None = None) -> str:
        """Sign in with a passkey assertion.

        Raises:
            PasskeysNotEnabledError: If the user has not opted in
            AuthError: If the assertion fails
        """
        if not self._passkeys_enabled or self._passkeys is None:
            raise PasskeysNotEnabledError()

        user_id = self._passkeys.assert_credential(self._vault.get(USER_UID_KEY))
        self._save_session(user_id, self._vault.get(USER_EMAIL_KEY), now)
        logger.info("Signed in with passkey", extra={"structured": {"user_id": user_id}})
        return user_id

    def logout(self) -> None:
        """Sign out remotely and clear the local session and vault.

        A failed remote sign-out is logged; the local session is cleared anyway.
        """
        try:
            self._identity.sign_out()
        except Exception as e:
            logger.warning(
                f"Remote sign-out failed: {e}",
                extra={"structured": {"error_reason": type(e).__name__}},
            )

        self._logged_in = False
        self._last_active = None
        for key in (USER_UID_KEY, USER_EMAIL_KEY, AUTH_TOKEN_KEY):
            self._vault.delete(key)
        logger.info("Signed out")

    def is_session_expired(self, now: datetime | None = None) -> bool:
        if self.duration is SessionDuration.NEVER:
            return False
        if self._last_active is None:
            return True
        now = now or datetime.now()
        return now - self._last_active > timedelta(seconds=int(self.duration))

    def is_logged_in(self, now: datetime | None = None) -> bool:
        return self._logged_in and not self.is_session_expired(now)

    def update_last_active(self, now: datetime | None = None) -> None:
        self._last_active = now or datetime.now()

    def expire_if_needed(self, now: datetime | None = None) -> bool:
        """Log out a session that has outlived its duration.

        Returns:
            True if the session was expired and cleared
        """
        if self._logged_in and self.is_session_expired(now):
            logger.info("Session expired")
            self.logout()
            return True
        return False

    def require_reauthentication(
        self, action: str, password_check: Callable[[str], bool]
    ) -> bool:
        """Confirm the user before a sensitive action.

        Uses biometrics when enabled and available, otherwise the password
        check callback (which receives the action title).
        """
        if self._biometric_enabled and self._biometric_available():
            return self._biometrics.authenticate(f"Confirm {action}")
        return password_check(action)

    def current_context(self, now: datetime | None = None) -> UserContext:
        """Store context for the signed-in user.

        Raises:
            NotAuthenticatedError: If no session is active
            CredentialsNotFoundError: If the vault lost the user id
        """
        if not self.is_logged_in(now):
            raise NotAuthenticatedError()
        user_id = self._vault.get(USER_UID_KEY)
        if user_id is None:
            raise CredentialsNotFoundError()
        return UserContext(user_id=user_id)

    def _biometric_available(self) -> bool:
        return self.biometric_type() is not BiometricType.NONE

    def _save_session(self, user_id: str, email: str | None, now: datetime | None) -> None:
        self._logged_in = True
        self.update_last_active(now)
        self._vault.save(USER_UID_KEY, user_id)
        if email is not None:
            self._vault.save(USER_EMAIL_KEY, email)
