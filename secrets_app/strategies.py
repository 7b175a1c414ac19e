from dataclasses import dataclass
from typing import Optional

from .models import OAUTH_PASSWORD_PLACEHOLDER, User
from .repository import DuplicateEmailError, UserRepository
from .utils.passwords import DEFAULT_ROUNDS, MAX_PASSWORD_BYTES, hash_password, password_too_long, verify_password

USER_NOT_FOUND = "User does not exist"
WRONG_PASSWORD = "Incorrect password"
OAUTH_ONLY_ACCOUNT = "Account uses Google sign-in"
EMAIL_TAKEN = "Email already registered"
PASSWORD_TOO_LONG = f"Password longer than {MAX_PASSWORD_BYTES} bytes"
MISSING_EMAIL = "Google profile has no email"
UNVERIFIED_EMAIL = "Google email is not verified"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a credential check: a user on success, a reason on failure."""

    user: Optional[User] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.user is not None

    @classmethod
    def success(cls, user: User) -> "AuthResult":
        return cls(user=user)

    @classmethod
    def failure(cls, reason: str) -> "AuthResult":
        return cls(reason=reason)


class LocalStrategy:
    """Email + password accounts, hashed with bcrypt."""

    def __init__(self, users: UserRepository, rounds: int = DEFAULT_ROUNDS):
        self.users = users
        self.rounds = rounds

    def authenticate(self, username: str, password: str) -> AuthResult:
        user = self.users.find_by_email(username)
        if user is None:
            return AuthResult.failure(USER_NOT_FOUND)
        if user.is_oauth_only:
            return AuthResult.failure(OAUTH_ONLY_ACCOUNT)
        if not verify_password(password, user.password):
            return AuthResult.failure(WRONG_PASSWORD)
        return AuthResult.success(user)

    def register(self, username: str, password: str) -> AuthResult:
        if self.users.find_by_email(username) is not None:
            return AuthResult.failure(EMAIL_TAKEN)
        if password_too_long(password):
            return AuthResult.failure(PASSWORD_TOO_LONG)
        try:
            user = self.users.create(username, hash_password(password, self.rounds))
        except DuplicateEmailError:
            return AuthResult.failure(EMAIL_TAKEN)
        return AuthResult.success(user)


class GoogleStrategy:
    """Maps a Google userinfo profile onto a row, creating it on first sign-in."""

    def __init__(self, users: UserRepository):
        self.users = users

    def authenticate(self, profile: dict) -> AuthResult:
        email = (profile.get("email") or "").strip()
        if not email:
            return AuthResult.failure(MISSING_EMAIL)
        # Absent claim is fine; an explicit false is not
        if profile.get("email_verified") is False:
            return AuthResult.failure(UNVERIFIED_EMAIL)

        user = self.users.find_by_email(email)
        if user is not None:
            return AuthResult.success(user)
        try:
            user = self.users.create(email, OAUTH_PASSWORD_PLACEHOLDER)
        except DuplicateEmailError:
            user = self.users.find_by_email(email)
        return AuthResult.success(user)
