# Standard library imports
import re
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

# Local application imports
from ..constants import UserFields
from ..exceptions import ValidationException
from ..result import Result


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 8


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _validate_email(email: str) -> Optional[ValidationException]:
    if not EMAIL_PATTERN.match(normalize_email(email)):
        return ValidationException.for_field(UserFields.EMAIL, "Invalid email format")
    return None


def _validate_name(name: str) -> Optional[ValidationException]:
    if not name or len(name.strip()) < MIN_NAME_LENGTH:
        return ValidationException.for_field(
            UserFields.NAME, f"Name must be at least {MIN_NAME_LENGTH} characters"
        )
    return None


def _validate_password(password: str) -> Optional[ValidationException]:
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        return ValidationException.for_field(
            UserFields.PASSWORD, f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
        )
    return None


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    """
    User aggregate root.

    New users go through ``create`` (validating factory); users loaded from
    storage go through ``reconstitute`` (no validation). Mutations re-validate
    only the field they touch and bump ``version``.
    """
    id: str
    email: str
    name: str
    password: str  # bcrypt hash once persisted
    created_at: datetime
    updated_at: Optional[datetime] = None
    version: int = 0

    @classmethod
    def create(
        cls,
        email: str,
        name: str,
        password: str,
        user_id: Optional[str] = None,
    ) -> Result["User"]:
        for error in (_validate_email(email), _validate_name(name), _validate_password(password)):
            if error is not None:
                return Result.fail(error)

        return Result.ok(cls(
            id=user_id or str(uuid.uuid4()),
            email=normalize_email(email),
            name=name.strip(),
            password=password,
            created_at=_now(),
        ))

    @classmethod
    def reconstitute(
        cls,
        id: str,
        email: str,
        name: str,
        password: str,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        version: int = 0,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            password=password,
            created_at=created_at,
            updated_at=updated_at,
            version=version,
        )

    def update_email(self, email: str) -> Result[None]:
        error = _validate_email(email)
        if error is not None:
            return Result.fail(error)
        self.email = normalize_email(email)
        self._touch()
        return Result.ok()

    def update_name(self, name: str) -> Result[None]:
        error = _validate_name(name)
        if error is not None:
            return Result.fail(error)
        self.name = name.strip()
        self._touch()
        return Result.ok()

    def update_password(self, hashed_password: str) -> None:
        """Replace the stored hash. Hashing happens in the domain service."""
        self.password = hashed_password
        self._touch()

    def _touch(self) -> None:
        self.updated_at = _now()
        self.version += 1
