"""Admin user domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class AdminUser:
    """Administrator account - core business object."""

    email: str = ""
    password_hash: str = ""
    name: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    def __post_init__(self):
        self.email = self.email.strip().lower()

    def __repr__(self) -> str:
        # password_hash stays out of reprs and therefore out of logs
        return f"AdminUser(id={self.id!r}, email={self.email!r}, name={self.name!r})"

    @property
    def is_active(self) -> bool:
        """Soft-deleted admins can no longer authenticate."""
        return self.deleted_at is None
