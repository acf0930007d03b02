"""Article domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class Article:
    """Blog article with a publish state."""

    title: str = ""
    content: str = ""
    author: str = ""
    published: bool = False
    id: int | None = None

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def publish(self) -> None:
        self.published = True

    def unpublish(self) -> None:
        self.published = False

    def apply_changes(
        self,
        title: str | None = None,
        content: str | None = None,
        author: str | None = None,
        published: bool | None = None,
    ) -> None:
        """Overwrite the non-empty fields; empty strings keep the current value."""
        if title:
            self.title = title
        if content:
            self.content = content
        if author:
            self.author = author
        if published is not None:
            self.published = published
