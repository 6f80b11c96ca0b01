import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from blogger.errors import PostDecodeError


def split_tags(value: Any) -> List[str]:
    """Split comma-joined tag text. Whitespace around tags is kept as-is."""
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple)):
        return list(value)
    raise ValueError("tags must be comma-joined text")


def parse_timestamp(value: Any) -> datetime.datetime:
    """
    Parse a post timestamp into an aware datetime.

    Accepts ISO-8601 dates/date-times, epoch milliseconds and datetime values.
    Anything without an offset is read as UTC.
    """
    if isinstance(value, bool):
        raise ValueError("timestamp must be a date string or epoch milliseconds")
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            return datetime.datetime.fromtimestamp(
                value / 1000, tz=datetime.timezone.utc
            )
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"invalid timestamp: {value!r}") from None
    elif isinstance(value, str):
        try:
            parsed = datetime.datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValueError(f"invalid timestamp: {value!r}") from None
    else:
        raise ValueError("timestamp must be a date string or epoch milliseconds")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


class BlogPost(BaseModel):
    """A fully loaded blog post."""

    model_config = ConfigDict(frozen=True)

    title: str
    created: datetime.datetime
    updated: datetime.datetime
    author: str
    tags: List[str]
    content: str

    @field_validator("created", "updated", mode="before")
    @classmethod
    def _parse_timestamp(cls, value: Any) -> datetime.datetime:
        return parse_timestamp(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> List[str]:
        return split_tags(value)

    @classmethod
    def from_json(cls, data: Any, source: str = "<memory>") -> "BlogPost":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PostDecodeError(source, e.errors()) from e

    def equals(self, other: Any) -> bool:
        """Field-by-field comparison that never raises, whatever `other` is."""
        try:
            return bool(
                self.title == other.title
                and self.created == other.created
                and self.updated == other.updated
                and self.author == other.author
                and list(self.tags) == list(other.tags)
                and self.content == other.content
            )
        except (AttributeError, TypeError):
            return False

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BlogPost):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(
            (
                self.title,
                self.created,
                self.updated,
                self.author,
                tuple(self.tags),
                self.content,
            )
        )

    def __str__(self) -> str:
        return (
            f"Title:\t{self.title}\n"
            f"Created:\t{self.created}\n"
            f"Updated:\t{self.updated}\n"
            f"Author:\t{self.author}\n"
            f"Tags:\t{', '.join(self.tags)}"
        )


class PostMetadataEntry(BaseModel):
    """One entry of the `posts` array in a metadata file."""

    title: str
    path: str
    # Kept raw: ordering uses the native comparison of whatever the file stores
    created: Any
    updated: Any
    tags: List[str]

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, value: Any) -> List[str]:
        return split_tags(value)


class MetadataDocument(BaseModel):
    posts: List[PostMetadataEntry]

    @classmethod
    def from_json(cls, data: Any, source: str = "<memory>") -> "MetadataDocument":
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise PostDecodeError(source, e.errors()) from e


class PostSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    path: str
    created: Optional[Any] = None
    updated: Optional[Any] = None
    tags: List[str] = Field(default_factory=list)
