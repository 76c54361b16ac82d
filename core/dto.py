"""
Data Transfer Objects (DTOs).
Used for passing data between layers without exposing domain models.
"""
from dataclasses import dataclass, field
from typing import Optional, List

from core.constants import LifecycleKind
from core.exceptions import ValidationError


@dataclass(frozen=True)
class ActorContext:
    """The user credited with an event (0 = no authenticated actor)"""
    user_id: int = 0

    @classmethod
    def from_user(cls, user):
        if user is not None and getattr(user, 'is_authenticated', False):
            return cls(user_id=user.pk)
        return cls()


@dataclass(frozen=True)
class RequestContext:
    """Request-scoped data captured at event time"""
    ip: Optional[str] = None
    is_autosave: bool = False


@dataclass(frozen=True)
class ContentEvent:
    """A create/update/delete transition of a content item"""
    post_id: int
    kind: str
    post_status: Optional[str] = None
    is_revision: bool = False

    def __post_init__(self):
        if self.kind not in LifecycleKind.ALL:
            raise ValidationError(
                f"Unknown lifecycle kind: {self.kind!r}",
                code='invalid_kind',
                details={'allowed': list(LifecycleKind.ALL)},
            )


@dataclass
class LogRow:
    """A log entry with its display fields resolved"""
    entry: object
    user_display: str
    post_title: str = ""
    post_url: str = ""
    action_time_display: str = ""


@dataclass
class PageLink:
    number: int
    url: str
    is_current: bool = False


@dataclass
class LogPage:
    """One page of the edit history log"""
    rows: List[LogRow] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total_rows: int = 0
    total_pages: int = 0
