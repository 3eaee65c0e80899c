"""Report rows produced by the service, independent of how they are rendered."""

from dataclasses import dataclass

from streaming.domain.models import Content
from streaming.domain.value_objects import Money


@dataclass(frozen=True)
class WatchCountEntry:
    content: Content
    views: int

    @property
    def title(self) -> str:
        return self.content.title


@dataclass(frozen=True)
class RevenueReport:
    """Monthly revenue across all users with an active plan."""

    total: Money
    paying_users: int
