"""Streaming service - all catalog bookkeeping lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Map store lookups to domain errors
- Return domain models or report rows, never rendered text
"""

import logging

from streaming import signals
from streaming.conf import streaming_setting
from streaming.domain import Content, ContentId, ContentKind, Money, Plan, User
from streaming.domain.errors import ContentNotFoundError, ContentNotRegisteredError
from streaming.domain.reports import RevenueReport, WatchCountEntry
from streaming.stores.interfaces import CatalogStore
from streaming.stores.memory_store import InMemoryCatalogStore

logger = logging.getLogger(__name__)


class StreamingService:
    """Aggregates users, plans and content and reports on them."""

    def __init__(self, store: CatalogStore | None = None) -> None:
        self._store = store if store is not None else InMemoryCatalogStore()

    def add_user(self, user: User) -> None:
        self._store.add_user(user)

    def add_plan(self, plan: Plan) -> None:
        self._store.add_plan(plan)

    def add_content(self, content: Content) -> None:
        """Register content in the catalog with a watch count of zero."""
        self._store.add_content(content)

    @property
    def users(self) -> list[User]:
        return self._store.list_users()

    @property
    def plans(self) -> list[Plan]:
        return self._store.list_plans()

    @property
    def catalog(self) -> list[Content]:
        return self._store.list_content()

    def get_content(self, content_id: int | ContentId) -> Content:
        """Return a catalog entry by id.

        Raises:
            ContentNotFoundError: If no registered content has this id.
        """
        if not isinstance(content_id, ContentId):
            content_id = ContentId(content_id)
        content = self._store.get_content(content_id)
        if content is None:
            raise ContentNotFoundError(content_id.value)
        return content

    def record_watch(self, content: Content) -> int:
        """Count one view of registered content and return the new total.

        Raises:
            ContentNotRegisteredError: If the content was never added.
        """
        try:
            count = self._store.increment_watch_count(content)
        except KeyError as err:
            raise ContentNotRegisteredError(content.title) from err
        signals.watch_recorded.send(sender=StreamingService, content=content, count=count)
        return count

    def watch_count(self, content: Content) -> int:
        """Raises ContentNotRegisteredError if the content was never added."""
        try:
            return self._store.get_watch_count(content)
        except KeyError as err:
            raise ContentNotRegisteredError(content.title) from err

    def recommend_top(self, limit: int | None = None) -> list[Content]:
        """Return the first entries of the catalog in registration order.

        This is a fixed prefix of the catalog, not a ranking.
        The default limit comes from STREAMING["RECOMMENDATION_LIMIT"] when
        Django settings are available, otherwise 3.
        """
        if limit is None:
            limit = streaming_setting("RECOMMENDATION_LIMIT")
        return self._store.list_content()[: max(limit, 0)]

    def recommend_by_type(self, kind: str | ContentKind) -> list[Content]:
        """Return entries of the given kind, compared case-insensitively."""
        wanted = kind.value if isinstance(kind, ContentKind) else kind
        return [
            content
            for content in self._store.list_content()
            if content.kind.value.casefold() == wanted.casefold()
        ]

    def recommend_by_min_rating(self, min_rating: int) -> list[Content]:
        return [
            content
            for content in self._store.list_content()
            if content.rating >= min_rating
        ]

    def top_watched(self) -> list[WatchCountEntry]:
        """Return every catalog entry with its view count, most viewed first.

        Equal counts keep registration order.
        """
        ranked = sorted(self._store.watch_counts(), key=lambda pair: pair[1], reverse=True)
        return [WatchCountEntry(content=content, views=views) for content, views in ranked]

    def revenue(self) -> RevenueReport:
        """Sum the monthly price of every user's active plan."""
        total = Money.zero()
        paying_users = 0
        for user in self._store.list_users():
            if user.active_plan is None:
                continue
            total = total + user.active_plan.monthly_price
            paying_users += 1
        logger.debug("Computed revenue %s from %d paying users", total, paying_users)
        return RevenueReport(total=total, paying_users=paying_users)
