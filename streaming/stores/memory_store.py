"""In-memory implementation of the CatalogStore."""

from streaming.domain import Content, ContentId, Plan, User
from streaming.stores.interfaces import CatalogStore


class InMemoryCatalogStore(CatalogStore):
    """Single-process store backed by lists and an identity-keyed dict."""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._plans: list[Plan] = []
        self._catalog: list[Content] = []
        # Content hashes by identity; dict order is registration order.
        self._watch_counts: dict[Content, int] = {}

    def add_user(self, user: User) -> None:
        self._users.append(user)

    def add_plan(self, plan: Plan) -> None:
        self._plans.append(plan)

    def add_content(self, content: Content) -> None:
        self._catalog.append(content)
        self._watch_counts[content] = 0

    def list_users(self) -> list[User]:
        return list(self._users)

    def list_plans(self) -> list[Plan]:
        return list(self._plans)

    def list_content(self) -> list[Content]:
        return list(self._catalog)

    def get_content(self, content_id: ContentId) -> Content | None:
        return next((c for c in self._catalog if c.id == content_id), None)

    def increment_watch_count(self, content: Content) -> int:
        count = self._watch_counts[content] + 1
        self._watch_counts[content] = count
        return count

    def get_watch_count(self, content: Content) -> int:
        return self._watch_counts[content]

    def watch_counts(self) -> list[tuple[Content, int]]:
        return list(self._watch_counts.items())
