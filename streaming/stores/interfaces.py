"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every listing preserves
registration order.
"""

from abc import ABC, abstractmethod

from streaming.domain import Content, ContentId, Plan, User


class CatalogStore(ABC):
    """Interface for the service's owned collections and watch counts."""

    @abstractmethod
    def add_user(self, user: User) -> None:
        ...

    @abstractmethod
    def add_plan(self, plan: Plan) -> None:
        ...

    @abstractmethod
    def add_content(self, content: Content) -> None:
        """Register content and start its watch count at zero."""
        ...

    @abstractmethod
    def list_users(self) -> list[User]:
        ...

    @abstractmethod
    def list_plans(self) -> list[Plan]:
        ...

    @abstractmethod
    def list_content(self) -> list[Content]:
        """Return the catalog in registration order."""
        ...

    @abstractmethod
    def get_content(self, content_id: ContentId) -> Content | None:
        """Return the first catalog entry with this id, or None if not found."""
        ...

    @abstractmethod
    def increment_watch_count(self, content: Content) -> int:
        """Add one view and return the new count.

        Raises:
            KeyError: If the content was never registered.
        """
        ...

    @abstractmethod
    def get_watch_count(self, content: Content) -> int:
        """Raises KeyError if the content was never registered."""
        ...

    @abstractmethod
    def watch_counts(self) -> list[tuple[Content, int]]:
        """Return (content, count) pairs in registration order."""
        ...
