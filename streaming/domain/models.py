"""Domain models for the streaming catalog.

Plans, catalog entries and users are mutable records compared by identity:
two entries with equal fields are still two distinct catalog entries.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from streaming import signals
from streaming.domain.value_objects import (
    MAX_RATING,
    MIN_RATING,
    ContentId,
    ContentKind,
    Money,
    PlanId,
    Quality,
    UserId,
)


@dataclass(eq=False)
class Plan:
    """Subscription tier with a monthly price and feature limits."""

    id: PlanId
    name: str
    monthly_price: Money
    screens: int
    quality: Quality

    def __post_init__(self) -> None:
        if not isinstance(self.monthly_price, Money):
            self.monthly_price = Money(amount=self.monthly_price)
        if not self.monthly_price.is_positive:
            raise ValueError("Plan price must be positive")
        if self.screens <= 0:
            raise ValueError("Plan must allow at least one screen")

    def set_monthly_price(self, amount: Decimal | Money) -> None:
        """Change the price; non-positive and non-finite amounts are ignored."""
        if isinstance(amount, Money):
            amount = amount.amount
        amount = Decimal(str(amount))
        if amount.is_finite() and amount > 0:
            self.monthly_price = Money(amount=amount)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.quality.value}, {self.screens} screens, "
            f"${self.monthly_price})"
        )


@dataclass(eq=False)
class Content(ABC):
    """Playable catalog entry."""

    kind: ClassVar[ContentKind]

    id: ContentId
    title: str
    rating: int

    def __post_init__(self) -> None:
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    def set_rating(self, rating: int) -> None:
        """Change the rating; values outside 1..5 are ignored."""
        if MIN_RATING <= rating <= MAX_RATING:
            self.rating = rating

    @abstractmethod
    def announcement(self) -> str:
        """Human-readable playback line for this entry."""
        ...

    def play(self) -> None:
        signals.content_played.send(
            sender=type(self), content=self, announcement=self.announcement()
        )

    def __str__(self) -> str:
        return self.title


@dataclass(eq=False)
class Movie(Content):
    kind: ClassVar[ContentKind] = ContentKind.MOVIE

    duration: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.duration <= 0:
            raise ValueError("Movie duration must be positive")

    def announcement(self) -> str:
        return f"▶ Playing Movie: {self.title} [{self.duration} mins]"


@dataclass(eq=False)
class Series(Content):
    kind: ClassVar[ContentKind] = ContentKind.SERIES

    episodes: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.episodes <= 0:
            raise ValueError("Series must have at least one episode")

    def announcement(self) -> str:
        return f"▶ Playing Series: {self.title} [Episodes: {self.episodes}]"


@dataclass(eq=False)
class User:
    """Subscriber with a watchlist and an append-only play history."""

    id: UserId
    name: str
    email: str
    active_plan: Plan | None = None
    _watchlist: list[Content] = field(default_factory=list, init=False, repr=False)
    _history: list[Content] = field(default_factory=list, init=False, repr=False)

    @property
    def watchlist(self) -> tuple[Content, ...]:
        return tuple(self._watchlist)

    @property
    def history(self) -> tuple[Content, ...]:
        return tuple(self._history)

    def subscribe(self, plan: Plan) -> None:
        self.active_plan = plan
        signals.user_subscribed.send(sender=User, user=self, plan=plan)

    def add_to_watchlist(self, content: Content) -> None:
        self._watchlist.append(content)
        signals.content_added_to_watchlist.send(sender=User, user=self, content=content)

    def play(self, content: Content) -> None:
        content.play()
        self._history.append(content)
