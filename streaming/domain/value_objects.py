"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Self

from streaming.domain.errors import InvalidContentKindError

MIN_RATING = 1
MAX_RATING = 5


@dataclass(frozen=True)
class PlanId:
    """Unique identifier for a Plan."""

    value: int


@dataclass(frozen=True)
class ContentId:
    """Unique identifier for a catalog entry."""

    value: int


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: int


@dataclass(frozen=True)
class Money:
    """Price representation with validation."""

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if not self.amount.is_finite():
            raise ValueError("Money amount must be a finite number")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=Decimal("0"))

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    def __add__(self, other: "Money") -> "Money":
        return Money(amount=self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"


class Quality(Enum):
    """Streaming quality tier of a plan."""

    SD = "SD"
    HD = "HD"
    FHD = "FHD"
    UHD_4K = "4K"


class ContentKind(Enum):
    """Catalog entry variants."""

    MOVIE = "Movie"
    SERIES = "Series"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Match a kind name case-insensitively."""
        for kind in cls:
            if kind.value.casefold() == value.casefold():
                return kind
        raise InvalidContentKindError(value)
