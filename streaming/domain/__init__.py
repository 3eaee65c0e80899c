from streaming.domain.models import Content, Movie, Plan, Series, User
from streaming.domain.value_objects import (
    ContentId,
    ContentKind,
    Money,
    PlanId,
    Quality,
    UserId,
)

__all__ = [
    "Content",
    "Movie",
    "Series",
    "Plan",
    "User",
    "ContentId",
    "ContentKind",
    "Money",
    "PlanId",
    "Quality",
    "UserId",
]
