"""Pytest configuration and shared fixtures."""

import pytest

from streaming import signals
from streaming.domain import ContentId, Movie, Plan, PlanId, Quality, Series
from streaming.services.streaming_service import StreamingService


@pytest.fixture
def basic_plan() -> Plan:
    return Plan(id=PlanId(1), name="Basic", monthly_price="8.99", screens=1, quality=Quality.SD)


@pytest.fixture
def premium_plan() -> Plan:
    return Plan(
        id=PlanId(2), name="Premium", monthly_price="15.99", screens=4, quality=Quality.UHD_4K
    )


@pytest.fixture
def inception() -> Movie:
    return Movie(id=ContentId(101), title="Inception", rating=5, duration=148)


@pytest.fixture
def stranger_things() -> Series:
    return Series(id=ContentId(201), title="Stranger Things", rating=4, episodes=25)


@pytest.fixture
def interstellar() -> Movie:
    return Movie(id=ContentId(102), title="Interstellar", rating=5, duration=169)


@pytest.fixture
def service(inception, stranger_things, interstellar) -> StreamingService:
    service = StreamingService()
    for content in (inception, stranger_things, interstellar):
        service.add_content(content)
    return service


@pytest.fixture
def sent_signals():
    """Record every domain signal sent during a test as (name, kwargs) pairs."""
    sent = []
    tracked = {
        "user_subscribed": signals.user_subscribed,
        "content_added_to_watchlist": signals.content_added_to_watchlist,
        "content_played": signals.content_played,
        "watch_recorded": signals.watch_recorded,
    }
    handlers = {}
    for name, signal in tracked.items():

        def handler(sender, signal=None, _name=name, **kwargs):
            sent.append((_name, kwargs))

        handlers[name] = handler
        signal.connect(handler, weak=False)
    yield sent
    for name, signal in tracked.items():
        signal.disconnect(handlers[name])
