"""Tests for domain notifications and their log output.

Run with: pytest tests/test_signals.py -v
"""

import logging

from streaming.domain import User, UserId


class TestNotifications:
    """Tests for signals sent by domain operations."""

    def test_subscribe_sends_user_subscribed(self, sent_signals, basic_plan):
        user = User(id=UserId(1), name="Alice", email="alice@mail.com")
        user.subscribe(basic_plan)
        assert sent_signals == [("user_subscribed", {"user": user, "plan": basic_plan})]

    def test_add_to_watchlist_sends_content_added(self, sent_signals, inception):
        user = User(id=UserId(1), name="Alice", email="alice@mail.com")
        user.add_to_watchlist(inception)
        assert sent_signals == [
            ("content_added_to_watchlist", {"user": user, "content": inception})
        ]

    def test_play_sends_announcement(self, sent_signals, stranger_things):
        stranger_things.play()
        assert sent_signals == [
            (
                "content_played",
                {
                    "content": stranger_things,
                    "announcement": "▶ Playing Series: Stranger Things [Episodes: 25]",
                },
            )
        ]

    def test_record_watch_sends_new_count(self, sent_signals, service, inception):
        service.record_watch(inception)
        assert sent_signals == [("watch_recorded", {"content": inception, "count": 1})]

    def test_rejected_updates_send_nothing(self, sent_signals, basic_plan, inception):
        basic_plan.set_monthly_price(0)
        inception.set_rating(9)
        assert sent_signals == []


class TestLogging:
    """Tests for the receivers that log notifications."""

    def test_subscription_is_logged(self, caplog, premium_plan):
        user = User(id=UserId(1), name="Alice", email="alice@mail.com")
        with caplog.at_level(logging.INFO, logger="streaming"):
            user.subscribe(premium_plan)
        assert "Alice subscribed to Premium" in caplog.messages

    def test_watchlist_addition_is_logged(self, caplog, inception):
        user = User(id=UserId(2), name="Bob", email="bob@mail.com")
        with caplog.at_level(logging.INFO, logger="streaming"):
            user.add_to_watchlist(inception)
        assert "Inception added to Bob's watchlist." in caplog.messages

    def test_playback_is_logged(self, caplog, inception):
        user = User(id=UserId(2), name="Bob", email="bob@mail.com")
        with caplog.at_level(logging.INFO, logger="streaming"):
            user.play(inception)
        assert "▶ Playing Movie: Inception [148 mins]" in caplog.messages

    def test_rejected_updates_are_not_logged(self, caplog, basic_plan, inception):
        with caplog.at_level(logging.DEBUG, logger="streaming"):
            basic_plan.set_monthly_price(-1)
            inception.set_rating(0)
        assert caplog.records == []
