"""Domain notifications and the receivers that log them.

Receivers are connected when the module is imported; StreamingConfig.ready()
imports it so the notifications are logged whenever Django is set up.
"""

import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# kwargs: user, plan
user_subscribed = Signal()
# kwargs: user, content
content_added_to_watchlist = Signal()
# kwargs: content, announcement
content_played = Signal()
# kwargs: content, count
watch_recorded = Signal()


@receiver(user_subscribed)
def log_subscription(sender, user, plan, **kwargs):
    """Confirm a subscription change."""
    logger.info("%s subscribed to %s", user.name, plan.name)


@receiver(content_added_to_watchlist)
def log_watchlist_addition(sender, user, content, **kwargs):
    """Confirm a watchlist addition."""
    logger.info("%s added to %s's watchlist.", content.title, user.name)


@receiver(content_played)
def log_playback(sender, content, announcement, **kwargs):
    """Announce playback."""
    logger.info("%s", announcement)


@receiver(watch_recorded)
def log_watch_recorded(sender, content, count, **kwargs):
    logger.debug("Recorded watch for %s (%d total)", content.title, count)
