"""Plain-text rendering of serialized reports.

Functions here take the output of the serializers in handlers/serializers.py
and return lines of text. They never touch the service.
"""

from collections.abc import Iterable, Mapping

from streaming.conf import streaming_setting


def render_top_watched(entries: Iterable[Mapping]) -> list[str]:
    lines = ["Top Watched Content:"]
    lines.extend(f"{entry['title']} → {entry['views']} views" for entry in entries)
    return lines


def render_revenue(report: Mapping) -> list[str]:
    currency = streaming_setting("CURRENCY_SYMBOL")
    return [f"Total Monthly Revenue: {currency}{report['total']}"]


def render_recommendations(heading: str, contents: Iterable[Mapping]) -> list[str]:
    lines = [f"{heading}:"]
    lines.extend(f" - {content['title']}" for content in contents)
    return lines
