"""Populate a catalog, simulate a short viewing session and print the reports."""

from django.core.management.base import BaseCommand, CommandError
from rest_framework.renderers import JSONRenderer

from streaming.domain import (
    ContentId,
    ContentKind,
    Movie,
    Plan,
    PlanId,
    Quality,
    Series,
    User,
    UserId,
)
from streaming.domain.errors import InvalidContentKindError
from streaming.handlers import console
from streaming.handlers.serializers import (
    ContentSerializer,
    RevenueReportSerializer,
    WatchCountEntrySerializer,
)
from streaming.services.streaming_service import StreamingService


def build_demo_service() -> StreamingService:
    service = StreamingService()

    basic = Plan(id=PlanId(1), name="Basic", monthly_price="8.99", screens=1, quality=Quality.SD)
    premium = Plan(
        id=PlanId(2), name="Premium", monthly_price="15.99", screens=4, quality=Quality.UHD_4K
    )
    service.add_plan(basic)
    service.add_plan(premium)

    inception = Movie(id=ContentId(101), title="Inception", rating=5, duration=148)
    stranger_things = Series(id=ContentId(201), title="Stranger Things", rating=4, episodes=25)
    interstellar = Movie(id=ContentId(102), title="Interstellar", rating=5, duration=169)
    for content in (inception, stranger_things, interstellar):
        service.add_content(content)

    alice = User(id=UserId(1), name="Alice", email="alice@mail.com")
    bob = User(id=UserId(2), name="Bob", email="bob@mail.com")
    service.add_user(alice)
    service.add_user(bob)

    alice.subscribe(premium)
    bob.subscribe(basic)

    alice.add_to_watchlist(inception)
    alice.play(inception)
    service.record_watch(inception)

    bob.add_to_watchlist(stranger_things)
    bob.play(stranger_things)
    service.record_watch(stranger_things)
    bob.play(interstellar)
    service.record_watch(interstellar)

    return service


class Command(BaseCommand):
    help = "Run the streaming catalog demo and print its reports."

    requires_system_checks = []

    def add_arguments(self, parser):
        parser.add_argument("--format", choices=["text", "json"], default="text")
        parser.add_argument(
            "--kind", default="Movie", help="Content kind to recommend (case-insensitive)."
        )
        parser.add_argument(
            "--min-rating",
            type=int,
            default=None,
            help="Recommend by minimum rating instead of by kind.",
        )

    def handle(self, *args, **options):
        try:
            kind = ContentKind.parse(options["kind"])
        except InvalidContentKindError as err:
            raise CommandError(str(err)) from err

        service = build_demo_service()

        if options["min_rating"] is not None:
            heading = f"Rated {options['min_rating']}+"
            recommended = service.recommend_by_min_rating(options["min_rating"])
        else:
            heading = f"Recommended {kind.value}"
            recommended = service.recommend_by_type(kind)

        top_watched = WatchCountEntrySerializer(service.top_watched(), many=True).data
        revenue = RevenueReportSerializer(service.revenue()).data
        recommendations = ContentSerializer(recommended, many=True).data

        if options["format"] == "json":
            payload = {
                "top_watched": top_watched,
                "revenue": revenue,
                "recommendations": recommendations,
            }
            rendered = JSONRenderer().render(payload, renderer_context={"indent": 2})
            self.stdout.write(rendered.decode("utf-8"))
            return

        sections = [
            console.render_top_watched(top_watched),
            console.render_revenue(revenue),
            console.render_recommendations(heading, recommendations),
        ]
        for lines in sections:
            self.stdout.write("")
            self.stdout.write(self.style.MIGRATE_HEADING(lines[0]))
            for line in lines[1:]:
                self.stdout.write(line)
