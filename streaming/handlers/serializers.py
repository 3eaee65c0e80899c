"""Serializers for transforming domain models and reports to primitive data."""

from rest_framework import serializers


class PlanSerializer(serializers.Serializer):
    """Serializer for Plan domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    monthly_price = serializers.DecimalField(
        source="monthly_price.amount", max_digits=10, decimal_places=2
    )
    screens = serializers.IntegerField()
    quality = serializers.CharField(source="quality.value")


class ContentSerializer(serializers.Serializer):
    """Serializer for Movie and Series domain models.

    Variant fields missing on an instance are left out of the output.
    """

    id = serializers.IntegerField(source="id.value")
    title = serializers.CharField()
    kind = serializers.CharField(source="kind.value")
    rating = serializers.IntegerField()
    duration = serializers.IntegerField(required=False)
    episodes = serializers.IntegerField(required=False)


class WatchCountEntrySerializer(serializers.Serializer):
    title = serializers.CharField()
    views = serializers.IntegerField()


class RevenueReportSerializer(serializers.Serializer):
    total = serializers.DecimalField(source="total.amount", max_digits=12, decimal_places=2)
    paying_users = serializers.IntegerField()
