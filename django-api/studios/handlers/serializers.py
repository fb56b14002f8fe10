"""Serializers for request validation and domain model responses."""

from rest_framework import serializers

from studios.domain import PaymentType


class SlotQuerySerializer(serializers.Serializer):
    date = serializers.DateField()
    duration = serializers.FloatField(min_value=0.5, default=1)
    interval = serializers.IntegerField(min_value=1, max_value=60, required=False)


class AvailabilityQuerySerializer(serializers.Serializer):
    start_time = serializers.DateTimeField()
    duration = serializers.FloatField()


class QuoteRequestSerializer(serializers.Serializer):
    studio = serializers.CharField()
    package_id = serializers.CharField()
    starts_at = serializers.DateTimeField()
    add_ons = serializers.DictField(
        child=serializers.IntegerField(min_value=0), required=False, default=dict
    )
    email = serializers.EmailField(required=False, allow_null=True, default=None)
    discount_code = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, default=None
    )
    payment_type = serializers.ChoiceField(
        choices=[payment_type.value for payment_type in PaymentType],
        default=PaymentType.FULL.value,
    )


class DiscountValidateSerializer(serializers.Serializer):
    code = serializers.CharField()
    studio = serializers.CharField()
    booking_total = serializers.IntegerField(min_value=0)
    email = serializers.EmailField(required=False, allow_null=True, default=None)


class MoneySerializer(serializers.Serializer):
    """Renders Money as pence plus a display string."""

    def to_representation(self, instance):
        return {"pence": instance.pence, "display": str(instance)}


class BreakdownLineSerializer(serializers.Serializer):
    label = serializers.CharField()
    amount = MoneySerializer()


class DiscountOutcomeSerializer(serializers.Serializer):
    code = serializers.CharField()
    type = serializers.CharField(source="discount_type.value")
    value = serializers.DecimalField(max_digits=10, decimal_places=2, coerce_to_string=False)
    discount_amount = MoneySerializer()
    description = serializers.CharField()


class PaymentSplitSerializer(serializers.Serializer):
    payment_type = serializers.CharField(source="payment_type.value")
    due_now = MoneySerializer()
    remaining_balance = MoneySerializer()


class BookingQuoteSerializer(serializers.Serializer):
    """Serializer for the BookingQuote domain model."""

    studio = serializers.CharField(source="studio.value")
    studio_name = serializers.CharField(source="studio.display_name")
    package_id = serializers.CharField(source="package.package_id")
    duration_hours = serializers.IntegerField(source="package.hours")
    starts_at = serializers.DateTimeField()
    breakdown = BreakdownLineSerializer(source="breakdown.lines", many=True)
    surcharge_applied = serializers.BooleanField(source="breakdown.surcharge_applied")
    subtotal = MoneySerializer(source="breakdown.total")
    discount = DiscountOutcomeSerializer(allow_null=True)
    total = MoneySerializer()
    payment = PaymentSplitSerializer()
