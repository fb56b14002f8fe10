"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from studios.conf import get_booking_service
from studios.domain import Money, PaymentType
from studios.domain.errors import DomainError, ErrorCode
from studios.handlers.serializers import (
    AvailabilityQuerySerializer,
    BookingQuoteSerializer,
    DiscountOutcomeSerializer,
    DiscountValidateSerializer,
    QuoteRequestSerializer,
    SlotQuerySerializer,
)
from studios.services.booking_service import QuoteRequest

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {ErrorCode.INVALID_STUDIO, ErrorCode.PACKAGE_NOT_FOUND}


def domain_error_response(error: DomainError) -> Response:
    http_status = (
        status.HTTP_404_NOT_FOUND if error.code in NOT_FOUND_CODES else status.HTTP_400_BAD_REQUEST
    )
    return Response({"code": error.code.value, "message": error.message}, status=http_status)


class SlotListView(APIView):
    """Handler for GET /api/studios/{studio}/slots"""

    def get(self, request: Request, studio: str) -> Response:
        query = SlotQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            slots = get_booking_service().list_available_slots(
                studio,
                query.validated_data["date"],
                query.validated_data["duration"],
                query.validated_data.get("interval"),
            )
        except DomainError as error:
            return domain_error_response(error)
        return Response({"slots": slots})


class AvailabilityView(APIView):
    """Handler for GET /api/studios/{studio}/availability"""

    def get(self, request: Request, studio: str) -> Response:
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        try:
            decision = get_booking_service().check_availability(
                studio,
                query.validated_data["start_time"],
                query.validated_data["duration"],
            )
        except DomainError as error:
            return domain_error_response(error)
        return Response(
            {
                "available": decision.available,
                "reason": decision.reason.value if decision.reason else None,
            }
        )


class QuoteView(APIView):
    """Handler for POST /api/quotes"""

    def post(self, request: Request) -> Response:
        body = QuoteRequestSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        data = body.validated_data
        quote_request = QuoteRequest(
            studio=data["studio"],
            package_id=data["package_id"],
            starts_at=data["starts_at"],
            add_ons=data["add_ons"],
            email=data["email"],
            discount_code=data["discount_code"],
            payment_type=PaymentType(data["payment_type"]),
        )
        try:
            quote = get_booking_service().quote(quote_request)
        except DomainError as error:
            logger.warning("Quote refused: %s", error)
            return domain_error_response(error)
        return Response(BookingQuoteSerializer(quote).data)


class DiscountValidateView(APIView):
    """Handler for POST /api/discounts/validate"""

    def post(self, request: Request) -> Response:
        body = DiscountValidateSerializer(data=request.data)
        body.is_valid(raise_exception=True)
        data = body.validated_data
        try:
            result = get_booking_service().validate_discount(
                data["code"],
                data["email"],
                data["studio"],
                Money(pence=data["booking_total"]),
            )
        except DomainError as error:
            return domain_error_response(error)

        if not result.valid:
            return Response({"valid": False, "code": result.reason.value, "error": result.message})
        return Response({"valid": True, "discount": DiscountOutcomeSerializer(result.outcome).data})
