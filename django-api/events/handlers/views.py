"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.renderers import JSONRenderer
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain import ValidationErrors
from events.domain.errors import DomainError, ErrorCode, InvalidEventError
from events.handlers.links import event_links, link, self_link
from events.handlers.pagination import HalPagination
from events.handlers.renderers import HalJSONRenderer
from events.handlers.serializers import (
    ErrorsSerializer,
    EventSerializer,
    EventSubmissionSerializer,
    reject_serializer_errors,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore

SUBMISSION_OBJECT_NAME = "eventSubmission"

ERROR_STATUS = {
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EVENT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class EventAPIView(APIView):
    """Base handler wiring the service and HAL rendering."""

    renderer_classes = [HalJSONRenderer, JSONRenderer]

    def get_service(self) -> EventService:
        return EventService(DjangoEventStore())


def bad_request(errors: ValidationErrors) -> Response:
    return Response(ErrorsSerializer(errors).data, status=status.HTTP_400_BAD_REQUEST)


def domain_error_response(error: DomainError) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class IndexView(EventAPIView):
    """Handler for GET /api/"""

    def get(self, request: Request) -> Response:
        return Response({"_links": {"events": link(request, "event-list")}})


class EventListView(EventAPIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        paginator = HalPagination()
        page = paginator.paginate_queryset(
            self.get_service().catalog(), request, view=self
        )
        data = [
            {**EventSerializer(event).data, "_links": {"self": self_link(request, event)}}
            for event in page
        ]
        return paginator.get_paginated_response(data)

    def post(self, request: Request) -> Response:
        errors = ValidationErrors(object_name=SUBMISSION_OBJECT_NAME)
        serializer = EventSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            reject_serializer_errors(serializer, errors)
            return bad_request(errors)

        try:
            event = self.get_service().create_event(serializer.build_submission(), errors)
        except InvalidEventError as exc:
            return bad_request(exc.errors)

        links = event_links(request, event)
        return Response(
            {**EventSerializer(event).data, "_links": links},
            status=status.HTTP_201_CREATED,
            headers={"Location": links["self"]["href"]},
        )


class EventDetailView(EventAPIView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = self.get_service().get_event(event_id)
        except DomainError as exc:
            return domain_error_response(exc)
        return Response({**EventSerializer(event).data, "_links": event_links(request, event)})
