import logging
import uuid

from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.core.api import error_response
from apps.core.permissions import IsPortalAdmin

from .models import CalendarEvent
from .serializers import CalendarEventSerializer

logger = logging.getLogger(__name__)


class EventPermission(permissions.BasePermission):
    """
    The calendar is public; only admins add or remove events
    """
    message = IsPortalAdmin.message

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return IsPortalAdmin().has_permission(request, view)


@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([EventPermission])
def events_view(request):
    """
    GET: every stored event, by date
    POST: create an event from {title, date, description}
    DELETE ?id=<id>: remove one event
    """
    if request.method == 'GET':
        events = CalendarEvent.objects.all()
        return Response(CalendarEventSerializer(events, many=True).data)

    if request.method == 'POST':
        serializer = CalendarEventSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = serializer.save()
        logger.info("Calendar event %s created for %s by %s", event.short_id, event.date, request.user)
        return Response(CalendarEventSerializer(event).data, status=status.HTTP_201_CREATED)

    event_id = request.query_params.get('id')
    if not event_id:
        return error_response('Event id is required')
    try:
        event_id = uuid.UUID(event_id)
    except ValueError:
        return error_response('Invalid event id')

    deleted, _ = CalendarEvent.objects.filter(pk=event_id).delete()
    if not deleted:
        return error_response('Event not found', status.HTTP_404_NOT_FOUND)

    logger.info("Calendar event %s deleted by %s", event_id, request.user)
    return Response({'success': True})
