import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.core.exceptions import (
    FileConstraintError, PortalError, SubmissionValidationError,
    TransportError, WorkflowError,
)

logger = logging.getLogger(__name__)


def first_error_message(detail):
    """
    Flatten DRF error detail (dict / list / str) into its first message
    """
    if isinstance(detail, dict):
        # non_field_errors first, then fields in declaration order
        if 'non_field_errors' in detail:
            return first_error_message(detail['non_field_errors'])
        for value in detail.values():
            message = first_error_message(value)
            if message:
                return message
        return None
    if isinstance(detail, (list, tuple)):
        for value in detail:
            message = first_error_message(value)
            if message:
                return message
        return None
    return str(detail) if detail is not None else None


def error_response(message, status_code=status.HTTP_400_BAD_REQUEST):
    return Response({'error': message}, status=status_code)


PORTAL_ERROR_STATUS = (
    (SubmissionValidationError, status.HTTP_400_BAD_REQUEST),
    (FileConstraintError, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE),
    (WorkflowError, status.HTTP_409_CONFLICT),
    (TransportError, status.HTTP_502_BAD_GATEWAY),
)


def exception_handler(exc, context):
    """
    Every API error leaves as ``{"error": "<message>"}``
    """
    view = context.get('view')
    view_name = view.__class__.__name__ if view is not None else '-'

    if isinstance(exc, PortalError):
        status_code = status.HTTP_400_BAD_REQUEST
        for error_class, code in PORTAL_ERROR_STATUS:
            if isinstance(exc, error_class):
                status_code = code
                break
        logger.warning("%s refused in %s: %s", exc.__class__.__name__, view_name, exc.message)
        return error_response(exc.message, status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        logger.error("API error in %s: %s", view_name, exc, exc_info=True)
        return error_response('Internal server error', status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, APIException):
        message = first_error_message(exc.detail)
    elif isinstance(exc, Http404):
        message = 'Not found'
    elif isinstance(exc, PermissionDenied):
        message = 'Permission denied'
    else:
        message = None

    response.data = {'error': message or 'Request failed'}
    return response
