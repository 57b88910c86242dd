import logging
import time
import uuid

from django.utils.deprecation import MiddlewareMixin

from apps.core.utils.context import clear_request, set_current_request

logger = logging.getLogger(__name__)


class RequestContextMiddleware(MiddlewareMixin):
    """
    Tags each request with an id and keeps it in thread-local storage so the
    logging filter can stamp records with it.
    """

    skip_paths = (
        '/static/',
        '/media/',
        '/favicon.ico',
    )

    def process_request(self, request):
        if not hasattr(request, 'request_id'):
            request.request_id = uuid.uuid4().hex[:12]
        request._started_at = time.monotonic()
        set_current_request(request)
        return None

    def process_response(self, request, response):
        try:
            if not request.path.startswith(self.skip_paths):
                duration_ms = None
                if hasattr(request, '_started_at'):
                    duration_ms = (time.monotonic() - request._started_at) * 1000

                # Only mutations are worth a line at INFO
                if request.method in ('POST', 'PUT', 'PATCH', 'DELETE'):
                    logger.info(
                        "%s %s -> %s (%.1f ms)",
                        request.method, request.path, response.status_code,
                        duration_ms or 0.0,
                    )
            response['X-Request-ID'] = getattr(request, 'request_id', '')
        finally:
            clear_request()
        return response

    def process_exception(self, request, exception):
        logger.error(
            "Unhandled %s on %s %s",
            exception.__class__.__name__, request.method, request.path,
            exc_info=True,
        )
        return None
