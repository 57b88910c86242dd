import logging

from apps.core.utils.context import get_current_request


class RequestContextFilter(logging.Filter):
    """
    Logging filter to add request context to log records
    """
    def filter(self, record):
        request = get_current_request()

        if request is None:
            record.request_id = '-'
            record.path = '-'
            record.user = 'system'
            return True

        record.request_id = getattr(request, 'request_id', '-')
        record.path = getattr(request, 'path', '-')

        try:
            user = getattr(request, 'user', None)
            if user is not None and user.is_authenticated:
                record.user = user.get_username()
            else:
                record.user = 'anonymous'
        except Exception:
            record.user = 'unknown'

        return True

