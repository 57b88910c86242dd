# apps/core/utils/context.py
import threading
from contextlib import contextmanager

# Thread-local storage for request context
_thread_locals = threading.local()


def set_current_request(request):
    """
    Set the current request in thread-local storage
    """
    _thread_locals.request = request


def get_current_request():
    """
    Get the current request from thread-local storage
    """
    return getattr(_thread_locals, 'request', None)


def clear_request():
    """
    Clear request from thread-local storage
    """
    if hasattr(_thread_locals, 'request'):
        delattr(_thread_locals, 'request')


@contextmanager
def request_context(request):
    """
    Context manager for running code on behalf of a request
    """
    old_request = get_current_request()
    set_current_request(request)
    try:
        yield
    finally:
        set_current_request(old_request)
