# apps/core/utils/__init__.py
"""
Core utilities package
"""

from .context import (
    set_current_request,
    get_current_request,
    clear_request,
    request_context,
)

__all__ = [
    'set_current_request',
    'get_current_request',
    'clear_request',
    'request_context',
]
