import logging

from django.http import JsonResponse
from django.shortcuts import render

logger = logging.getLogger(__name__)

API_PREFIX = '/api/'


def _wants_json(request):
    return request.path.startswith(API_PREFIX)


# ============================================
# CUSTOM ERROR VIEWS
# ============================================

def custom_page_not_found_view(request, exception):
    """Custom 404 error handler"""
    if _wants_json(request):
        return JsonResponse({'error': 'Not found'}, status=404)
    return render(request, 'errors/404.html', status=404)


def custom_error_view(request):
    """Custom 500 error handler"""
    logger.error("Server error on %s", request.path)
    if _wants_json(request):
        return JsonResponse({'error': 'Internal server error'}, status=500)
    return render(request, 'errors/500.html', status=500)


def custom_permission_denied_view(request, exception):
    """Custom 403 error handler"""
    if _wants_json(request):
        return JsonResponse({'error': 'Permission denied'}, status=403)
    return render(request, 'errors/403.html', status=403)


def custom_bad_request_view(request, exception):
    """Custom 400 error handler"""
    if _wants_json(request):
        return JsonResponse({'error': 'Bad request'}, status=400)
    return render(request, 'errors/400.html', status=400)
