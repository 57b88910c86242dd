from django.conf import settings


def system_settings(request):
    """
    Add portal-wide settings to template context
    """
    return {
        'DEBUG': settings.DEBUG,
        'PROJECT_NAME': getattr(settings, 'PROJECT_NAME', 'HSGA Telangana'),
        'APP_VERSION': getattr(settings, 'APP_VERSION', '1.0.0'),
        'is_dashboard_user': bool(
            request.user.is_authenticated and (request.user.is_staff or request.user.is_superuser)
        ) if hasattr(request, 'user') else False,
    }
