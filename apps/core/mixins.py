from django.conf import settings
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin


class StaffRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """
    Dashboard pages are for staff sessions only
    """
    login_url = settings.LOGIN_URL

    def test_func(self):
        user = self.request.user
        return user.is_staff or user.is_superuser


class DashboardContextMixin:
    """
    Common context for dashboard templates
    """
    dashboard_section = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['dashboard_section'] = self.dashboard_section
        context['current_path'] = self.request.path
        context['APP_VERSION'] = getattr(settings, 'APP_VERSION', '1.0.0')
        return context
