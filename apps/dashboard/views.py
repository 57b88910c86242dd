import logging

from django.contrib import messages
from django.contrib.auth import views as auth_views
from django.db.models import Count
from django.urls import reverse_lazy
from django.views.generic import TemplateView

from apps.admission.models import StudentAdmission
from apps.core.mixins import DashboardContextMixin, StaffRequiredMixin
from apps.core.models import ReviewStatus
from apps.events.models import CalendarEvent
from apps.institutions.models import Institution
from apps.trainers.models import Trainer

logger = logging.getLogger(__name__)


class DashboardLoginView(auth_views.LoginView):
    template_name = 'dashboard/login.html'
    redirect_authenticated_user = True

    def get_success_url(self):
        return self.get_redirect_url() or str(reverse_lazy('dashboard:overview'))

    def form_invalid(self, form):
        logger.warning(
            "Failed dashboard login for %s from %s",
            form.data.get('username', 'unknown'), self.request.META.get('REMOTE_ADDR'),
        )
        return super().form_invalid(form)


class DashboardLogoutView(auth_views.LogoutView):
    next_page = reverse_lazy('dashboard:login')

    def post(self, request, *args, **kwargs):
        messages.info(request, "You have been logged out.")
        return super().post(request, *args, **kwargs)


class DashboardOverviewView(StaffRequiredMixin, DashboardContextMixin, TemplateView):
    template_name = 'dashboard/overview.html'
    dashboard_section = 'overview'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        by_status = dict(
            Institution.objects.values_list('status').annotate(total=Count('id')).order_by()
        )
        context['institution_counts'] = {
            status: by_status.get(status, 0) for status in ReviewStatus.ALL
        }
        context['institution_total'] = sum(by_status.values())
        context['admission_total'] = StudentAdmission.objects.count()
        context['trainer_total'] = Trainer.objects.count()
        context['trainer_approved'] = Trainer.objects.approved().count()
        context['event_total'] = CalendarEvent.objects.count()
        context['recent_admissions'] = StudentAdmission.objects.order_by('-created_at')[:5]
        context['pending_institutions'] = (
            Institution.objects.filter(status=ReviewStatus.PENDING).order_by('-created_at')[:5]
        )
        return context
