import logging

from django.contrib import messages
from django.urls import reverse_lazy
from django.views.generic import DetailView, FormView, ListView, TemplateView

from apps.core.mixins import DashboardContextMixin, StaffRequiredMixin

from .constants import Messages
from .filters import StudentAdmissionFilter
from .forms import StudentAdmissionForm
from .models import StudentAdmission

logger = logging.getLogger(__name__)


# ==================== PUBLIC VIEWS ====================

class AdmissionApplyView(FormView):
    template_name = 'admission/public/apply.html'
    form_class = StudentAdmissionForm
    success_url = reverse_lazy('admission:apply_success')

    def form_valid(self, form):
        admission = form.save()
        logger.info("Student admission %s received via form", admission.short_id)
        messages.success(self.request, Messages.SUCCESS)
        return super().form_valid(form)

    def form_invalid(self, form):
        # the page shows the first error at the top
        context = self.get_context_data(form=form)
        context['error'] = next(iter(form.non_field_errors()), None) or self._first_field_error(form)
        return self.render_to_response(context)

    @staticmethod
    def _first_field_error(form):
        for errors in form.errors.values():
            if errors:
                return errors[0]
        return None


class AdmissionSuccessView(TemplateView):
    template_name = 'admission/public/success.html'


# ==================== STAFF VIEWS ====================

class AdmissionListView(StaffRequiredMixin, DashboardContextMixin, ListView):
    model = StudentAdmission
    template_name = 'admission/staff/list.html'
    context_object_name = 'admissions'
    dashboard_section = 'admissions'
    paginate_by = 25

    def get_queryset(self):
        queryset = super().get_queryset().order_by('-created_at')
        self.filterset = StudentAdmissionFilter(self.request.GET, queryset=queryset, request=self.request)
        return self.filterset.qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['filter'] = self.filterset
        return context


class AdmissionDetailView(StaffRequiredMixin, DashboardContextMixin, DetailView):
    model = StudentAdmission
    template_name = 'admission/staff/detail.html'
    context_object_name = 'admission'
    dashboard_section = 'admissions'
