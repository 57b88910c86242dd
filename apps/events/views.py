import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect
from django.urls import reverse_lazy
from django.utils import timezone
from django.views import View
from django.views.generic import FormView, TemplateView

from apps.core.mixins import DashboardContextMixin, StaffRequiredMixin

from . import grid
from .forms import CalendarEventForm
from .models import CalendarEvent

logger = logging.getLogger(__name__)


def _int_param(request, name, default):
    try:
        return int(request.GET.get(name, default))
    except (TypeError, ValueError):
        return default


class CalendarView(TemplateView):
    """
    Public month calendar; ``?year=&month=`` picks the month, today by default
    """
    template_name = 'events/calendar.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        today = timezone.localdate()

        year = _int_param(self.request, 'year', today.year)
        month = _int_param(self.request, 'month', today.month)
        try:
            cursor = grid.MonthCursor(year, month)
        except ValueError:
            cursor = grid.MonthCursor.for_date(today)

        stored = [event.as_calendar_entry() for event in CalendarEvent.objects.all()]
        events = grid.merge_events(stored)
        cells = grid.layout(cursor.year, cursor.month, events, today=today)

        context.update({
            'cursor': cursor,
            'previous_month': cursor.preceding(),
            'next_month': cursor.following(),
            'weekday_labels': grid.WEEKDAY_LABELS,
            'weeks': grid.weeks(cells),
        })
        return context


class CalendarManageView(StaffRequiredMixin, DashboardContextMixin, FormView):
    template_name = 'events/manage.html'
    form_class = CalendarEventForm
    success_url = reverse_lazy('events:manage')
    dashboard_section = 'calendar'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['events'] = CalendarEvent.objects.all()
        return context

    def form_valid(self, form):
        event = form.save()
        logger.info("Calendar event %s created for %s by %s", event.short_id, event.date, self.request.user)
        messages.success(self.request, f"Event '{event.title}' added.")
        return super().form_valid(form)


class CalendarEventDeleteView(StaffRequiredMixin, View):
    http_method_names = ['post']

    def post(self, request, pk):
        event = get_object_or_404(CalendarEvent, pk=pk)
        event.delete()
        logger.info("Calendar event %s deleted by %s", pk, request.user)
        messages.success(request, f"Event '{event.title}' deleted.")
        return redirect('events:manage')
