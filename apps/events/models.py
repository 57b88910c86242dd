from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import BaseModel


class CalendarEvent(BaseModel):
    """
    Dated entry on the public calendar. Created and deleted by admins only.
    """
    title = models.CharField(max_length=200, verbose_name=_("Event Title"))
    date = models.DateField(db_index=True, verbose_name=_("Date"))
    description = models.TextField(blank=True, null=True, verbose_name=_("Description"))

    class Meta:
        db_table = "calendar_events"
        ordering = ["date", "created_at"]
        verbose_name = _("Calendar Event")
        verbose_name_plural = _("Calendar Events")

    def __str__(self):
        return f"{self.title} ({self.date})"

    def as_calendar_entry(self):
        return {
            'id': str(self.id),
            'title': self.title,
            'date': self.date.isoformat(),
            'description': self.description,
        }
