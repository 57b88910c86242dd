import datetime
from io import StringIO

from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse

from apps.events.grid import FALLBACK_EVENTS
from apps.events.models import CalendarEvent


class CalendarViewTests(TestCase):
    def test_shows_requested_month_with_fallback_events(self):
        response = self.client.get(reverse('events:calendar'), {'year': 2026, 'month': 1})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['cursor'].label, 'January 2026')
        self.assertContains(response, 'Republic Day')
        self.assertContains(response, '?year=2025&month=12')
        self.assertContains(response, '?year=2026&month=2')

    def test_stored_events_appear(self):
        CalendarEvent.objects.create(title='District Rally', date=datetime.date(2026, 4, 18))
        response = self.client.get(reverse('events:calendar'), {'year': 2026, 'month': 4})
        self.assertContains(response, 'District Rally')

    def test_bad_parameters_fall_back_to_current_month(self):
        response = self.client.get(reverse('events:calendar'), {'year': 'soon', 'month': 14})
        self.assertEqual(response.status_code, 200)


    def test_years_outside_date_range_render(self):
        for year, month in ((0, 1), (-3, 6), (10000, 1)):
            with self.subTest(year=year):
                response = self.client.get(reverse('events:calendar'), {'year': year, 'month': month})
                self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'January 10000')


class CalendarManageViewTests(TestCase):
    def setUp(self):
        self.staff = get_user_model().objects.create_user('staff', password='secret', is_staff=True)

    def test_requires_staff(self):
        response = self.client.get(reverse('events:manage'))
        self.assertEqual(response.status_code, 302)

    def test_create_and_delete(self):
        self.client.force_login(self.staff)

        response = self.client.post(reverse('events:manage'), {
            'title': 'Summer Camp', 'date': '2026-05-20', 'description': 'Camp & tour',
        })
        self.assertRedirects(response, reverse('events:manage'))
        event = CalendarEvent.objects.get(title='Summer Camp')

        response = self.client.post(reverse('events:delete', args=[event.pk]))
        self.assertRedirects(response, reverse('events:manage'))
        self.assertFalse(CalendarEvent.objects.exists())


class LoadHsgaEventsCommandTests(TestCase):
    def test_loads_once(self):
        out = StringIO()
        call_command('load_hsga_events', stdout=out)
        self.assertEqual(CalendarEvent.objects.count(), len(FALLBACK_EVENTS))

        call_command('load_hsga_events', stdout=out)
        self.assertEqual(CalendarEvent.objects.count(), len(FALLBACK_EVENTS))

    def test_dry_run(self):
        out = StringIO()
        call_command('load_hsga_events', '--dry-run', stdout=out)
        self.assertFalse(CalendarEvent.objects.exists())
        self.assertIn('Would create 21 calendar events', out.getvalue())
