import logging

from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, SimpleTestCase

from apps.core.logging import RequestContextFilter
from apps.core.utils.context import get_current_request, request_context


class RequestContextFilterTests(SimpleTestCase):
    def _record(self):
        return logging.LogRecord('apps.test', logging.INFO, __file__, 1, 'hello', None, None)

    def test_outside_request(self):
        record = self._record()
        self.assertTrue(RequestContextFilter().filter(record))
        self.assertEqual(record.request_id, '-')
        self.assertEqual(record.user, 'system')

    def test_inside_request(self):
        request = RequestFactory().post('/api/events')
        request.request_id = 'abc123'
        request.user = AnonymousUser()

        record = self._record()
        with request_context(request):
            RequestContextFilter().filter(record)

        self.assertEqual(record.request_id, 'abc123')
        self.assertEqual(record.path, '/api/events')
        self.assertEqual(record.user, 'anonymous')
        self.assertIsNone(get_current_request())
