import json

import httpx
from django.test import SimpleTestCase

from apps.core.client import PortalClient
from apps.core.exceptions import TransportError


def make_client(handler):
    return PortalClient('http://portal.test/api', transport=httpx.MockTransport(handler))


class PortalClientTests(SimpleTestCase):
    def test_list_events(self):
        seen = {}

        def handler(request):
            seen['url'] = str(request.url)
            return httpx.Response(200, json=[{'id': '1', 'title': 'Republic Day', 'date': '2026-01-26'}])

        with make_client(handler) as client:
            events = client.list_events()

        self.assertEqual(seen['url'], 'http://portal.test/api/events')
        self.assertEqual(events[0]['title'], 'Republic Day')

    def test_list_events_non_array_is_empty(self):
        client = make_client(lambda request: httpx.Response(200, json={'unexpected': True}))
        with self.assertLogs('apps.core.client', level='ERROR'):
            self.assertEqual(client.list_events(), [])

    def test_delete_event_sends_id_param(self):
        seen = {}

        def handler(request):
            seen['method'] = request.method
            seen['id'] = request.url.params.get('id')
            return httpx.Response(200, json={'success': True})

        make_client(handler).delete_event('abc')
        self.assertEqual(seen, {'method': 'DELETE', 'id': 'abc'})

    def test_error_body_becomes_message(self):
        client = make_client(lambda request: httpx.Response(400, json={'error': 'Invalid status'}))
        with self.assertRaises(TransportError) as ctx:
            client.set_institution_status('x', 'MAYBE')
        self.assertEqual(ctx.exception.message, 'Invalid status')
        self.assertEqual(ctx.exception.status_code, 400)

    def test_error_without_body_uses_fallback(self):
        client = make_client(lambda request: httpx.Response(500, text='oops'))
        with self.assertRaises(TransportError) as ctx:
            client.submit_admission({})
        self.assertEqual(ctx.exception.message, 'Submission failed')

    def test_network_failure_is_generic(self):
        def handler(request):
            raise httpx.ConnectError('refused', request=request)

        with self.assertRaises(TransportError) as ctx:
            make_client(handler).register_trainer({})
        self.assertEqual(ctx.exception.message, 'An error occurred. Please try again.')
        self.assertIsNone(ctx.exception.status_code)

    def test_assign_trainer_body(self):
        seen = {}

        def handler(request):
            seen['path'] = request.url.path
            seen['body'] = json.loads(request.content)
            return httpx.Response(200, json={'status': 'APPROVED'})

        make_client(handler).assign_trainer('inst-1', 'HSGA-TR-ABC234')
        self.assertEqual(seen['path'], '/api/admin/insti/inst-1/assign-trainer')
        self.assertEqual(seen['body'], {'trainerId': 'HSGA-TR-ABC234'})

    def test_empty_success_body_is_none(self):
        client = make_client(lambda request: httpx.Response(204))
        self.assertIsNone(client.logout())
