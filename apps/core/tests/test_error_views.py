import json

from django.contrib.auth.models import AnonymousUser
from django.http import Http404
from django.test import RequestFactory, SimpleTestCase

from apps.core.views import (
    custom_bad_request_view,
    custom_error_view,
    custom_page_not_found_view,
    custom_permission_denied_view,
)


class ErrorPageTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def _request(self, path='/'):
        request = self.factory.get(path)
        request.user = AnonymousUser()
        return request

    def test_404_view(self):
        response = custom_page_not_found_view(self._request(), exception=Http404("Not Found"))
        self.assertEqual(response.status_code, 404)
        self.assertIn(b"Page Not Found", response.content)

    def test_500_view(self):
        response = custom_error_view(self._request())
        self.assertEqual(response.status_code, 500)
        self.assertIn(b"Internal Server Error", response.content)

    def test_403_view(self):
        response = custom_permission_denied_view(self._request(), exception=Exception("Forbidden"))
        self.assertEqual(response.status_code, 403)
        self.assertIn(b"Access Denied", response.content)

    def test_400_view(self):
        response = custom_bad_request_view(self._request(), exception=Exception("Bad Request"))
        self.assertEqual(response.status_code, 400)
        self.assertIn(b"Bad Request", response.content)


class ApiErrorPageTests(SimpleTestCase):
    """Under /api/ the handlers answer with {"error": ...}"""

    def setUp(self):
        self.factory = RequestFactory()

    def _request(self):
        request = self.factory.get('/api/nowhere')
        request.user = AnonymousUser()
        return request

    def test_404_is_json(self):
        response = custom_page_not_found_view(self._request(), exception=Http404())
        self.assertEqual(response.status_code, 404)
        self.assertEqual(json.loads(response.content), {'error': 'Not found'})

    def test_500_is_json(self):
        response = custom_error_view(self._request())
        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {'error': 'Internal server error'})
