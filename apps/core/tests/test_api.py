from django.http import Http404
from django.test import SimpleTestCase
from rest_framework import exceptions

from apps.core.api import exception_handler, first_error_message
from apps.core.exceptions import (
    FileConstraintError, SubmissionValidationError, TransportError, WorkflowError,
)


class FirstErrorMessageTests(SimpleTestCase):
    def test_non_field_errors_win(self):
        detail = {'title': ['Title is bad'], 'non_field_errors': ['Whole form is bad']}
        self.assertEqual(first_error_message(detail), 'Whole form is bad')

    def test_first_field_in_order(self):
        detail = {'title': ['Title is bad'], 'date': ['Date is bad']}
        self.assertEqual(first_error_message(detail), 'Title is bad')

    def test_nested_lists_and_strings(self):
        self.assertEqual(first_error_message([[], ['inner']]), 'inner')
        self.assertEqual(first_error_message('plain'), 'plain')
        self.assertIsNone(first_error_message({}))


class ExceptionHandlerTests(SimpleTestCase):
    def _handle(self, exc):
        return exception_handler(exc, {'view': None})

    def test_portal_errors_map_to_status(self):
        cases = [
            (SubmissionValidationError('bad field'), 400),
            (FileConstraintError(), 413),
            (WorkflowError('not now'), 409),
            (TransportError(), 502),
        ]
        for exc, status_code in cases:
            with self.subTest(exc=exc.__class__.__name__):
                response = self._handle(exc)
                self.assertEqual(response.status_code, status_code)
                self.assertEqual(response.data, {'error': exc.message})

    def test_drf_validation_error_is_flattened(self):
        response = self._handle(exceptions.ValidationError({'non_field_errors': ['Nope']}))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {'error': 'Nope'})

    def test_http404(self):
        response = self._handle(Http404())
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {'error': 'Not found'})

    def test_unhandled_error_is_500(self):
        with self.assertLogs('apps.core.api', level='ERROR'):
            response = self._handle(RuntimeError('boom'))
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {'error': 'Internal server error'})
