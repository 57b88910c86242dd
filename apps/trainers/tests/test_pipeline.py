from django.test import SimpleTestCase

from apps.core.exceptions import TransportError
from apps.core.pipeline import PipelineState
from apps.trainers.pipeline import TrainerRegistrationPipeline
from apps.trainers.validators import Messages


class FakeClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = 0

    def register_trainer(self, payload):
        self.calls += 1
        if self.error:
            raise self.error
        return self.response


class TrainerRegistrationPipelineTests(SimpleTestCase):
    def _pipeline(self, client):
        return TrainerRegistrationPipeline(
            client,
            fullName='Padma Latha',
            phoneNo='8123456789',
            email='padma@example.com',
            district='Medak',
            password='guides2026',
        )

    def test_accepted_result_is_unique_id(self):
        pipeline = self._pipeline(FakeClient(response={'uniqueId': 'HSGA-TR-ABC234'}))
        self.assertEqual(pipeline.submit(), PipelineState.ACCEPTED)
        self.assertEqual(pipeline.result, 'HSGA-TR-ABC234')

    def test_phone_refuses_letters(self):
        pipeline = self._pipeline(FakeClient())
        self.assertFalse(pipeline.set_field('phoneNo', '81234abc'))
        self.assertEqual(pipeline.values['phoneNo'], '8123456789')

    def test_local_failure_makes_no_call(self):
        client = FakeClient()
        pipeline = self._pipeline(client)
        pipeline.set_field('district', 'Medak 2')

        self.assertEqual(pipeline.submit(), PipelineState.VALIDATION_FAILED)
        self.assertEqual(pipeline.error, str(Messages.DISTRICT))
        self.assertEqual(client.calls, 0)

    def test_server_message_is_shown(self):
        pipeline = self._pipeline(FakeClient(error=TransportError('Registration failed', status_code=500)))
        self.assertEqual(pipeline.submit(), PipelineState.REJECTED)
        self.assertEqual(pipeline.error, 'Registration failed')
