from django.test import SimpleTestCase

from apps.core.pipeline import PipelineState
from apps.institutions.pipeline import InstitutionRegistrationPipeline
from apps.institutions.validators import Messages


class FakeClient:
    def __init__(self):
        self.payloads = []

    def register_institution(self, payload):
        self.payloads.append(payload)
        return {'uniqueId': 'HSGA-INS-XYZ789'}


class InstitutionRegistrationPipelineTests(SimpleTestCase):
    def test_register(self):
        client = FakeClient()
        pipeline = InstitutionRegistrationPipeline(
            client,
            instiName='ZPHS Kazipet', instiType='SCHOOL', headName='K. Rajeshwari',
            phoneNo='9000012345', email='zphs@example.com', district='Warangal',
            password='hsga2026',
        )

        self.assertEqual(pipeline.submit(), PipelineState.ACCEPTED)
        self.assertEqual(pipeline.result, 'HSGA-INS-XYZ789')
        self.assertEqual(client.payloads[0]['instiType'], 'SCHOOL')

    def test_missing_type(self):
        client = FakeClient()
        pipeline = InstitutionRegistrationPipeline(client, instiName='ZPHS Kazipet')

        self.assertEqual(pipeline.submit(), PipelineState.VALIDATION_FAILED)
        self.assertEqual(pipeline.error, str(Messages.INSTI_TYPE))
        self.assertEqual(client.payloads, [])
