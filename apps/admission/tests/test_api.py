import base64

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.admission.constants import MAX_ATTACHMENT_BYTES, Messages
from apps.admission.models import StudentAdmission

from .factories import valid_payload


class StudentAdmissionApiTests(APITestCase):
    def setUp(self):
        self.url = reverse('student_admission')

    def test_submit_valid_form(self):
        response = self.client.post(self.url, valid_payload(), format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        admission = StudentAdmission.objects.get(pk=response.data['id'])
        self.assertEqual(admission.student_name, 'Ravi Kumar')
        self.assertEqual(admission.aadhar_no, '123412341234')
        self.assertEqual(admission.masked_aadhar, 'XXXX-XXXX-1234')
        self.assertTrue(admission.seal.startswith('data:image/png;base64,'))

    def test_invalid_phone_is_rejected_with_message(self):
        response = self.client.post(self.url, valid_payload(phoneNo='5123456789'), format='json')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'error': str(Messages.PHONE)})
        self.assertFalse(StudentAdmission.objects.exists())

    def test_missing_consent_is_rejected(self):
        response = self.client.post(self.url, valid_payload(principalConsent=False), format='json')
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], str(Messages.PRINCIPAL_CONSENT))

    def test_oversized_attachment_is_413(self):
        too_big = base64.b64encode(b'\0' * (MAX_ATTACHMENT_BYTES + 1)).decode('ascii')
        payload = valid_payload(seal=f'data:image/png;base64,{too_big}')

        response = self.client.post(self.url, payload, format='json')

        self.assertEqual(response.status_code, status.HTTP_413_REQUEST_ENTITY_TOO_LARGE)
        self.assertEqual(response.data, {'error': str(Messages.FILE_TOO_LARGE)})

    def test_non_image_attachment_is_rejected(self):
        pdf = base64.b64encode(b'%PDF-1.4').decode('ascii')
        response = self.client.post(
            self.url, valid_payload(seal=f'data:application/pdf;base64,{pdf}'), format='json',
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], str(Messages.FILE_NOT_IMAGE))

    def test_listing_requires_admin(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertIn('error', response.data)

    def test_admin_lists_submissions(self):
        self.client.post(self.url, valid_payload(), format='json')
        admin = get_user_model().objects.create_user('admin', password='secret', is_staff=True)
        self.client.force_authenticate(admin)

        response = self.client.get(self.url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]['schoolName'], 'St. Marys High School')
        self.assertEqual(response.data[0]['dob'], '2012-05-14')
