from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse

from apps.admission.constants import MAX_ATTACHMENT_BYTES, Messages
from apps.admission.models import StudentAdmission

from .factories import png_bytes


def image(name):
    return SimpleUploadedFile(name, png_bytes(), content_type='image/png')


class AdmissionApplyViewTests(TestCase):
    def setUp(self):
        self.url = reverse('admission:apply')
        self.data = {
            'district': 'Warangal',
            'school_name': 'ZPHS Hanamkonda',
            'student_name': 'Lakshmi Devi',
            'father_name': 'Ramesh Rao',
            'date_of_birth': '2011-08-20',
            'class_name': '10-A',
            'aadhar_no': '987698769876',
            'phone_no': '7012345678',
            'address': 'H.No 4-5, Kazipet, Warangal',
            'student_consent': 'on',
            'principal_consent': 'on',
        }

    def _files(self, **overrides):
        files = {
            'student_signature': image('student.png'),
            'principal_signature': image('principal.png'),
            'seal': image('seal.png'),
        }
        files.update(overrides)
        return files

    def test_apply_view_loads(self):
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Student Admission Form')

    def test_submit_creates_admission(self):
        response = self.client.post(self.url, {**self.data, **self._files()})

        self.assertRedirects(response, reverse('admission:apply_success'))
        admission = StudentAdmission.objects.get()
        self.assertEqual(admission.district, 'Warangal')
        self.assertTrue(admission.principal_signature.startswith('data:image/png;base64,'))

    def test_first_error_is_shown(self):
        data = dict(self.data, student_consent='')
        response = self.client.post(self.url, {**data, **self._files()})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['error'], str(Messages.STUDENT_CONSENT))
        self.assertFalse(StudentAdmission.objects.exists())

    def test_oversized_attachment_blocks_only_that_field(self):
        big = SimpleUploadedFile('seal.png', b'\0' * (MAX_ATTACHMENT_BYTES + 1), content_type='image/png')
        response = self.client.post(self.url, {**self.data, **self._files(seal=big)})

        self.assertEqual(response.status_code, 200)
        form = response.context['form']
        self.assertEqual(list(form.errors), ['seal'])
        self.assertEqual(form.errors['seal'], [str(Messages.FILE_TOO_LARGE)])


class AdmissionStaffViewTests(TestCase):
    def setUp(self):
        self.admission = StudentAdmission.objects.create(
            district='Hyderabad',
            school_name='St. Marys High School',
            student_name='Ravi Kumar',
            father_name='Suresh Kumar',
            date_of_birth='2012-05-14',
            class_name='IX-B',
            aadhar_no='123412341234',
            phone_no='9876543210',
            address='12-3 Main Road, Secunderabad',
            student_consent=True,
            principal_consent=True,
        )
        StudentAdmission.objects.create(
            district='Khammam',
            school_name='ZPHS Khammam',
            student_name='Anil Reddy',
            father_name='Venkat Reddy',
            date_of_birth='2011-01-02',
            class_name='X',
            aadhar_no='111122223333',
            phone_no='8765432109',
            address='Near bus stand, Khammam',
            student_consent=True,
            principal_consent=True,
        )
        self.staff = get_user_model().objects.create_user('staff', password='secret', is_staff=True)

    def test_list_requires_login(self):
        response = self.client.get(reverse('admission:staff_list'))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('dashboard:login'), response['Location'])

    def test_list_filters_by_district(self):
        self.client.force_login(self.staff)
        response = self.client.get(reverse('admission:staff_list'), {'district': 'hyderabad'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(list(response.context['admissions']), [self.admission])

    def test_list_search(self):
        self.client.force_login(self.staff)
        response = self.client.get(reverse('admission:staff_list'), {'search': 'anil'})
        self.assertEqual([a.student_name for a in response.context['admissions']], ['Anil Reddy'])

    def test_detail_masks_aadhar(self):
        self.client.force_login(self.staff)
        response = self.client.get(reverse('admission:staff_detail', args=[self.admission.pk]))

        self.assertContains(response, 'XXXX-XXXX-1234')
        self.assertNotContains(response, '123412341234')
