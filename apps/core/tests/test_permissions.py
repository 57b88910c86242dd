from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import resolve
from rest_framework.settings import api_settings

from apps.core.permissions import IsPortalAdmin


class DefaultPermissionTests(TestCase):
    def test_default_permission_loads_with_urlconf(self):
        self.assertEqual(api_settings.DEFAULT_PERMISSION_CLASSES, [IsPortalAdmin])
        self.assertEqual(resolve('/api/admin/insti').url_name, 'institution_list')

    def test_admin_endpoints_need_staff(self):
        self.assertEqual(self.client.get('/api/admin/insti').status_code, 403)

        staff = get_user_model().objects.create_user('staff', password='secret', is_staff=True)
        self.client.force_login(staff)
        self.assertEqual(self.client.get('/api/admin/insti').status_code, 200)
