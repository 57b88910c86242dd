from django.urls import path

from . import api_views

urlpatterns = [
    path('admin/login', api_views.login_view, name='admin_login'),
    path('admin/logout', api_views.logout_view, name='admin_logout'),
]
