from django.urls import path

from . import api_views

urlpatterns = [
    path('forms/trainer-registration', api_views.trainer_registration_view, name='trainer_registration'),
    path('admin/trainers', api_views.trainer_list_view, name='trainer_list'),
    path('admin/trainers/approved', api_views.approved_trainer_list_view, name='trainer_approved_list'),
    path('admin/trainers/<uuid:pk>/status', api_views.trainer_status_view, name='trainer_status'),
]
