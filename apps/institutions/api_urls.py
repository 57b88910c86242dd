from django.urls import path

from . import api_views

urlpatterns = [
    path('forms/insti-registration', api_views.institution_registration_view, name='institution_registration'),
    path('admin/insti', api_views.institution_list_view, name='institution_list'),
    path('admin/insti/<uuid:pk>/status', api_views.institution_status_view, name='institution_status'),
    path(
        'admin/insti/<uuid:pk>/assign-trainer',
        api_views.institution_assign_trainer_view,
        name='institution_assign_trainer',
    ),
]
