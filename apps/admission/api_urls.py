from django.urls import path

from . import api_views

urlpatterns = [
    path('forms/student-admission', api_views.student_admission_view, name='student_admission'),
]
