from django.urls import path

from . import api_views

urlpatterns = [
    path('events', api_views.events_view, name='events'),
]
