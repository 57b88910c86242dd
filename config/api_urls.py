from django.urls import include, path

urlpatterns = [
    path('', include('apps.admission.api_urls')),
    path('', include('apps.institutions.api_urls')),
    path('', include('apps.trainers.api_urls')),
    path('', include('apps.events.api_urls')),
    path('', include('apps.dashboard.api_urls')),
]
