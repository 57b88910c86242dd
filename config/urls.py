from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/', include('config.api_urls')),

    path('admission/', include('apps.admission.urls', namespace='admission')),
    path('calendar/', include('apps.events.urls', namespace='events')),
    path('dashboard/', include('apps.dashboard.urls', namespace='dashboard')),

    path('', RedirectView.as_view(pattern_name='events:calendar', permanent=False), name='home'),
]


# ============================================
# ERROR HANDLERS
# ============================================

handler404 = 'apps.core.views.custom_page_not_found_view'
handler500 = 'apps.core.views.custom_error_view'
handler403 = 'apps.core.views.custom_permission_denied_view'
handler400 = 'apps.core.views.custom_bad_request_view'
