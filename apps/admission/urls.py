from django.urls import path

from . import views

app_name = 'admission'

urlpatterns = [
    # Public URLs
    path('', views.AdmissionApplyView.as_view(), name='apply'),
    path('success/', views.AdmissionSuccessView.as_view(), name='apply_success'),

    # Staff URLs
    path('manage/', views.AdmissionListView.as_view(), name='staff_list'),
    path('manage/<uuid:pk>/', views.AdmissionDetailView.as_view(), name='staff_detail'),
]
