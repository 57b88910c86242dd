from django.urls import path

from . import views

app_name = 'events'

urlpatterns = [
    path('', views.CalendarView.as_view(), name='calendar'),
    path('manage/', views.CalendarManageView.as_view(), name='manage'),
    path('manage/<uuid:pk>/delete/', views.CalendarEventDeleteView.as_view(), name='delete'),
]
