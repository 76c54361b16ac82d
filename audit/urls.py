"""
Edit History URLs
"""

from django.urls import path

from audit import api, views

app_name = 'audit'

urlpatterns = [
    path('logs/', views.logs_page, name='logs'),
    path('settings/', views.settings_page, name='settings'),

    # JSON endpoint
    path('api/logs/', api.EditHistoryLogListView.as_view(), name='api_logs'),
]
