from django.contrib import admin
from .models import HistorySettings


@admin.register(HistorySettings)
class HistorySettingsAdmin(admin.ModelAdmin):
    """
    Edit History Settings - geolocation API key

    IMPORTANT: This is a singleton - only one instance exists.
    The key is normally edited from the Edit History Settings page.
    """

    list_display = ['__str__', 'updated_at']
    readonly_fields = ['created_at', 'updated_at']
    fieldsets = (
        ('Geolocation', {
            'fields': ('api_key',),
            'description': 'Get a token from https://ipinfo.io/signup'
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def has_add_permission(self, request):
        # Only allow one instance
        return not HistorySettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        from common.utils import sanitize_text_field
        obj.api_key = sanitize_text_field(obj.api_key)
        super().save_model(request, obj, form, change)
