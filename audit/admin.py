"""
Edit History Admin - READ ONLY

Log entries are immutable and cannot be edited or deleted via admin.
"""

from django.contrib import admin
from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils.html import format_html

from audit.models import EditHistoryLog
from core.constants import UNKNOWN_USER


@admin.register(EditHistoryLog)
class EditHistoryLogAdmin(admin.ModelAdmin):
    """
    Read-only admin for edit history.

    Features:
    - View logs only (no add/edit/delete)
    - Filter by action and date
    - Search by IP address and location
    """

    list_display = [
        'id',
        'action_time',
        'user_label',
        'post_id',
        'action_type',
        'activity_name',
        'user_ip',
        'location',
    ]

    list_filter = [
        'action_type',
        'action_time',
    ]

    search_fields = [
        'user_ip',
        'location',
    ]

    readonly_fields = [
        'user_id',
        'post_id',
        'action_time',
        'action_type',
        'activity_name',
        'user_ip',
        'location',
    ]

    date_hierarchy = 'action_time'

    ordering = ['-action_time', '-id']

    def has_add_permission(self, request):
        """Disable manual creation via admin"""
        return False

    def has_change_permission(self, request, obj=None):
        """Disable editing"""
        return False

    def has_delete_permission(self, request, obj=None):
        """Disable deletion"""
        return False

    @admin.display(description='User')
    def user_label(self, obj):
        """Display user as clickable link"""
        user = get_user_model().objects.filter(pk=obj.user_id).first() if obj.user_id else None
        if user is None:
            return UNKNOWN_USER
        opts = user._meta
        url = reverse(f'admin:{opts.app_label}_{opts.model_name}_change', args=[user.pk])
        return format_html('<a href="{}">{}</a>', url, user.get_username())
