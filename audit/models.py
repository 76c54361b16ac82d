"""
Edit History Log Model

IMMUTABLE: Log entries cannot be edited or deleted after creation.
Purpose: Record who changed which content item, when, and from where.
"""

from django.db import models
from django.db.models.functions import Now
from django.utils import timezone
from django.core.exceptions import PermissionDenied

from core.constants import ActionType


# ============================================================================
# CUSTOM MANAGER AND QUERYSET
# ============================================================================

class EditHistoryLogQuerySet(models.QuerySet):
    """Custom queryset for edit history with filtering helpers"""

    def newest_first(self):
        """Reverse-chronological, ties broken by insertion order"""
        return self.order_by('-action_time', '-id')

    def for_user(self, user_id):
        """Filter logs for a specific actor"""
        return self.filter(user_id=user_id)

    def for_post(self, post_id):
        """Filter logs for a specific content item"""
        return self.filter(post_id=post_id)

    def for_action(self, action_type):
        """Filter logs for a specific action"""
        return self.filter(action_type=action_type)


class EditHistoryLogManager(models.Manager.from_queryset(EditHistoryLogQuerySet)):
    """Custom manager for edit history logs"""


# ============================================================================
# EDIT HISTORY LOG MODEL
# ============================================================================

class EditHistoryLog(models.Model):
    """
    Immutable log entry for one content create/update/draft/delete event.

    user_id and post_id are plain integers: the actor or the content item
    may be deleted later and the entry must survive it.
    """

    user_id = models.BigIntegerField(
        default=0,
        db_index=True,
        help_text="User who performed the action (0 = no authenticated user)"
    )

    post_id = models.BigIntegerField(
        db_index=True,
        help_text="Content item affected"
    )

    action_time = models.DateTimeField(
        default=timezone.now,
        db_default=Now(),
        db_index=True,
        help_text="When the action occurred"
    )

    action_type = models.CharField(
        max_length=50,
        choices=ActionType.CHOICES,
        help_text="Type of action performed"
    )

    activity_name = models.CharField(
        max_length=255,
        help_text="Human-readable label for the action"
    )

    # Request metadata
    user_ip = models.CharField(
        max_length=45,
        null=True,
        blank=True,
        help_text="IP address of the user (IPv4 or IPv6)"
    )

    location = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Resolved place for the IP address"
    )

    objects = EditHistoryLogManager()

    class Meta:
        db_table = 'audit_edit_history_log'
        verbose_name = "Edit History Log"
        verbose_name_plural = "Edit History Logs"
        ordering = ['-action_time', '-id']
        permissions = [
            ('manage_edit_history', 'Can view edit history and change its settings'),
        ]

    def __str__(self):
        return f"User #{self.user_id} - {self.action_type} - Post #{self.post_id} - {self.action_time}"

    def save(self, *args, **kwargs):
        """
        Override save to enforce immutability.
        Only allow creation, not updates.
        """
        if self.pk is not None:
            raise PermissionDenied(
                "Edit history logs are immutable and cannot be modified after creation."
            )
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        """
        Override delete to prevent deletion.
        """
        raise PermissionDenied(
            "Edit history logs are immutable and cannot be deleted."
        )
