"""
Content items (posts and pages) whose edits are tracked.
"""

from django.conf import settings
from django.db import models
from django.urls import reverse

from core.constants import PostStatus, PostType


class Post(models.Model):
    """A publishable content item. Revisions are stored as child posts."""

    title = models.CharField(max_length=255, blank=True, default="")
    body = models.TextField(blank=True, default="")

    status = models.CharField(
        max_length=20,
        choices=PostStatus.CHOICES,
        default=PostStatus.DRAFT,
        db_index=True
    )

    post_type = models.CharField(
        max_length=20,
        choices=PostType.CHOICES,
        default=PostType.POST,
        db_index=True
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='posts'
    )

    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='revisions',
        help_text="Post this revision belongs to"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-updated_at']

    def __str__(self):
        return self.title or f"(no title) #{self.pk}"

    @property
    def is_revision(self):
        return self.post_type == PostType.REVISION

    def get_edit_url(self):
        return reverse('admin:content_post_change', args=[self.pk])
