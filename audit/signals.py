"""
Edit History Signals

Connects post_save/post_delete of the tracked content model to the
subscriber, using the actor/IP captured by EditContextMiddleware.
"""

from django.apps import apps
from django.conf import settings
from django.db.models.signals import post_save, post_delete

from audit.helpers import get_current_contexts
from audit.subscriber import subscriber

DEFAULT_CONTENT_MODEL = 'content.Post'


def get_content_model():
    return apps.get_model(getattr(settings, 'EDIT_HISTORY_CONTENT_MODEL', DEFAULT_CONTENT_MODEL))


def log_content_save(sender, instance, created, raw=False, **kwargs):
    """Log content creation/update/draft"""
    if raw:
        # Fixture loading
        return
    actor, request_ctx = get_current_contexts()
    subscriber.on_content_saved(instance, update=not created, actor=actor, request_ctx=request_ctx)


def log_content_delete(sender, instance, **kwargs):
    """Log content deletion"""
    if getattr(instance, 'is_revision', False):
        return
    actor, request_ctx = get_current_contexts()
    subscriber.on_content_deleted(instance.pk, actor=actor, request_ctx=request_ctx)


def connect_content_signals():
    content_model = get_content_model()
    post_save.connect(log_content_save, sender=content_model, dispatch_uid='audit.log_content_save')
    post_delete.connect(log_content_delete, sender=content_model, dispatch_uid='audit.log_content_delete')
