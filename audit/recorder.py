"""
Edit History Recorder

Classifies a content lifecycle event and appends one log entry.
"""

import logging

from django.db import transaction

from audit import location
from audit.models import EditHistoryLog
from core.constants import ActionType, LifecycleKind, PostStatus
from core.dto import ActorContext, RequestContext

logger = logging.getLogger(__name__)


def classify(event):
    """
    Map a lifecycle event to (action_type, activity_name).

    Precedence: delete, then draft status, then update, then create.
    """
    if event.kind == LifecycleKind.DELETED:
        action_type = ActionType.DELETE
    elif event.post_status == PostStatus.DRAFT:
        action_type = ActionType.DRAFT
    elif event.kind == LifecycleKind.UPDATED:
        action_type = ActionType.UPDATE
    else:
        action_type = ActionType.CREATE
    return action_type, ActionType.ACTIVITY_NAMES[action_type]


def should_record(event, request_ctx):
    """Autosaves and revision saves are not distinct edits"""
    return not (request_ctx.is_autosave or event.is_revision)


def record(event, actor=None, request_ctx=None):
    """
    Record a content lifecycle event.

    Args:
        event: ContentEvent
        actor: ActorContext of the user credited with the change
        request_ctx: RequestContext with the client IP and autosave flag

    Returns:
        EditHistoryLog instance, or None when suppressed or the insert failed
    """
    actor = actor or ActorContext()
    request_ctx = request_ctx or RequestContext()

    if not should_record(event, request_ctx):
        logger.debug(f"Skipping autosave/revision event for post #{event.post_id}")
        return None

    action_type, activity_name = classify(event)
    # No client IP (system-triggered event): nothing to look up
    resolved_location = location.resolve(request_ctx.ip) if request_ctx.ip else None

    try:
        with transaction.atomic():
            entry = EditHistoryLog.objects.create(
                user_id=actor.user_id or 0,
                post_id=event.post_id,
                action_type=action_type,
                activity_name=activity_name,
                user_ip=request_ctx.ip,
                location=resolved_location,
            )
    except Exception as e:
        # Don't fail the content operation if edit history logging fails
        logger.error(f"Failed to record edit history for post #{event.post_id}: {e}", exc_info=True)
        return None

    logger.info(f"Edit history: user #{entry.user_id} - {action_type} - post #{entry.post_id}")
    return entry
