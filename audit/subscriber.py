"""
Content event subscriber

The interface the host calls when content is saved or deleted. It takes
explicit actor/request contexts and hands a ContentEvent to the recorder.
"""

from audit import recorder
from core.constants import LifecycleKind
from core.dto import ContentEvent


class EditHistorySubscriber:
    """Turns host content callbacks into edit history entries"""

    def on_content_saved(self, post, update, actor=None, request_ctx=None):
        """
        Args:
            post: the saved content item (needs pk, status, is_revision)
            update: True when an existing item was saved again
        """
        event = ContentEvent(
            post_id=post.pk,
            kind=LifecycleKind.UPDATED if update else LifecycleKind.CREATED,
            post_status=getattr(post, 'status', None),
            is_revision=bool(getattr(post, 'is_revision', False)),
        )
        return recorder.record(event, actor=actor, request_ctx=request_ctx)

    def on_content_deleted(self, post_id, actor=None, request_ctx=None):
        event = ContentEvent(post_id=post_id, kind=LifecycleKind.DELETED)
        return recorder.record(event, actor=actor, request_ctx=request_ctx)


subscriber = EditHistorySubscriber()
