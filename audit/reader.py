"""
Edit History Reader

Paginated, reverse-chronological access to the log with display fields
(actor name, content title, local time) resolved for each row.
"""

import logging
import math

from django.apps import apps
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import DatabaseError
from django.utils import dateformat, timezone

from audit.models import EditHistoryLog
from core.constants import UNKNOWN_USER
from core.dto import LogPage, LogRow, PageLink

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
PAGE_PARAM = 'paged'


def parse_page(raw):
    """Page number from a query value; anything invalid or below 1 gives 1"""
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return max(1, page)


def format_action_time(value):
    """Local time using the configured date and time formats"""
    date_format = getattr(settings, 'EDIT_HISTORY_DATE_FORMAT', 'F j, Y')
    time_format = getattr(settings, 'EDIT_HISTORY_TIME_FORMAT', 'g:i a')
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, f"{date_format} {time_format}")


def _in_bulk(model, ids):
    """id -> instance for the ids that still exist; empty on lookup failure"""
    try:
        return model.objects.in_bulk([pk for pk in ids if pk])
    except (DatabaseError, ValueError) as e:
        logger.warning(f"Could not load {model.__name__} records for edit history: {e}")
        return {}


def _content_model():
    return apps.get_model(getattr(settings, 'EDIT_HISTORY_CONTENT_MODEL', 'content.Post'))


def _post_url(post):
    get_edit_url = getattr(post, 'get_edit_url', None)
    if get_edit_url is None:
        return ""
    try:
        return get_edit_url()
    except Exception as e:
        logger.warning(f"No edit link for post #{post.pk}: {e}")
        return ""


def build_rows(entries):
    """Attach display fields to each entry; a missing user or post never aborts the page"""
    users = _in_bulk(get_user_model(), {entry.user_id for entry in entries})
    posts = _in_bulk(_content_model(), {entry.post_id for entry in entries})

    rows = []
    for entry in entries:
        user = users.get(entry.user_id)
        post = posts.get(entry.post_id)
        row = LogRow(
            entry=entry,
            user_display=user.get_username() if user else UNKNOWN_USER,
        )
        if post is not None:
            row.post_title = getattr(post, 'title', None) or str(post)
            row.post_url = _post_url(post)
        row.action_time_display = format_action_time(entry.action_time)
        rows.append(row)
    return rows


def list_logs(page=1, page_size=None):
    """
    One page of the log, newest first.

    total_pages = ceil(count / page_size). Pages past the end are empty,
    not an error.
    """
    page_size = page_size or getattr(settings, 'EDIT_HISTORY_PAGE_SIZE', DEFAULT_PAGE_SIZE)
    page = max(1, page)

    total_rows = EditHistoryLog.objects.count()
    total_pages = math.ceil(total_rows / page_size)

    entries = []
    # Past the end: no query, so huge page numbers never reach the OFFSET
    if page <= total_pages:
        offset = (page - 1) * page_size
        entries = list(EditHistoryLog.objects.newest_first()[offset:offset + page_size])

    return LogPage(
        rows=build_rows(entries),
        page=page,
        page_size=page_size,
        total_rows=total_rows,
        total_pages=total_pages,
    )


def build_page_links(query, total_pages, current):
    """
    One link per page (1..total_pages). Each keeps the other query
    parameters and only replaces `paged`.

    Args:
        query: QueryDict of the current request (request.GET)
    """
    links = []
    for number in range(1, total_pages + 1):
        params = query.copy()
        params[PAGE_PARAM] = str(number)
        links.append(PageLink(
            number=number,
            url=f"?{params.urlencode()}",
            is_current=number == current,
        ))
    return links
