"""
Utility functions for accessing edit history settings
"""
import re

from django.db import DatabaseError, transaction
from django.utils.html import strip_tags

from .models import HistorySettings
import logging

logger = logging.getLogger(__name__)

_SCRIPT_STYLE_RE = re.compile(r'<(script|style)[^>]*?>.*?</\1\s*>', re.IGNORECASE | re.DOTALL)
_OCTETS_RE = re.compile(r'%[a-fA-F0-9]{2}')
_WHITESPACE_RE = re.compile(r'[\r\n\t ]+')
_CONTROL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]')


def sanitize_text_field(value):
    """
    Reduce user input to a single line of plain text.

    Drops script/style blocks with their content, then strips remaining
    tags, percent-encoded octets and control characters. Whitespace is
    collapsed and the result trimmed.
    """
    if value is None:
        return ""
    text = _SCRIPT_STYLE_RE.sub('', str(value))
    text = strip_tags(text)
    text = _CONTROL_RE.sub('', text)
    text = _OCTETS_RE.sub('', text)
    text = _WHITESPACE_RE.sub(' ', text)
    return text.strip()


def get_history_settings():
    """Get edit history settings (singleton)"""
    return HistorySettings.load()


def get_api_key():
    """Get the geolocation API key ("" when not configured)"""
    try:
        # Savepoint: a failed lookup must not break the caller's transaction
        with transaction.atomic():
            return HistorySettings.objects.values_list('api_key', flat=True).get(pk=1) or ""
    except HistorySettings.DoesNotExist:
        return ""
    except DatabaseError as e:
        # Settings table missing (migration may be pending) - behave as unset
        logger.warning(f"Edit history settings unavailable: {e}")
        return ""


def set_api_key(value):
    """Sanitize and persist the geolocation API key. Returns the stored value."""
    settings_obj = get_history_settings()
    settings_obj.api_key = sanitize_text_field(value)
    settings_obj.save()
    logger.info("Edit history API key updated")
    return settings_obj.api_key
