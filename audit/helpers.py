"""
Edit History Helper Functions

Request inspection and the per-request edit context used by the
signal-driven recorder.
"""

import threading
from contextlib import contextmanager

from core.dto import ActorContext, RequestContext

_edit_context = threading.local()


def get_client_ip(request):
    """
    Extract client IP address from request.
    Handles proxies and load balancers.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')

    if x_forwarded_for:
        # X-Forwarded-For can contain multiple IPs, get the first one
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')

    return ip or None


def is_autosave_request(request):
    """Editors flag background autosaves with ?autosave=1 or an X-Autosave header"""
    flag = request.headers.get('X-Autosave') or request.GET.get('autosave')
    return flag not in (None, '', '0', 'false')


def build_contexts(request):
    """(ActorContext, RequestContext) for a Django request"""
    actor = ActorContext.from_user(getattr(request, 'user', None))
    request_ctx = RequestContext(
        ip=get_client_ip(request),
        is_autosave=is_autosave_request(request),
    )
    return actor, request_ctx


def get_current_contexts():
    """Contexts of the request being handled on this thread (empty outside a request)"""
    actor = getattr(_edit_context, 'actor', None) or ActorContext()
    request_ctx = getattr(_edit_context, 'request_ctx', None) or RequestContext()
    return actor, request_ctx


@contextmanager
def edit_context(actor, request_ctx):
    """Make actor/request contexts current for the duration of the block"""
    previous = (getattr(_edit_context, 'actor', None), getattr(_edit_context, 'request_ctx', None))
    _edit_context.actor = actor
    _edit_context.request_ctx = request_ctx
    try:
        yield
    finally:
        _edit_context.actor, _edit_context.request_ctx = previous
