"""
Edit context middleware

Captures the actor and client IP of each request so that model signals,
which carry no request, can still credit the change.
"""

from audit.helpers import build_contexts, edit_context


class EditContextMiddleware:
    """
    Must come after AuthenticationMiddleware (needs request.user).
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        actor, request_ctx = build_contexts(request)
        with edit_context(actor, request_ctx):
            return self.get_response(request)
