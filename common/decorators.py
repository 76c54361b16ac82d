"""
Custom decorators for access control and error handling with request ID logging
"""
from functools import wraps
from django.shortcuts import redirect
from django.contrib import messages
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.http import Http404
import logging

logger = logging.getLogger(__name__)

MANAGE_PERMISSION = 'audit.manage_edit_history'


def _get_request_id(request):
    """Get request ID from request object"""
    return getattr(request, 'request_id', 'N/A')


def _log_with_request_id(level, request, message, exc_info=False):
    """Log message with request ID context"""
    request_id = _get_request_id(request)
    extra = {'request_id': request_id}
    if level == 'error':
        logger.error(f"[{request_id}] {message}", exc_info=exc_info, extra=extra)
    elif level == 'warning':
        logger.warning(f"[{request_id}] {message}", extra=extra)
    elif level == 'info':
        logger.info(f"[{request_id}] {message}", extra=extra)


def can_manage_edit_history(user):
    """Administrative capability check for the edit history pages"""
    return bool(user and user.is_authenticated and user.has_perm(MANAGE_PERMISSION))


def edit_history_admin_required(view_func):
    """
    Decorator to ensure only administrators can access the view.
    Anonymous users are sent to login, others get 403.
    """
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())

        if not can_manage_edit_history(request.user):
            _log_with_request_id('warning', request,
                f"Unauthorized access attempt by user {request.user.username} - {view_func.__name__}")
            raise PermissionDenied("You do not have permission to manage edit history.")

        return view_func(request, *args, **kwargs)
    return _wrapped_view


def handle_errors(view_func):
    """
    Decorator to handle common errors gracefully with proper logging
    Only logs important errors, not every exception
    """
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        try:
            return view_func(request, *args, **kwargs)
        except (Http404, PermissionDenied):
            raise
        except ValueError as e:
            # Validation errors - log but don't show full traceback
            _log_with_request_id('warning', request,
                f"Validation error in {view_func.__name__}: {str(e)}")
            messages.error(request, f'Invalid input: {str(e)}')
            return redirect('admin:index')
        except Exception as e:
            error_type = type(e).__name__
            error_message = str(e)

            _log_with_request_id('error', request,
                f"Unexpected error in {view_func.__name__}: {error_type}: {error_message}",
                exc_info=True)

            messages.error(request, 'An error occurred. Please try again or contact support.')
            return redirect('admin:index')
    return _wrapped_view
