"""
URL configuration for edit_history project.
"""
from django.contrib import admin
from django.urls import path, include
from django.shortcuts import redirect

# Import admin customization (just to apply it, not to use)
from edit_history import admin as admin_customization  # noqa: F401


def root_redirect(request):
    """Redirect root to the edit history log"""
    return redirect('audit:logs')


urlpatterns = [
    path('admin/', admin.site.urls),
    path('edit-history/', include('audit.urls')),
    path('', root_redirect, name='root'),
]
