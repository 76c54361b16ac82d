"""
WSGI config for edit_history project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'edit_history.settings')

application = get_wsgi_application()
