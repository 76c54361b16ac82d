from django.contrib import admin

# Customize admin site
admin.site.site_header = "Edit History Tracker - Admin Panel"
admin.site.site_title = "Edit History Admin"
admin.site.index_title = "Content and Edit History Administration"

# Import all admin configurations to register them
from common import admin as common_admin  # noqa: F401
from audit import admin as audit_admin  # noqa: F401
