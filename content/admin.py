from django.contrib import admin

from content.models import Post


@admin.register(Post)
class PostAdmin(admin.ModelAdmin):
    list_display = ['id', 'title', 'status', 'post_type', 'author', 'updated_at']
    list_filter = ['status', 'post_type']
    search_fields = ['title']
    raw_id_fields = ['author', 'parent']
