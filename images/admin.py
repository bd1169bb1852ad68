from django.contrib import admin
from django.utils.html import format_html
from .models import Image


@admin.register(Image)
class ImageAdmin(admin.ModelAdmin):
    list_display = ['preview', 'original_name', 'content_type', 'size_display', 'dimensions', 'uploaded_by', 'uploaded_at']
    list_filter = ['content_type', 'uploaded_at']
    search_fields = ['original_name', 'file', 'uploaded_by__username']
    readonly_fields = ['content_type', 'size', 'width', 'height', 'uploaded_at']
    date_hierarchy = 'uploaded_at'

    def preview(self, obj):
        return format_html('<img src="{}" style="max-height: 48px;" alt="">', obj.url)
    preview.short_description = 'Image'

    def size_display(self, obj):
        return f"{obj.size / 1024:.1f} KB"
    size_display.short_description = 'Size'

    def dimensions(self, obj):
        if obj.width and obj.height:
            return f"{obj.width}×{obj.height}"
        return '-'
    dimensions.short_description = 'Dimensions'
