from django.contrib import admin
from django.utils import timezone
from django.utils.html import format_html
from .models import Article, Category


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['title', 'slug', 'article_count', 'created_at']
    search_fields = ['title']
    prepopulated_fields = {'slug': ('title',)}
    readonly_fields = ['created_at']

    def article_count(self, obj):
        return obj.articles.count()
    article_count.short_description = 'Articles'


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ['title', 'author', 'category', 'status_display', 'published_at', 'updated_at']
    list_filter = ['category', 'published_at', 'created_at']
    search_fields = ['title', 'body', 'author__username']
    readonly_fields = ['created_at', 'updated_at']
    prepopulated_fields = {'slug': ('title',)}
    date_hierarchy = 'created_at'
    actions = ['publish_articles', 'unpublish_articles']

    fieldsets = (
        ('Article', {
            'fields': ('title', 'slug', 'category', 'author')
        }),
        ('Content', {
            'fields': ('excerpt', 'body')
        }),
        ('Publication', {
            'fields': ('published_at', 'created_at', 'updated_at')
        }),
    )

    def status_display(self, obj):
        if obj.is_published:
            return format_html('<span style="color: {};">{}</span>', 'green', 'Published')
        if obj.published_at:
            return format_html('<span style="color: {};">{}</span>', 'orange', 'Scheduled')
        return format_html('<span style="color: {};">{}</span>', 'gray', 'Draft')
    status_display.short_description = 'Status'

    def publish_articles(self, request, queryset):
        updated = queryset.filter(published_at__isnull=True).update(published_at=timezone.now())
        self.message_user(request, f'{updated} articles published.')
    publish_articles.short_description = 'Publish selected articles'

    def unpublish_articles(self, request, queryset):
        updated = queryset.update(published_at=None)
        self.message_user(request, f'{updated} articles moved back to drafts.')
    unpublish_articles.short_description = 'Unpublish selected articles'
