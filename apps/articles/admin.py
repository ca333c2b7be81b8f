from django.contrib import admin
from apps.articles.models import Article


@admin.register(Article)
class ArticleAdmin(admin.ModelAdmin):
    list_display = ['name', 'category', 'price', 'unit', 'is_available', 'updated_at']
    list_filter = ['category', 'unit', 'is_available']
    search_fields = ['name', 'description']
    readonly_fields = ['created_at', 'updated_at']
    list_editable = ['is_available']

    actions = ['mark_available', 'mark_unavailable']

    def mark_available(self, request, queryset):
        updated = queryset.update(is_available=True)
        self.message_user(request, f'{updated} articles marked available.')
    mark_available.short_description = 'Mark selected articles available'

    def mark_unavailable(self, request, queryset):
        updated = queryset.update(is_available=False)
        self.message_user(request, f'{updated} articles marked unavailable.')
    mark_unavailable.short_description = 'Mark selected articles unavailable'
