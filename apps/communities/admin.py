from django.contrib import admin
from django.db.models import F
from apps.communities.models import Community, CommunityMember


class CommunityMemberInline(admin.TabularInline):
    """Read-only roster; membership changes go through the API services."""
    model = CommunityMember
    extra = 0
    fields = ['user', 'delivery_time_choice', 'joined_at']
    readonly_fields = ['user', 'delivery_time_choice', 'joined_at']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Community)
class CommunityAdmin(admin.ModelAdmin):
    """Admin interface for Communities."""

    list_display = [
        'name',
        'member_count',
        'delivery_day',
        'delivery_time',
        'longitude',
        'latitude',
        'created_at'
    ]
    list_filter = ['delivery_day', 'created_at']
    search_fields = ['name']
    readonly_fields = ['delivery_time', 'version', 'created_at', 'updated_at']
    inlines = [CommunityMemberInline]
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name',)
        }),
        ('Location', {
            'fields': ('longitude', 'latitude')
        }),
        ('Preferences', {
            'fields': ('delivery_day', 'delivery_time')
        }),
        ('Metadata', {
            'fields': ('version', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def member_count(self, obj):
        """Show number of members."""
        return obj.members.count()
    member_count.short_description = 'Members'

    def save_model(self, request, obj, form, change):
        # Admin edits count as aggregate writes too
        if change:
            obj.version = F('version') + 1
        super().save_model(request, obj, form, change)
