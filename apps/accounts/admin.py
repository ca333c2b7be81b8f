from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.html import format_html
from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Custom admin interface for User model.

    Provides user listing with community affiliation, filtering by
    status and bulk activation actions.
    """

    list_display = [
        'email',
        'display_name',
        'community',
        'is_active_badge',
        'created_at',
        'last_login',
    ]

    list_filter = [
        'is_active',
        'is_staff',
        'is_superuser',
        'created_at',
    ]

    search_fields = [
        'email',
        'display_name',
        'community__name',
    ]

    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    # Remove username field references from BaseUserAdmin
    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'display_name', 'password')
        }),
        ('Community', {
            'fields': ('community',),
            'description': 'Change membership through the community roster, not here.',
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        ('Create User', {
            'classes': ('wide',),
            'fields': ('email', 'display_name', 'password1', 'password2'),
        }),
    )

    readonly_fields = [
        'community',
        'created_at',
        'last_login',
    ]

    filter_horizontal = ['groups', 'user_permissions']

    def is_active_badge(self, obj):
        """Display active status as colored badge."""
        if obj.is_active:
            return format_html(
                '<span style="background: #6B8E5E; color: white; padding: 3px 8px; '
                'border-radius: 10px; font-size: 11px;">{}</span>',
                'Active'
            )
        return format_html(
            '<span style="background: #B85C5C; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            'Inactive'
        )
    is_active_badge.short_description = 'Status'
    is_active_badge.admin_order_field = 'is_active'

    actions = ['activate_users', 'deactivate_users']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        """Activate selected users."""
        count = queryset.update(is_active=True)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Deactivate selected users')
    def deactivate_users(self, request, queryset):
        """Deactivate selected users (superusers are skipped)."""
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(is_active=False)
        skipped = queryset.count() - count
        msg = f'Deactivated {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('community')
