from django.contrib import admin
from apps.orders.models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    fields = ['article', 'article_name', 'quantity', 'unit_price']
    readonly_fields = ['article', 'article_name', 'quantity', 'unit_price']
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for Orders."""

    list_display = ['id', 'user', 'community', 'total_amount', 'status', 'delivery_date', 'created_at']
    list_filter = ['status', 'delivery_date', 'created_at']
    search_fields = ['user__email', 'community__name']
    readonly_fields = ['user', 'community', 'total_amount', 'created_at', 'updated_at']
    inlines = [OrderItemInline]
    date_hierarchy = 'created_at'

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'community')
