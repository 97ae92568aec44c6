# logs/admin.py
from django.contrib import admin
from .models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ('created_at', 'user', 'kind', 'action', 'stock_id', 'counted_amount')
    search_fields = ('action', 'user__email', 'user__full_name')
    list_filter = ('kind', 'created_at', 'user')

    # append-only log
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
