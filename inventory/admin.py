# inventory/admin.py
from django.contrib import admin
from .models import Stock


@admin.register(Stock)
class StockAdmin(admin.ModelAdmin):
    list_display = ('item', 'expected_count', 'detected_count')
    search_fields = ('item',)
    readonly_fields = ('detected_count',)
