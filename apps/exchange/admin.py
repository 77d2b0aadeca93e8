"""
Django Admin configuration for Exchange app.
Conversion transactions are append-only, so the admin is a read-only browser.
"""

from django.contrib import admin

from apps.exchange.infrastructure.persistence.models import ConversionTransaction


@admin.register(ConversionTransaction)
class ConversionTransactionAdmin(admin.ModelAdmin):
    """Admin interface for ConversionTransaction model."""

    list_display = (
        'transaction_id',
        'get_currency_pair',
        'original_amount',
        'rate',
        'converted_amount',
        'date_time',
    )
    list_filter = ('date_time', 'from_currency', 'to_currency')
    search_fields = ('transaction_id', 'from_currency', 'to_currency')
    readonly_fields = (
        'transaction_id',
        'original_amount',
        'from_currency',
        'to_currency',
        'rate',
        'converted_amount',
        'date_time',
    )
    date_hierarchy = 'date_time'
    ordering = ('-date_time',)

    fieldsets = (
        ('Conversion', {
            'fields': (
                'original_amount',
                'from_currency',
                'to_currency',
                'rate',
                'converted_amount',
            )
        }),
        ('Transaction', {
            'fields': ('transaction_id', 'date_time'),
        }),
    )

    def get_currency_pair(self, obj):
        """Display currency pair in format SOURCE/TARGET."""
        return f"{obj.from_currency}/{obj.to_currency}"
    get_currency_pair.short_description = 'Currency Pair'
    get_currency_pair.admin_order_field = 'from_currency'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
