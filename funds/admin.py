from django.contrib import admin
from funds.models import Wallet, Transaction

@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'balance', 'currency', 'locked_balance', 'created_at', 'updated_at']
    search_fields = ['user__username', 'user__email']
    list_filter = ['currency', 'created_at']

@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'reference_id', 'user', 'transaction_type', 'amount', 'bonus_amount',
                    'currency', 'status', 'processed_by', 'created_at', 'completed_at']
    search_fields = ['user__username', 'user__email', 'reference_id']
    list_filter = ['transaction_type', 'status', 'created_at', 'completed_at']
    readonly_fields = ['balance_before', 'balance_after', 'processed_by', 'created_at']

    fieldsets = (
        ('Transaction', {
            'fields': ('user', 'transaction_type', 'currency', 'amount', 'fee', 'bonus_amount')
        }),
        ('Status', {
            'fields': ('status', 'reference_id', 'external_id', 'notes')
        }),
        ('Audit', {
            'fields': ('balance_before', 'balance_after', 'processed_by', 'created_at', 'completed_at')
        })
    )

    def has_delete_permission(self, request, obj=None):
        return False  # Audit trail is append-only
