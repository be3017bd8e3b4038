from django.contrib import admin
from bonuses.models import BonusSettings, BonusTier

class BonusTierInline(admin.TabularInline):
    model = BonusTier
    fields = ['min_deposit', 'max_deposit', 'bonus_percent', 'is_active', 'sort_order']
    ordering = ['sort_order', 'id']
    extra = 0

@admin.register(BonusSettings)
class BonusSettingsAdmin(admin.ModelAdmin):
    list_display = ['id', 'is_enabled', 'regular_bonus_percent', 'first_deposit_bonus_enabled',
                   'first_deposit_bonus_percent', 'use_tier_bonus', 'max_bonus_amount',
                   'updated_by', 'updated_at']
    readonly_fields = ['updated_by', 'created_at', 'updated_at']
    inlines = [BonusTierInline]

    fieldsets = (
        ('Program', {
            'fields': ('is_enabled', 'use_tier_bonus')
        }),
        ('Rates', {
            'fields': ('regular_bonus_percent', 'first_deposit_bonus_enabled',
                       'first_deposit_bonus_percent')
        }),
        ('Limits', {
            'fields': ('min_deposit_for_bonus', 'max_bonus_amount')
        }),
        ('Withdrawal', {
            'fields': ('bonus_withdrawable', 'withdrawal_volume_multiplier', 'bonus_expiry_days')
        }),
        ('Audit', {
            'fields': ('updated_by', 'created_at', 'updated_at')
        })
    )

    def has_add_permission(self, request):
        return not BonusSettings.objects.exists()

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        obj.updated_by = request.user
        super().save_model(request, obj, form, change)
