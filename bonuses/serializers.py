# bonuses/serializers.py
from decimal import Decimal
from django.conf import settings
from django.contrib.auth import get_user_model
from rest_framework import serializers
from bonuses.models import BonusSettings, BonusTier

User = get_user_model()

ZERO = Decimal('0')
HUNDRED = Decimal('100')


def percent_field(**kwargs):
    return serializers.DecimalField(
        max_digits=7, decimal_places=4,
        min_value=ZERO, max_value=HUNDRED,
        coerce_to_string=False, **kwargs
    )


def amount_field(decimal_places=8, **kwargs):
    kwargs.setdefault('min_value', ZERO)
    return serializers.DecimalField(
        max_digits=20, decimal_places=decimal_places,
        coerce_to_string=False, **kwargs
    )


class BonusTierSerializer(serializers.ModelSerializer):
    position = serializers.SerializerMethodField()
    minDeposit = amount_field(source='min_deposit', read_only=True)
    maxDeposit = amount_field(source='max_deposit', read_only=True)
    bonusPercent = percent_field(source='bonus_percent', read_only=True)
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta:
        model = BonusTier
        fields = ['id', 'position', 'minDeposit', 'maxDeposit', 'bonusPercent', 'isActive']

    def get_position(self, obj):
        positions = self.context.get('positions', {})
        return positions.get(obj.pk)


class BonusSettingsSerializer(serializers.ModelSerializer):
    """Settings read model and partial update payload (camelCase on the wire)"""
    isEnabled = serializers.BooleanField(source='is_enabled', required=False)
    regularBonusPercent = percent_field(source='regular_bonus_percent', required=False)
    firstDepositBonusPercent = percent_field(source='first_deposit_bonus_percent', required=False)
    firstDepositBonusEnabled = serializers.BooleanField(
        source='first_deposit_bonus_enabled', required=False
    )
    minDepositForBonus = amount_field(source='min_deposit_for_bonus', required=False)
    maxBonusAmount = amount_field(source='max_bonus_amount', required=False)
    bonusWithdrawable = serializers.BooleanField(source='bonus_withdrawable', required=False)
    withdrawalVolumeMultiplier = serializers.DecimalField(
        source='withdrawal_volume_multiplier', max_digits=6, decimal_places=2,
        min_value=ZERO, coerce_to_string=False, required=False
    )
    bonusExpiryDays = serializers.IntegerField(
        source='bonus_expiry_days', min_value=0, required=False
    )
    useTierBonus = serializers.BooleanField(source='use_tier_bonus', required=False)
    bonusTiers = serializers.SerializerMethodField()
    updatedBy = serializers.UUIDField(source='updated_by_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = BonusSettings
        fields = ['isEnabled', 'regularBonusPercent', 'firstDepositBonusPercent',
                  'firstDepositBonusEnabled', 'minDepositForBonus', 'maxBonusAmount',
                  'bonusWithdrawable', 'withdrawalVolumeMultiplier', 'bonusExpiryDays',
                  'useTierBonus', 'bonusTiers', 'updatedBy', 'createdAt', 'updatedAt']

    def get_bonusTiers(self, obj):
        tiers = obj.ordered_tiers()
        positions = {tier.pk: index for index, tier in enumerate(tiers)}
        return BonusTierSerializer(tiers, many=True, context={'positions': positions}).data


class BonusTierCreateSerializer(serializers.Serializer):
    minDeposit = amount_field(source='min_deposit')
    maxDeposit = amount_field(source='max_deposit')
    bonusPercent = percent_field(source='bonus_percent')


class BonusTierUpdateSerializer(serializers.Serializer):
    minDeposit = amount_field(source='min_deposit', required=False)
    maxDeposit = amount_field(source='max_deposit', required=False)
    bonusPercent = percent_field(source='bonus_percent', required=False)
    isActive = serializers.BooleanField(source='is_active', required=False)


class BonusAdjustmentSerializer(serializers.Serializer):
    # Bonus balances are kept in cents
    amount = amount_field(decimal_places=2, min_value=None)
    reason = serializers.CharField(required=False, allow_blank=True, max_length=500)


class BonusUserQuerySerializer(serializers.Serializer):
    limit = serializers.IntegerField(
        min_value=1, required=False,
        default=settings.BONUS_USERS_DEFAULT_LIMIT,
        max_value=settings.BONUS_USERS_MAX_LIMIT
    )
    page = serializers.IntegerField(min_value=1, required=False, default=1)


class BonusCalculationQuerySerializer(serializers.Serializer):
    amount = serializers.DecimalField(
        max_digits=None, decimal_places=None, min_value=ZERO, coerce_to_string=False
    )
    isFirstDeposit = serializers.BooleanField(required=False, default=False)


class BonusUserSerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)
    # Annotated by bonuses.services.reporting.bonus_users
    balance = amount_field(source='wallet_balance', read_only=True)
    bonusBalance = amount_field(decimal_places=2, source='bonus_balance', read_only=True)
    totalBonusReceived = amount_field(decimal_places=2, source='total_bonus_received', read_only=True)
    tradingVolumeForBonus = amount_field(decimal_places=2, source='trading_volume_for_bonus', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'firstName', 'lastName', 'email', 'balance', 'bonusBalance',
                  'totalBonusReceived', 'tradingVolumeForBonus']
