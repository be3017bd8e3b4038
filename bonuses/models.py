# bonuses/models.py
from decimal import Decimal
from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator


PERCENT_VALIDATORS = [
    MinValueValidator(Decimal('0')),
    MaxValueValidator(Decimal('100')),
]


class BonusSettingsManager(models.Manager):
    def get_or_create_default(self):
        """Return the single settings row, creating it with defaults on first access"""
        settings, _ = self.get_or_create(pk=BonusSettings.SINGLETON_PK)
        return settings


class BonusSettings(models.Model):
    """Deposit bonus configuration. Exactly one row exists."""
    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=SINGLETON_PK, editable=False)

    # Global bonus toggle
    is_enabled = models.BooleanField(default=True)

    regular_bonus_percent = models.DecimalField(
        max_digits=7, decimal_places=4, default=Decimal('0'),
        validators=PERCENT_VALIDATORS
    )
    first_deposit_bonus_percent = models.DecimalField(
        max_digits=7, decimal_places=4, default=Decimal('0'),
        validators=PERCENT_VALIDATORS
    )
    first_deposit_bonus_enabled = models.BooleanField(default=False)

    min_deposit_for_bonus = models.DecimalField(
        max_digits=20, decimal_places=8, default=Decimal('100'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    # 0 = no cap
    max_bonus_amount = models.DecimalField(
        max_digits=20, decimal_places=8, default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )

    # Withdrawal conditions
    bonus_withdrawable = models.BooleanField(default=False)
    # Trading volume required to withdraw, as a multiple of the bonus amount
    withdrawal_volume_multiplier = models.DecimalField(
        max_digits=6, decimal_places=2, default=Decimal('3'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    # 0 = no expiry
    bonus_expiry_days = models.PositiveIntegerField(default=30)

    # Use tier-based bonus instead of flat percentage
    use_tier_bonus = models.BooleanField(default=False)

    updated_by = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='bonus_settings_updates'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BonusSettingsManager()

    class Meta:
        verbose_name = 'Bonus settings'
        verbose_name_plural = 'Bonus settings'

    def __str__(self):
        return f"Bonus settings ({'enabled' if self.is_enabled else 'disabled'})"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise RuntimeError('Bonus settings cannot be deleted')

    def ordered_tiers(self):
        return list(self.tiers.order_by('sort_order', 'id'))


class BonusTier(models.Model):
    """Deposit range with its own bonus percentage"""
    settings = models.ForeignKey(BonusSettings, on_delete=models.CASCADE, related_name='tiers')
    min_deposit = models.DecimalField(
        max_digits=20, decimal_places=8,
        validators=[MinValueValidator(Decimal('0'))]
    )
    max_deposit = models.DecimalField(
        max_digits=20, decimal_places=8,
        validators=[MinValueValidator(Decimal('0'))]
    )
    bonus_percent = models.DecimalField(
        max_digits=7, decimal_places=4,
        validators=PERCENT_VALIDATORS
    )
    is_active = models.BooleanField(default=True)
    # Insertion order; decides scan priority
    sort_order = models.PositiveIntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['sort_order', 'id']

    def __str__(self):
        return f"{self.min_deposit} - {self.max_deposit}: {self.bonus_percent}%"

    def overlaps(self, min_deposit, max_deposit):
        # Touching at a single boundary point is allowed
        return min_deposit < self.max_deposit and self.min_deposit < max_deposit
