# bonuses/services/tier_service.py
import logging
from decimal import Decimal
from django.conf import settings as django_settings
from django.db import transaction
from django.db.models import Max
from bonuses.exceptions import TierNotFoundError, TierOverlapError, TierRangeError
from bonuses.models import BonusTier

logger = logging.getLogger(__name__)

TIER_FIELDS = ('min_deposit', 'max_deposit', 'bonus_percent', 'is_active')


class BonusTierService:
    """Add, edit and remove bonus tiers addressed by their position"""

    def __init__(self, bonus_settings):
        self.bonus_settings = bonus_settings

    def tiers(self):
        return self.bonus_settings.ordered_tiers()

    def get_tier(self, position):
        tiers = self.tiers()
        if position < 0 or position >= len(tiers):
            raise TierNotFoundError()
        return tiers[position]

    def _check_range(self, min_deposit, max_deposit):
        if min_deposit >= max_deposit:
            raise TierRangeError()

    def _check_overlap(self, min_deposit, max_deposit, exclude=None):
        for tier in self.tiers():
            if exclude is not None and tier.pk == exclude.pk:
                continue
            if tier.overlaps(min_deposit, max_deposit):
                raise TierOverlapError()

    def _touch(self, actor):
        self.bonus_settings.updated_by = actor
        self.bonus_settings.save(update_fields=['updated_by', 'updated_at'])

    @transaction.atomic
    def add_tier(self, min_deposit, max_deposit, bonus_percent, actor=None):
        min_deposit = Decimal(str(min_deposit))
        max_deposit = Decimal(str(max_deposit))

        self._check_range(min_deposit, max_deposit)
        self._check_overlap(min_deposit, max_deposit)

        last = self.bonus_settings.tiers.aggregate(last=Max('sort_order'))['last']
        tier = BonusTier.objects.create(
            settings=self.bonus_settings,
            min_deposit=min_deposit,
            max_deposit=max_deposit,
            bonus_percent=Decimal(str(bonus_percent)),
            is_active=True,
            sort_order=0 if last is None else last + 1
        )
        self._touch(actor)

        logger.info(f"Bonus tier {tier.id} added: {min_deposit}-{max_deposit} at {tier.bonus_percent}%")
        return tier

    @transaction.atomic
    def update_tier(self, position, patch, actor=None):
        """Apply only the fields present in ``patch`` to the tier at ``position``"""
        tier = self.get_tier(position)

        for field in TIER_FIELDS:
            if field in patch:
                setattr(tier, field, patch[field])

        if getattr(django_settings, 'BONUS_REVALIDATE_TIERS_ON_UPDATE', False):
            min_deposit = Decimal(str(tier.min_deposit))
            max_deposit = Decimal(str(tier.max_deposit))
            self._check_range(min_deposit, max_deposit)
            self._check_overlap(min_deposit, max_deposit, exclude=tier)

        tier.save()
        self._touch(actor)

        logger.info(f"Bonus tier {tier.id} at position {position} updated: {sorted(patch)}")
        return tier

    @transaction.atomic
    def remove_tier(self, position, actor=None):
        tier = self.get_tier(position)
        tier_id = tier.id
        tier.delete()
        self._touch(actor)

        logger.info(f"Bonus tier {tier_id} at position {position} removed")
