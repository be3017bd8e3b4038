"""Tier admission, editing and removal."""

from decimal import Decimal

import pytest

from bonuses.exceptions import TierNotFoundError, TierOverlapError, TierRangeError
from bonuses.services.tier_service import BonusTierService

pytestmark = pytest.mark.django_db


@pytest.fixture
def tier_service(bonus_settings):
    return BonusTierService(bonus_settings)


def ranges(service):
    return [(tier.min_deposit, tier.max_deposit) for tier in service.tiers()]


class TestAddTier:

    def test_appends_active_tier(self, tier_service, admin_user, bonus_settings):
        tier = tier_service.add_tier(Decimal('0'), Decimal('1000'), Decimal('5'), actor=admin_user)

        assert tier.is_active is True
        assert tier_service.tiers() == [tier]
        bonus_settings.refresh_from_db()
        assert bonus_settings.updated_by == admin_user

    def test_touching_boundaries_are_not_overlap(self, tier_service):
        tier_service.add_tier(0, 50, 5)
        tier_service.add_tier(100, 200, 10)

        tier_service.add_tier(50, 100, 7)

        assert ranges(tier_service) == [
            (Decimal('0'), Decimal('50')),
            (Decimal('100'), Decimal('200')),
            (Decimal('50'), Decimal('100')),
        ]

    def test_partial_overlap_rejected(self, tier_service):
        tier_service.add_tier(0, 50, 5)

        with pytest.raises(TierOverlapError):
            tier_service.add_tier(40, 60, 7)

        assert len(tier_service.tiers()) == 1

    def test_candidate_containing_existing_tier_rejected(self, tier_service):
        tier_service.add_tier(100, 200, 5)

        with pytest.raises(TierOverlapError):
            tier_service.add_tier(0, 1000, 7)

    def test_candidate_inside_existing_tier_rejected(self, tier_service):
        tier_service.add_tier(0, 1000, 5)

        with pytest.raises(TierOverlapError):
            tier_service.add_tier(100, 200, 7)

    @pytest.mark.parametrize('min_deposit, max_deposit', [(50, 50), (100, 10)])
    def test_inverted_range_rejected(self, tier_service, min_deposit, max_deposit):
        with pytest.raises(TierRangeError):
            tier_service.add_tier(min_deposit, max_deposit, 5)

        assert tier_service.tiers() == []


class TestUpdateTier:

    def test_applies_only_present_fields(self, tier_service):
        tier_service.add_tier(0, 1000, 5)

        tier = tier_service.update_tier(0, {'bonus_percent': Decimal('8')})

        tier.refresh_from_db()
        assert tier.bonus_percent == Decimal('8')
        assert tier.min_deposit == Decimal('0')
        assert tier.max_deposit == Decimal('1000')
        assert tier.is_active is True

    def test_deactivate(self, tier_service):
        tier_service.add_tier(0, 1000, 5)

        tier = tier_service.update_tier(0, {'is_active': False})

        assert tier.is_active is False

    @pytest.mark.parametrize('position', [-1, 1, 7])
    def test_unknown_position(self, tier_service, position):
        tier_service.add_tier(0, 1000, 5)

        with pytest.raises(TierNotFoundError):
            tier_service.update_tier(position, {'bonus_percent': Decimal('8')})

    def test_overlap_not_rechecked_by_default(self, tier_service):
        tier_service.add_tier(0, 1000, 5)
        tier_service.add_tier(1000, 5000, 10)

        tier_service.update_tier(1, {'min_deposit': Decimal('500')})

        assert ranges(tier_service)[1] == (Decimal('500'), Decimal('5000'))

    def test_overlap_rechecked_when_enabled(self, tier_service, settings):
        settings.BONUS_REVALIDATE_TIERS_ON_UPDATE = True
        tier_service.add_tier(0, 1000, 5)
        tier_service.add_tier(1000, 5000, 10)

        with pytest.raises(TierOverlapError):
            tier_service.update_tier(1, {'min_deposit': Decimal('500')})

        assert ranges(tier_service)[1] == (Decimal('1000'), Decimal('5000'))

    def test_range_rechecked_when_enabled(self, tier_service, settings):
        settings.BONUS_REVALIDATE_TIERS_ON_UPDATE = True
        tier_service.add_tier(0, 1000, 5)

        with pytest.raises(TierRangeError):
            tier_service.update_tier(0, {'max_deposit': Decimal('0')})

    def test_own_range_does_not_count_as_overlap(self, tier_service, settings):
        settings.BONUS_REVALIDATE_TIERS_ON_UPDATE = True
        tier_service.add_tier(0, 1000, 5)

        tier = tier_service.update_tier(0, {'max_deposit': Decimal('900')})

        assert tier.max_deposit == Decimal('900')


class TestRemoveTier:

    def test_later_positions_shift_down(self, tier_service):
        tier_service.add_tier(0, 100, 1)
        tier_service.add_tier(100, 200, 2)
        tier_service.add_tier(200, 300, 3)

        tier_service.remove_tier(0)

        tiers = tier_service.tiers()
        assert [tier.bonus_percent for tier in tiers] == [Decimal('2'), Decimal('3')]
        assert tier_service.get_tier(0) == tiers[0]

    def test_unknown_position(self, tier_service):
        with pytest.raises(TierNotFoundError):
            tier_service.remove_tier(0)

    def test_append_after_removal_keeps_order(self, tier_service):
        tier_service.add_tier(0, 100, 1)
        tier_service.add_tier(100, 200, 2)
        tier_service.remove_tier(1)

        tier_service.add_tier(300, 400, 4)

        assert [tier.bonus_percent for tier in tier_service.tiers()] == [Decimal('1'), Decimal('4')]
