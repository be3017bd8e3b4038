"""Deposit bonus calculation rules."""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from bonuses.services.bonus_engine import (
    compute_bonus,
    find_tier,
    resolve_bonus_percent,
    SOURCE_DISABLED,
    SOURCE_BELOW_MINIMUM,
    SOURCE_FIRST_DEPOSIT,
    SOURCE_TIER,
    SOURCE_REGULAR,
)


def make_config(**overrides):
    values = {
        'is_enabled': True,
        'regular_bonus_percent': Decimal('10'),
        'first_deposit_bonus_percent': Decimal('0'),
        'first_deposit_bonus_enabled': False,
        'min_deposit_for_bonus': Decimal('100'),
        'max_bonus_amount': Decimal('0'),
        'use_tier_bonus': False,
    }
    values.update(overrides)
    return SimpleNamespace(**values)


def make_tier(min_deposit, max_deposit, bonus_percent, is_active=True):
    return SimpleNamespace(
        min_deposit=Decimal(str(min_deposit)),
        max_deposit=Decimal(str(max_deposit)),
        bonus_percent=Decimal(str(bonus_percent)),
        is_active=is_active,
    )


STANDARD_TIERS = [make_tier(0, 1000, 5), make_tier(1000, 5000, 10)]


class TestGates:

    @pytest.mark.parametrize('amount', ['0', '100', '500', '1000000'])
    def test_disabled_program_gives_nothing(self, amount):
        config = make_config(is_enabled=False, first_deposit_bonus_enabled=True,
                             first_deposit_bonus_percent=Decimal('50'))

        assert compute_bonus(config, Decimal(amount), True) == Decimal('0.00')
        assert resolve_bonus_percent(config, Decimal(amount)).source == SOURCE_DISABLED

    @pytest.mark.parametrize('amount', ['0', '50', '99.99'])
    def test_below_minimum_gives_nothing(self, amount):
        config = make_config()

        assert compute_bonus(config, Decimal(amount)) == Decimal('0.00')
        assert resolve_bonus_percent(config, Decimal(amount)).source == SOURCE_BELOW_MINIMUM

    def test_minimum_itself_qualifies(self):
        assert compute_bonus(make_config(), Decimal('100')) == Decimal('10.00')


class TestRates:

    def test_regular_rate(self):
        assert compute_bonus(make_config(), Decimal('500')) == Decimal('50.00')

    def test_cap_applies(self):
        config = make_config(max_bonus_amount=Decimal('30'))

        assert compute_bonus(config, Decimal('500')) == Decimal('30.00')

    def test_cap_not_reached(self):
        config = make_config(max_bonus_amount=Decimal('100'))

        assert compute_bonus(config, Decimal('500')) == Decimal('50.00')

    def test_tier_rate(self):
        config = make_config(use_tier_bonus=True)

        assert compute_bonus(config, Decimal('2000'), False, tiers=STANDARD_TIERS) == Decimal('200.00')

    def test_shared_boundary_goes_to_first_tier(self):
        config = make_config(use_tier_bonus=True)

        assert compute_bonus(config, Decimal('1000'), tiers=STANDARD_TIERS) == Decimal('50.00')

    def test_no_matching_tier_gives_nothing(self):
        config = make_config(use_tier_bonus=True)
        rate = resolve_bonus_percent(config, Decimal('9000'), tiers=STANDARD_TIERS)

        assert rate.percent == Decimal('0')
        assert rate.source == SOURCE_TIER
        assert compute_bonus(config, Decimal('9000'), tiers=STANDARD_TIERS) == Decimal('0.00')

    def test_tier_mode_without_tiers_uses_regular_rate(self):
        config = make_config(use_tier_bonus=True)

        assert compute_bonus(config, Decimal('500'), tiers=[]) == Decimal('50.00')
        assert resolve_bonus_percent(config, Decimal('500'), tiers=[]).source == SOURCE_REGULAR

    def test_first_deposit_rate_beats_tiers(self):
        config = make_config(use_tier_bonus=True, first_deposit_bonus_enabled=True,
                             first_deposit_bonus_percent=Decimal('50'))
        rate = resolve_bonus_percent(config, Decimal('2000'), True, tiers=STANDARD_TIERS)

        assert rate.source == SOURCE_FIRST_DEPOSIT
        assert compute_bonus(config, Decimal('2000'), True, tiers=STANDARD_TIERS) == Decimal('1000.00')

    def test_first_deposit_flag_ignored_when_disabled(self):
        config = make_config(first_deposit_bonus_percent=Decimal('50'))

        assert compute_bonus(config, Decimal('500'), True) == Decimal('50.00')

    def test_cap_applies_to_first_deposit_rate(self):
        config = make_config(first_deposit_bonus_enabled=True,
                             first_deposit_bonus_percent=Decimal('100'),
                             max_bonus_amount=Decimal('250'))

        assert compute_bonus(config, Decimal('1000'), True) == Decimal('250.00')


class TestTierLookup:

    def test_inactive_tier_is_skipped(self):
        tiers = [make_tier(0, 5000, 50, is_active=False), make_tier(0, 5000, 5)]

        assert find_tier(tiers, Decimal('2000')) is tiers[1]

    def test_first_match_in_stored_order(self):
        tiers = [make_tier(0, 5000, 7), make_tier(1000, 3000, 20)]
        config = make_config(use_tier_bonus=True)

        assert find_tier(tiers, Decimal('2000')) is tiers[0]
        assert compute_bonus(config, Decimal('2000'), tiers=tiers) == Decimal('140.00')

    def test_only_inactive_tiers_match_nothing(self):
        tiers = [make_tier(0, 5000, 50, is_active=False)]

        assert find_tier(tiers, Decimal('2000')) is None


class TestRounding:

    def test_half_cent_rounds_away_from_zero(self):
        # 100.05 * 10% = 10.005
        assert compute_bonus(make_config(), Decimal('100.05')) == Decimal('10.01')

    @pytest.mark.parametrize('amount', ['100', '123.45', '333.33', '999.999'])
    def test_two_decimal_places(self, amount):
        result = compute_bonus(make_config(regular_bonus_percent=Decimal('7.5')), Decimal(amount))

        assert result.as_tuple().exponent == -2

    def test_zero_result_has_two_decimal_places(self):
        result = compute_bonus(make_config(is_enabled=False), Decimal('500'))

        assert str(result) == '0.00'

    def test_float_input(self):
        assert compute_bonus(make_config(), 500.0) == Decimal('50.00')
