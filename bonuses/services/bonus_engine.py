# bonuses/services/bonus_engine.py
"""
Deposit bonus calculation.

Rules are evaluated in order and the first match wins:

1. program disabled -> no bonus
2. deposit below ``min_deposit_for_bonus`` -> no bonus
3. percentage: first-deposit rate (when enabled and the deposit is the
   user's first), otherwise the first active tier containing the amount
   (when tier mode is on and tiers exist), otherwise the regular rate
4. ``max_bonus_amount`` caps the result when it is above zero
5. the result is rounded to cents, half away from zero
"""
from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

ZERO = Decimal('0')
CENTS = Decimal('0.01')

# Where the applied percentage came from
SOURCE_DISABLED = 'disabled'
SOURCE_BELOW_MINIMUM = 'below_minimum'
SOURCE_FIRST_DEPOSIT = 'first_deposit'
SOURCE_TIER = 'tier'
SOURCE_REGULAR = 'regular'

BonusRate = namedtuple('BonusRate', ['percent', 'source', 'tier'])


def to_decimal(value):
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def find_tier(tiers, deposit_amount):
    """First active tier whose inclusive range contains the amount, in stored order"""
    amount = to_decimal(deposit_amount)
    for tier in tiers:
        if not tier.is_active:
            continue
        if to_decimal(tier.min_deposit) <= amount <= to_decimal(tier.max_deposit):
            return tier
    return None


def _tiers_of(config, tiers):
    if tiers is not None:
        return list(tiers)
    ordered = getattr(config, 'ordered_tiers', None)
    return ordered() if callable(ordered) else []


def resolve_bonus_percent(config, deposit_amount, is_first_deposit=False, tiers=None):
    amount = to_decimal(deposit_amount)

    if not config.is_enabled:
        return BonusRate(ZERO, SOURCE_DISABLED, None)
    if amount < to_decimal(config.min_deposit_for_bonus):
        return BonusRate(ZERO, SOURCE_BELOW_MINIMUM, None)

    if is_first_deposit and config.first_deposit_bonus_enabled:
        return BonusRate(to_decimal(config.first_deposit_bonus_percent), SOURCE_FIRST_DEPOSIT, None)

    tiers = _tiers_of(config, tiers)
    if config.use_tier_bonus and tiers:
        tier = find_tier(tiers, amount)
        if tier is None:
            return BonusRate(ZERO, SOURCE_TIER, None)
        return BonusRate(to_decimal(tier.bonus_percent), SOURCE_TIER, tier)

    return BonusRate(to_decimal(config.regular_bonus_percent), SOURCE_REGULAR, None)


def compute_bonus(config, deposit_amount, is_first_deposit=False, tiers=None):
    """Bonus credited for a deposit, as a Decimal with exactly two places"""
    amount = to_decimal(deposit_amount)
    rate = resolve_bonus_percent(config, amount, is_first_deposit, tiers=tiers)

    bonus = amount * rate.percent / Decimal('100')

    cap = to_decimal(config.max_bonus_amount)
    if cap > ZERO and bonus > cap:
        bonus = cap

    bonus = bonus.quantize(CENTS, rounding=ROUND_HALF_UP)
    return max(bonus, ZERO.quantize(CENTS))
