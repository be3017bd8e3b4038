# bonuses/services/reporting.py
import math
from decimal import Decimal
from django.conf import settings
from django.contrib.auth import get_user_model
from django.db.models import DecimalField, OuterRef, Subquery, Sum, Value
from django.db.models.functions import Coalesce
from funds.models import Transaction, Wallet

User = get_user_model()


def bonus_stats():
    """Totals across the whole user base"""
    total = User.objects.aggregate(total=Sum('total_bonus_received'))['total']

    return {
        'total_bonus_given': total or Decimal('0'),
        'users_with_bonus': User.objects.filter(bonus_balance__gt=0).count(),
        'bonus_transactions': Transaction.objects.filter(
            transaction_type='deposit',
            status='completed',
            bonus_amount__gt=0
        ).count(),
    }


def bonus_users(limit, page):
    """Users who ever received a bonus, largest current bonus balance first.

    Each user carries ``wallet_balance``, the balance of their wallet in the
    default bonus currency (0 when they have none).
    """
    wallet_balance = Wallet.objects.filter(
        user=OuterRef('pk'),
        currency=settings.BONUS_DEFAULT_CURRENCY
    ).values('balance')[:1]

    queryset = User.objects.filter(
        total_bonus_received__gt=0
    ).annotate(
        wallet_balance=Coalesce(
            Subquery(wallet_balance),
            Value(Decimal('0')),
            output_field=DecimalField(max_digits=20, decimal_places=8)
        )
    ).order_by('-bonus_balance', 'email')

    total = queryset.count()
    offset = (page - 1) * limit
    users = list(queryset[offset:offset + limit])

    return users, {
        'total': total,
        'page': page,
        'pages': math.ceil(total / limit),
    }
