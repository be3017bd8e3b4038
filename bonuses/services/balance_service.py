# bonuses/services/balance_service.py
import logging
import uuid
from decimal import Decimal
from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction
from django.utils import timezone
from bonuses.exceptions import NegativeBalanceError, UserNotFoundError
from funds.models import Transaction

logger = logging.getLogger(__name__)

User = get_user_model()

DEFAULT_ADJUSTMENT_REASON = 'Manual bonus adjustment by admin'


class BonusBalanceService:
    """Manual changes to a user's bonus balance"""

    @transaction.atomic
    def adjust_balance(self, user_id, amount, reason=None, actor=None):
        """
        Add ``amount`` (negative to deduct) to the user's bonus balance.

        The user row stays locked until the audit record is written, so two
        concurrent adjustments of the same user are applied one after the other.
        Returns ``(user, audit_transaction)``.
        """
        amount = Decimal(str(amount))

        try:
            user = User.objects.select_for_update().get(pk=user_id)
        except (User.DoesNotExist, DjangoValidationError, ValueError):
            raise UserNotFoundError()

        balance_before = user.bonus_balance
        balance_after = balance_before + amount
        if balance_after < 0:
            logger.warning(
                f"Rejected bonus adjustment of {amount} for user {user.id}: "
                f"balance {balance_before} would go negative"
            )
            raise NegativeBalanceError()

        user.bonus_balance = balance_after
        update_fields = ['bonus_balance', 'updated_at']
        if amount > 0:
            user.total_bonus_received += amount
            update_fields.append('total_bonus_received')
        user.save(update_fields=update_fields)

        audit = Transaction.objects.create(
            user=user,
            transaction_type='bonus',
            currency=settings.BONUS_DEFAULT_CURRENCY,
            amount=amount,
            status='completed',
            reference_id=f'BON-{uuid.uuid4().hex[:12].upper()}',
            notes=reason or DEFAULT_ADJUSTMENT_REASON,
            balance_before=balance_before,
            balance_after=balance_after,
            processed_by=actor,
            completed_at=timezone.now()
        )

        logger.info(
            f"Bonus balance of user {user.id} adjusted by {amount} "
            f"({balance_before} -> {balance_after}), ref {audit.reference_id}"
        )
        return user, audit
