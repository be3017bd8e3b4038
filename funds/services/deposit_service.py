# funds/services/deposit_service.py
import logging
import uuid
from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from bonuses.exceptions import DepositStateError
from bonuses.models import BonusSettings
from bonuses.services.bonus_engine import compute_bonus
from funds.models import Wallet, Transaction

logger = logging.getLogger(__name__)

User = get_user_model()


class DepositBonusService:
    """Complete pending deposits and credit the deposit bonus"""

    def is_first_deposit(self, deposit):
        return not Transaction.objects.filter(
            user_id=deposit.user_id,
            transaction_type='deposit',
            status='completed'
        ).exclude(pk=deposit.pk).exists()

    @transaction.atomic
    def complete_deposit(self, transaction_id):
        deposit = Transaction.objects.select_for_update().get(pk=transaction_id)

        if deposit.transaction_type != 'deposit' or deposit.status != 'pending':
            raise DepositStateError(
                f"Transaction {deposit.reference_id} is not a pending deposit"
            )

        user = User.objects.select_for_update().get(pk=deposit.user_id)
        bonus_settings = BonusSettings.objects.get_or_create_default()

        first_deposit = self.is_first_deposit(deposit)
        bonus = compute_bonus(bonus_settings, deposit.amount, first_deposit)

        # Credit the deposit itself
        wallet, _ = Wallet.objects.select_for_update().get_or_create(
            user=user,
            currency=deposit.currency
        )
        wallet.balance += deposit.amount
        wallet.save()

        now = timezone.now()
        deposit.bonus_amount = bonus
        deposit.status = 'completed'
        deposit.completed_at = now
        deposit.save(update_fields=['bonus_amount', 'status', 'completed_at'])

        if bonus > 0:
            balance_before = user.bonus_balance
            user.bonus_balance += bonus
            user.total_bonus_received += bonus
            user.save(update_fields=['bonus_balance', 'total_bonus_received', 'updated_at'])

            Transaction.objects.create(
                user=user,
                transaction_type='bonus',
                currency=deposit.currency,
                amount=bonus,
                status='completed',
                reference_id=f'BON-{uuid.uuid4().hex[:12].upper()}',
                notes=f'Deposit bonus for {deposit.reference_id}',
                balance_before=balance_before,
                balance_after=user.bonus_balance,
                completed_at=now
            )

        logger.info(
            f"Deposit {deposit.reference_id} completed: {deposit.amount} {deposit.currency}, "
            f"bonus {bonus} (first deposit: {first_deposit})"
        )
        return deposit
