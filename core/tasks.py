# core/tasks.py
import logging
from celery import shared_task

logger = logging.getLogger(__name__)


@shared_task
def process_deposit_bonus(transaction_id):
    """Complete a pending deposit and credit its bonus"""
    from funds.models import Transaction
    from funds.services.deposit_service import DepositBonusService
    from bonuses.exceptions import DepositStateError

    try:
        deposit = DepositBonusService().complete_deposit(transaction_id)
    except Transaction.DoesNotExist:
        logger.warning(f"Deposit {transaction_id} not found")
        return None
    except DepositStateError as e:
        logger.warning(f"Skipping deposit {transaction_id}: {e.message}")
        return None
    except Exception as e:
        logger.error(f"Error processing deposit {transaction_id}: {str(e)}", exc_info=True)
        raise

    return str(deposit.bonus_amount)
