# bonuses/exceptions.py
from rest_framework import status


class BonusError(Exception):
    """Base class for bonus rule violations reported back to the admin"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Bonus operation failed'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TierNotFoundError(BonusError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Tier not found'


class UserNotFoundError(BonusError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'User not found'


class TierRangeError(BonusError):
    default_message = 'Min deposit must be less than max deposit'


class TierOverlapError(BonusError):
    default_message = 'Tier range overlaps with existing tier'


class NegativeBalanceError(BonusError):
    default_message = 'Adjustment would result in negative bonus balance'


class DepositStateError(BonusError):
    default_message = 'Deposit is not pending'
