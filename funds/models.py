# funds/models.py
from decimal import Decimal
from django.db import models
from django.core.validators import MinValueValidator


class Wallet(models.Model):
    """User wallet for multiple currencies"""
    user = models.ForeignKey('users.User', on_delete=models.CASCADE, related_name='wallets')
    currency = models.CharField(max_length=10)  # USD, EUR, BTC, ETH, etc.
    balance = models.DecimalField(
        max_digits=20,
        decimal_places=8,
        default=Decimal('0'),
        validators=[MinValueValidator(Decimal('0'))]
    )
    locked_balance = models.DecimalField(
        max_digits=20,
        decimal_places=8,
        default=Decimal('0')
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ['user', 'currency']

    def __str__(self):
        return f"{self.user.email} - {self.currency}"


class Transaction(models.Model):
    """Record all financial transactions"""
    TRANSACTION_TYPES = [
        ('deposit', 'Deposit'),
        ('withdrawal', 'Withdrawal'),
        ('trade', 'Trade'),
        ('transfer', 'Transfer'),
        ('bonus', 'Bonus'),
    ]

    STATUS_CHOICES = [
        ('pending', 'Pending'),
        ('processing', 'Processing'),
        ('completed', 'Completed'),
        ('failed', 'Failed'),
        ('cancelled', 'Cancelled')
    ]

    user = models.ForeignKey('users.User', on_delete=models.CASCADE, related_name='transactions')
    transaction_type = models.CharField(max_length=20, choices=TRANSACTION_TYPES)
    currency = models.CharField(max_length=10)
    # Signed for bonus adjustments
    amount = models.DecimalField(max_digits=20, decimal_places=8)
    fee = models.DecimalField(max_digits=20, decimal_places=8, default=Decimal('0'))
    # Bonus credited on top of a deposit
    bonus_amount = models.DecimalField(max_digits=20, decimal_places=2, default=Decimal('0'))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    reference_id = models.CharField(max_length=100, unique=True)
    external_id = models.CharField(max_length=100, blank=True)  # Payment processor ID
    notes = models.TextField(blank=True)
    balance_before = models.DecimalField(max_digits=20, decimal_places=8, null=True, blank=True)
    balance_after = models.DecimalField(max_digits=20, decimal_places=8, null=True, blank=True)
    processed_by = models.ForeignKey(
        'users.User',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='processed_transactions'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    completed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['transaction_type', 'status'], name='funds_tx_type_status_idx'),
            models.Index(fields=['user', 'transaction_type'], name='funds_tx_user_type_idx'),
        ]

    def __str__(self):
        return f"{self.reference_id} ({self.transaction_type}: {self.amount} {self.currency})"
