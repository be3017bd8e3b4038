# funds/serializers.py
from rest_framework import serializers
from funds.models import Transaction

class TransactionSerializer(serializers.ModelSerializer):
    user = serializers.UUIDField(source='user_id', read_only=True)
    processed_by = serializers.UUIDField(source='processed_by_id', read_only=True)

    class Meta:
        model = Transaction
        fields = ['id', 'user', 'transaction_type', 'currency', 'amount', 'fee',
                  'bonus_amount', 'status', 'reference_id', 'external_id', 'notes',
                  'balance_before', 'balance_after', 'processed_by',
                  'created_at', 'completed_at']
