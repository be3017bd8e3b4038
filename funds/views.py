# funds/views.py
from rest_framework import viewsets
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from funds.models import Transaction
from funds.serializers import TransactionSerializer

class TransactionViewSet(viewsets.ReadOnlyModelViewSet):
    """Transaction log for admins, including bonus adjustment records"""
    serializer_class = TransactionSerializer
    permission_classes = [IsAuthenticated, IsAdminUser]
    queryset = Transaction.objects.select_related('user', 'processed_by')
    filterset_fields = ['transaction_type', 'currency', 'status', 'user']
    search_fields = ['reference_id', 'notes', 'user__email']
    ordering_fields = ['created_at', 'amount']
    ordering = ['-created_at']
