# bonuses/views.py
import logging
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, serializers, status
from rest_framework.exceptions import APIException
from rest_framework.permissions import IsAuthenticated, IsAdminUser
from rest_framework.response import Response
from rest_framework.views import APIView
from bonuses.exceptions import BonusError
from bonuses.models import BonusSettings
from bonuses.serializers import (
    BonusSettingsSerializer, BonusTierCreateSerializer, BonusTierUpdateSerializer,
    BonusAdjustmentSerializer, BonusUserQuerySerializer, BonusCalculationQuerySerializer,
    BonusUserSerializer
)
from bonuses.services.balance_service import BonusBalanceService
from bonuses.services.bonus_engine import resolve_bonus_percent, compute_bonus
from bonuses.services.reporting import bonus_stats, bonus_users
from bonuses.services.tier_service import BonusTierService
from funds.serializers import TransactionSerializer

logger = logging.getLogger(__name__)


class BonusAdminAPIView(APIView):
    """Admin-only endpoint answering with the ``{success, data, message, errors}`` envelope"""
    permission_classes = [IsAuthenticated, IsAdminUser]

    def handle_exception(self, exc):
        if isinstance(exc, Http404):
            exc = exceptions.NotFound()
        elif isinstance(exc, DjangoPermissionDenied):
            exc = exceptions.PermissionDenied()

        if isinstance(exc, serializers.ValidationError):
            logger.warning(f"{self.__class__.__name__} validation error: {exc.detail}")
            return Response({
                'success': False,
                'errors': exc.detail,
                'message': 'Please correct the errors and try again.'
            }, status=status.HTTP_400_BAD_REQUEST)

        if isinstance(exc, BonusError):
            logger.warning(f"{self.__class__.__name__} rejected: {exc.message}")
            return Response({
                'success': False,
                'message': exc.message
            }, status=exc.status_code)

        if isinstance(exc, APIException):
            response = super().handle_exception(exc)
            response.data = {
                'success': False,
                'message': str(exc.detail)
            }
            return response

        logger.error(f"Unexpected error in {self.__class__.__name__}: {str(exc)}", exc_info=True)
        return Response({
            'success': False,
            'message': 'Server error'
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    def settings_response(self, bonus_settings, message=None):
        payload = {
            'success': True,
            'data': BonusSettingsSerializer(bonus_settings).data
        }
        if message:
            payload['message'] = message
        return Response(payload)


class BonusSettingsView(BonusAdminAPIView):
    """Read or partially update the bonus settings"""

    def get(self, request):
        bonus_settings = BonusSettings.objects.get_or_create_default()
        return self.settings_response(bonus_settings)

    def put(self, request):
        bonus_settings = BonusSettings.objects.get_or_create_default()

        serializer = BonusSettingsSerializer(bonus_settings, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        bonus_settings = serializer.save(updated_by=request.user)

        logger.info(f"Bonus settings updated by {request.user}: {sorted(serializer.validated_data)}")
        return self.settings_response(bonus_settings, 'Bonus settings updated successfully')


class BonusTierListView(BonusAdminAPIView):
    """Add a bonus tier"""

    def post(self, request):
        serializer = BonusTierCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        bonus_settings = BonusSettings.objects.get_or_create_default()
        BonusTierService(bonus_settings).add_tier(
            actor=request.user,
            **serializer.validated_data
        )
        return self.settings_response(bonus_settings, 'Bonus tier added successfully')


class BonusTierDetailView(BonusAdminAPIView):
    """Update or delete a bonus tier by position"""

    def put(self, request, position):
        serializer = BonusTierUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        bonus_settings = BonusSettings.objects.get_or_create_default()
        BonusTierService(bonus_settings).update_tier(
            int(position), serializer.validated_data, actor=request.user
        )
        return self.settings_response(bonus_settings, 'Bonus tier updated successfully')

    def delete(self, request, position):
        bonus_settings = BonusSettings.objects.get_or_create_default()
        BonusTierService(bonus_settings).remove_tier(int(position), actor=request.user)
        return self.settings_response(bonus_settings, 'Bonus tier deleted successfully')


class BonusStatsView(BonusAdminAPIView):

    def get(self, request):
        stats = bonus_stats()
        return Response({
            'success': True,
            'data': {
                'totalBonusGiven': stats['total_bonus_given'],
                'usersWithBonus': stats['users_with_bonus'],
                'bonusTransactions': stats['bonus_transactions'],
            }
        })


class BonusUserListView(BonusAdminAPIView):
    """Users who received a bonus, sorted by bonus balance"""

    def get(self, request):
        query = BonusUserQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        users, pagination = bonus_users(
            limit=query.validated_data['limit'],
            page=query.validated_data['page']
        )
        return Response({
            'success': True,
            'data': BonusUserSerializer(users, many=True).data,
            'pagination': pagination
        })


class BonusAdjustmentView(BonusAdminAPIView):
    """Manually add to or deduct from a user's bonus balance"""

    def put(self, request, user_id):
        serializer = BonusAdjustmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        amount = serializer.validated_data['amount']
        user, audit = BonusBalanceService().adjust_balance(
            user_id,
            amount,
            reason=serializer.validated_data.get('reason'),
            actor=request.user
        )

        return Response({
            'success': True,
            'message': f"Bonus {'added' if amount >= 0 else 'deducted'} successfully",
            'data': {
                'userId': user.id,
                'bonusBalance': user.bonus_balance,
                'totalBonusReceived': user.total_bonus_received,
                'transaction': TransactionSerializer(audit).data
            }
        })


class BonusCalculationView(BonusAdminAPIView):
    """Preview the bonus for a deposit amount without persisting anything"""

    def get(self, request):
        query = BonusCalculationQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response({
                'success': False,
                'message': 'Valid amount required',
                'errors': query.errors
            }, status=status.HTTP_400_BAD_REQUEST)

        amount = query.validated_data['amount']
        is_first_deposit = query.validated_data['isFirstDeposit']

        bonus_settings = BonusSettings.objects.get_or_create_default()
        tiers = bonus_settings.ordered_tiers()
        rate = resolve_bonus_percent(bonus_settings, amount, is_first_deposit, tiers=tiers)
        bonus_amount = compute_bonus(bonus_settings, amount, is_first_deposit, tiers=tiers)

        return Response({
            'success': True,
            'data': {
                'depositAmount': amount,
                'bonusAmount': bonus_amount,
                'totalCredit': amount + bonus_amount,
                'isFirstDeposit': is_first_deposit,
                'bonusPercent': rate.percent,
                'source': rate.source,
            }
        })
