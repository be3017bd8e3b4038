# bonuses/urls.py
from django.urls import path, re_path
from bonuses.views import (
    BonusSettingsView, BonusTierListView, BonusTierDetailView, BonusStatsView,
    BonusUserListView, BonusAdjustmentView, BonusCalculationView
)

app_name = 'bonuses'

urlpatterns = [
    path('settings/', BonusSettingsView.as_view(), name='settings'),
    path('tiers/', BonusTierListView.as_view(), name='tier-list'),
    # Negative positions must reach the view to be answered as "Tier not found"
    re_path(r'^tiers/(?P<position>-?\d+)/$', BonusTierDetailView.as_view(), name='tier-detail'),
    path('stats/', BonusStatsView.as_view(), name='stats'),
    path('users/', BonusUserListView.as_view(), name='user-list'),
    path('users/<str:user_id>/adjust/', BonusAdjustmentView.as_view(), name='user-adjust'),
    path('calculate/', BonusCalculationView.as_view(), name='calculate'),
]
