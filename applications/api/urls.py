"""
Applications API URLs.
"""

from django.urls import path

from .views import (
    ApplicationListView,
    ApplicationStatusView,
    ApplyView,
    CandidateStatsView,
    IndustryApplicationListView,
    WithdrawApplicationView,
)

urlpatterns = [
    path('opportunities/<int:pk>/apply/', ApplyView.as_view(), name='opportunity-apply'),
    path('applications/', ApplicationListView.as_view(), name='application-list'),
    path('applications/<int:pk>/withdraw/', WithdrawApplicationView.as_view(), name='application-withdraw'),
    path('applications/<int:pk>/status/', ApplicationStatusView.as_view(), name='application-status'),
    path('candidates/me/stats/', CandidateStatsView.as_view(), name='candidate-stats'),
    path('industries/me/applications/', IndustryApplicationListView.as_view(), name='industry-application-list'),
]
