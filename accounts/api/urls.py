"""
Accounts API URLs.
"""

from django.urls import path

from .views import CandidateProfileView, ProfileCompletionView

urlpatterns = [
    path('candidates/me/', CandidateProfileView.as_view(), name='candidate-profile'),
    path('candidates/me/completion/', ProfileCompletionView.as_view(), name='candidate-completion'),
]
