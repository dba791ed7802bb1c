"""
Accounts API Views.

Candidate profile endpoints. Profile editing lives with the identity
provider; these views only read.
"""

from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from accounts.models import Candidate
from accounts.permissions import IsCandidate
from api.base import APIResponse
from core.conf import get_completion_threshold

from .serializers import CandidateProfileSerializer, ProfileCompletionSerializer


class CandidateMixin:
    """Resolves the candidate profile of the requesting user."""

    permission_classes = [IsAuthenticated, IsCandidate]

    def get_candidate(self) -> Candidate:
        return (
            Candidate.objects
            .select_related('user__account')
            .prefetch_related('skills')
            .get(user=self.request.user)
        )


class CandidateProfileView(CandidateMixin, APIView):
    """
    GET /api/v1/candidates/me/

    Profile of the current candidate with its completion score.
    """

    def get(self, request):
        candidate = self.get_candidate()
        result = candidate.get_completion(threshold=get_completion_threshold())
        serializer = CandidateProfileSerializer(candidate, context={'completion': result})
        return APIResponse.success(data=serializer.data, request=request)


class ProfileCompletionView(CandidateMixin, APIView):
    """
    GET /api/v1/candidates/me/completion/

    Completion banner data: percentage, is_complete, missing fields.
    """

    def get(self, request):
        candidate = self.get_candidate()
        result = candidate.get_completion(threshold=get_completion_threshold())
        return APIResponse.success(data=ProfileCompletionSerializer(result).data, request=request)
