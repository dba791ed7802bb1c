"""
Applications API Views.

Candidate side:
- ApplyView: application status lookup and submission
- ApplicationListView: own applications, optionally by UI bucket
- WithdrawApplicationView
- CandidateStatsView

Company side:
- IndustryApplicationListView: applications to the company's opportunities
- ApplicationStatusView: move an application along the review pipeline
"""

from django.shortcuts import get_object_or_404
from rest_framework.permissions import IsAuthenticated
from rest_framework.views import APIView

from accounts.api.views import CandidateMixin
from accounts.permissions import IsIndustry
from api.base import APIResponse
from api.exceptions import (
    OwnershipRequiredError,
    ResourceStateError,
    exception_for_eligibility,
)
from api.throttling import ApplyRateThrottle
from applications.models import Application
from applications.services import ApplicationService, ServiceResult
from core.conf import get_anonymous_suffix_length
from opportunities.models import Opportunity
from policy.choices import ApplicationStatus, ApprovalStatus
from policy.statuses import STATUS_BUCKETS

from .serializers import (
    ApplicationSerializer,
    ApplicationStatusInputSerializer,
    ApplyInputSerializer,
    CandidateStatsSerializer,
    IndustryApplicationSerializer,
    IndustryApplicationStatsSerializer,
)


def _raise_state_error(result: ServiceResult):
    raise ResourceStateError(
        current_state=result.data['current_state'],
        requested_state=result.data['requested_state'],
        allowed_states=result.data['allowed_states'],
    )


class CandidateApplicationMixin(CandidateMixin):

    def serializer_context(self, candidate):
        return {
            'viewer_is_premium': candidate.is_premium,
            'suffix_length': get_anonymous_suffix_length(),
        }

    def serialize(self, application, candidate):
        return ApplicationSerializer(application, context=self.serializer_context(candidate)).data


class ApplyView(CandidateApplicationMixin, APIView):
    """
    GET /api/v1/opportunities/{id}/apply/

    ``{"has_applied": bool, "application": {...} | null}`` for the current
    candidate.

    POST /api/v1/opportunities/{id}/apply/

    Submits an application. Refusals answer with the eligibility error:
    OPPORTUNITY_CLOSED / DEADLINE_PASSED (400), PREMIUM_REQUIRED (402) or
    ALREADY_APPLIED (409).
    """

    throttle_classes = [ApplyRateThrottle]

    def get_opportunity(self, pk):
        return get_object_or_404(
            Opportunity.objects.select_related('industry'),
            pk=pk,
            approval_status=ApprovalStatus.APPROVED,
        )

    def get(self, request, pk):
        candidate = self.get_candidate()
        opportunity = self.get_opportunity(pk)

        application = ApplicationService.current_application(candidate, opportunity)
        has_applied = application is not None and application.status != ApplicationStatus.WITHDRAWN

        return APIResponse.success(
            data={
                'has_applied': has_applied,
                'application': self.serialize(application, candidate) if application else None,
            },
            request=request,
        )

    def post(self, request, pk):
        candidate = self.get_candidate()
        opportunity = self.get_opportunity(pk)

        serializer = ApplyInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ApplicationService.apply(candidate, opportunity, **serializer.validated_data)
        if not result.success:
            raise exception_for_eligibility(result.eligibility)

        return APIResponse.created(
            data=self.serialize(result.data, candidate),
            message=str(result.message),
            request=request,
        )


class ApplicationListView(CandidateApplicationMixin, APIView):
    """
    GET /api/v1/applications/?bucket=pending|in_progress|selected|closed

    All applications of the current candidate, newest first. An unknown
    bucket is ignored.
    """

    def get(self, request):
        candidate = self.get_candidate()
        queryset = (
            Application.objects
            .filter(candidate=candidate)
            .select_related('opportunity', 'industry')
        )

        bucket = request.query_params.get('bucket')
        if bucket in STATUS_BUCKETS:
            queryset = queryset.in_bucket(bucket)

        context = self.serializer_context(candidate)
        data = ApplicationSerializer(queryset, many=True, context=context).data
        return APIResponse.success(data=data, meta={'count': len(data)}, request=request)


class WithdrawApplicationView(CandidateApplicationMixin, APIView):
    """
    POST /api/v1/applications/{id}/withdraw/

    Only the owning candidate may withdraw, and only before a final
    decision (409 otherwise).
    """

    def post(self, request, pk):
        candidate = self.get_candidate()
        application = get_object_or_404(
            Application.objects.select_related('opportunity', 'industry'),
            pk=pk,
            candidate=candidate,
        )

        result = ApplicationService.withdraw(application)
        if not result.success:
            _raise_state_error(result)

        return APIResponse.success(
            data=self.serialize(result.data, candidate),
            message=str(result.message),
            request=request,
        )


class IndustryApplicationListView(APIView):
    """
    GET /api/v1/industries/me/applications/

    Applications to the requesting company's opportunities, newest first,
    with queue totals. Applicants are anonymous unless the company is
    premium.
    """

    permission_classes = [IsAuthenticated, IsIndustry]

    def get(self, request):
        industry = request.user.industry
        queryset = (
            Application.objects
            .filter(industry=industry)
            .select_related('opportunity', 'candidate')
            .prefetch_related('candidate__skills')
        )

        is_premium = industry.is_premium
        applications = IndustryApplicationSerializer(
            queryset,
            many=True,
            context={'viewer_is_premium': is_premium},
        ).data
        stats = IndustryApplicationStatsSerializer(ApplicationService.industry_stats(industry)).data

        return APIResponse.success(
            data={
                'applications': applications,
                'is_premium': is_premium,
                'stats': stats,
            },
            request=request,
        )


class ApplicationStatusView(APIView):
    """
    POST /api/v1/applications/{id}/status/  {"status": "REVIEWED"}

    Company-side status change. The requesting company must own the
    opportunity; illegal transitions answer 409 with the allowed targets.
    """

    permission_classes = [IsAuthenticated, IsIndustry]

    def post(self, request, pk):
        industry = request.user.industry
        application = get_object_or_404(
            Application.objects.select_related('opportunity', 'industry'),
            pk=pk,
        )
        if application.industry_id != industry.pk:
            raise OwnershipRequiredError()

        serializer = ApplicationStatusInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = ApplicationService.change_status(application, serializer.validated_data['status'])
        if not result.success:
            _raise_state_error(result)

        # The company always sees its own name.
        data = ApplicationSerializer(result.data, context={'viewer_is_premium': True}).data
        return APIResponse.success(data=data, message=str(result.message), request=request)


class CandidateStatsView(CandidateMixin, APIView):
    """
    GET /api/v1/candidates/me/stats/

    Application counts per bucket, total and number of saved opportunities.
    """

    def get(self, request):
        candidate = self.get_candidate()
        stats = ApplicationService.candidate_stats(candidate)
        return APIResponse.success(data=CandidateStatsSerializer(stats).data, request=request)
