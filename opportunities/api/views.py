"""
Opportunities API Views.

- PublicOpportunityViewSet: anonymous catalog (paginated)
- OpportunityViewSet: authenticated dashboard feed and detail
- SavedOpportunityListView / SavedOpportunityDetailView: candidate bookmarks

Every opportunity leaves through :func:`policy.visibility.redact`, so the
company block is always the one the viewer is entitled to.
"""

import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.views import APIView

from accounts.api.views import CandidateMixin
from accounts.context import viewer_from_request
from api.base import APIResponse, StandardPagination
from api.exceptions import ResourceNotFoundError
from applications.services import ApplicationService
from core.conf import get_anonymous_suffix_length, get_feed_limit
from opportunities.filters import OpportunityFilter
from opportunities.models import Opportunity, SavedOpportunity
from policy.visibility import redact

from .serializers import (
    OpportunityDetailSerializer,
    OpportunityViewSerializer,
    SaveOpportunityInputSerializer,
    SavedOpportunitySerializer,
)

logger = logging.getLogger(__name__)

TRUE_VALUES = ('1', 'true', 'yes')


class RedactedOpportunityMixin:
    """Wraps opportunities in the viewer-specific view before serializing."""

    def get_viewer(self):
        return viewer_from_request(self.request)

    def redact_all(self, opportunities):
        viewer = self.get_viewer()
        suffix_length = get_anonymous_suffix_length()
        return [redact(opportunity, viewer, suffix_length) for opportunity in opportunities]

    def redact_one(self, opportunity):
        return redact(opportunity, self.get_viewer(), get_anonymous_suffix_length())


class PublicOpportunityViewSet(RedactedOpportunityMixin, viewsets.ReadOnlyModelViewSet):
    """
    Public Opportunity Catalog API ViewSet.

    - List: GET /api/v1/public/opportunities/
    - Detail: GET /api/v1/public/opportunities/{id}/
    - Filter: ?search=&type=&work_type=&category=&city=

    Never lists FREELANCING or premium-only opportunities.

    Permissions: Public access (no authentication required)
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    pagination_class = StandardPagination
    filter_backends = [DjangoFilterBackend]
    filterset_class = OpportunityFilter
    serializer_class = OpportunityViewSerializer

    def get_queryset(self):
        return Opportunity.objects.public().with_related()

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        serializer = OpportunityViewSerializer(self.redact_all(page), many=True)
        return self.get_paginated_response(serializer.data)

    def retrieve(self, request, *args, **kwargs):
        opportunity = self.get_object()
        serializer = OpportunityDetailSerializer(self.redact_one(opportunity))
        return APIResponse.success(data=serializer.data, request=request)


class OpportunityViewSet(RedactedOpportunityMixin, viewsets.ReadOnlyModelViewSet):
    """
    Authenticated dashboard feed.

    - List: GET /api/v1/opportunities/?recommended=true
    - Detail: GET /api/v1/opportunities/{id}/
    - View counter: POST /api/v1/opportunities/{id}/increment_view/

    Premium-gated listings are included with ``can_apply=false`` for free
    accounts; institutes never receive FREELANCING.
    """

    permission_classes = [IsAuthenticated]
    pagination_class = None
    filter_backends = [DjangoFilterBackend]
    filterset_class = OpportunityFilter
    serializer_class = OpportunityViewSerializer

    def get_queryset(self):
        return Opportunity.objects.listable().with_related().visible_to(self.get_viewer())

    def list(self, request, *args, **kwargs):
        recommended = request.query_params.get('recommended', '').lower() in TRUE_VALUES
        limit = get_feed_limit(recommended=recommended)

        queryset = self.filter_queryset(self.get_queryset())[:limit]
        serializer = OpportunityViewSerializer(self.redact_all(queryset), many=True)
        return APIResponse.success(
            data=serializer.data,
            meta={'count': len(serializer.data), 'limit': limit},
            request=request,
        )

    def retrieve(self, request, *args, **kwargs):
        opportunity = self.get_object()

        existing = None
        candidate = getattr(request.user, 'candidate', None)
        if candidate is not None and self.get_viewer().is_candidate:
            existing = ApplicationService.current_application(candidate, opportunity)

        serializer = OpportunityDetailSerializer(
            self.redact_one(opportunity),
            context={'existing_application': existing},
        )
        return APIResponse.success(data=serializer.data, request=request)

    @action(detail=True, methods=['post'])
    def increment_view(self, request, pk=None):
        """Bump the view counter of a visible opportunity."""
        opportunity = self.get_object()
        opportunity.increment_view_count()
        opportunity.refresh_from_db(fields=['view_count'])
        return APIResponse.success(data={'view_count': opportunity.view_count}, request=request)


class SavedOpportunityListView(CandidateMixin, RedactedOpportunityMixin, APIView):
    """
    GET /api/v1/candidates/me/saved/   saved opportunities, newest first
    POST /api/v1/candidates/me/saved/  save {"opportunity_id": ...}

    Saving twice is a no-op answering 200; the first save answers 201.
    """

    def get(self, request):
        candidate = self.get_candidate()
        saved = list(
            SavedOpportunity.objects
            .filter(candidate=candidate)
            .select_related('opportunity__industry', 'opportunity__category', 'opportunity__location')
            .prefetch_related('opportunity__skills')
        )
        views = {
            entry.opportunity_id: view
            for entry, view in zip(saved, self.redact_all(entry.opportunity for entry in saved))
        }
        serializer = SavedOpportunitySerializer(saved, many=True, context={'views': views})
        return APIResponse.success(data=serializer.data, request=request)

    def post(self, request):
        candidate = self.get_candidate()
        serializer = SaveOpportunityInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        opportunity_id = serializer.validated_data['opportunity_id']

        opportunity = (
            Opportunity.objects
            .listable()
            .visible_to(self.get_viewer())
            .with_related()
            .filter(pk=opportunity_id)
            .first()
        )
        if opportunity is None:
            raise ResourceNotFoundError(resource_type='Opportunity', resource_id=opportunity_id)

        entry, created = SavedOpportunity.objects.get_or_create(
            candidate=candidate,
            opportunity=opportunity,
        )
        data = SavedOpportunitySerializer(
            entry,
            context={'views': {opportunity.pk: self.redact_one(opportunity)}},
        ).data

        if created:
            logger.info(f"Candidate {candidate.pk} saved opportunity {opportunity.pk}")
            return APIResponse.created(data=data, message='Opportunity saved.', request=request)
        return APIResponse.success(data=data, message='Opportunity already saved.', request=request)


class SavedOpportunityDetailView(CandidateMixin, APIView):
    """
    DELETE /api/v1/candidates/me/saved/{opportunity_id}/

    Removing an opportunity that is not saved is not an error.
    """

    def delete(self, request, opportunity_id):
        candidate = self.get_candidate()
        deleted, _ = SavedOpportunity.objects.filter(
            candidate=candidate,
            opportunity_id=opportunity_id,
        ).delete()
        if deleted:
            logger.info(f"Candidate {candidate.pk} unsaved opportunity {opportunity_id}")
        return APIResponse.deleted()
