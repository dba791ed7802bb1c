"""
Opportunities API URLs.
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import (
    OpportunityViewSet,
    PublicOpportunityViewSet,
    SavedOpportunityDetailView,
    SavedOpportunityListView,
)

router = SimpleRouter()
router.register(r'public/opportunities', PublicOpportunityViewSet, basename='public-opportunity')
router.register(r'opportunities', OpportunityViewSet, basename='opportunity')

urlpatterns = [
    # GET /api/v1/public/opportunities/ - Public catalog
    # GET /api/v1/public/opportunities/{id}/ - Public detail
    # GET /api/v1/opportunities/ - Dashboard feed
    # GET /api/v1/opportunities/{id}/ - Dashboard detail
    # POST /api/v1/opportunities/{id}/increment_view/ - Increment view count
    path('', include(router.urls)),
    path('candidates/me/saved/', SavedOpportunityListView.as_view(), name='saved-opportunity-list'),
    path(
        'candidates/me/saved/<int:opportunity_id>/',
        SavedOpportunityDetailView.as_view(),
        name='saved-opportunity-detail',
    ),
]
