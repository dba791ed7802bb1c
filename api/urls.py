"""
API URLs - versioned REST API routing.

Each app owns its routes in ``<app>/api/urls.py``; this module mounts them
under ``/api/v1/``.
"""

from django.urls import include, path

app_name = 'api'

v1_patterns = [
    path('', include('opportunities.api.urls')),
    path('', include('applications.api.urls')),
    path('', include('accounts.api.urls')),
]

urlpatterns = [
    path('v1/', include(v1_patterns)),
]

"""
API Endpoints Available:

Public catalog:
- GET  /api/v1/public/opportunities/ - Browse (never freelancing or premium-only)
- GET  /api/v1/public/opportunities/{id}/ - Detail

Dashboard:
- GET  /api/v1/opportunities/ - Feed (?search=&type=&work_type=&recommended=)
- GET  /api/v1/opportunities/{id}/ - Detail with existing application
- POST /api/v1/opportunities/{id}/increment_view/ - Bump view counter
- GET  /api/v1/opportunities/{id}/apply/ - Application status for this opportunity
- POST /api/v1/opportunities/{id}/apply/ - Apply

Candidate:
- GET    /api/v1/candidates/me/ - Profile with completion
- GET    /api/v1/candidates/me/completion/ - Completion only
- GET    /api/v1/candidates/me/stats/ - Application bucket counts
- GET    /api/v1/candidates/me/saved/ - Saved opportunities
- POST   /api/v1/candidates/me/saved/ - Save an opportunity
- DELETE /api/v1/candidates/me/saved/{opportunity_id}/ - Unsave

Applications:
- GET  /api/v1/applications/ - Own applications (?bucket=)
- POST /api/v1/applications/{id}/withdraw/ - Withdraw
- POST /api/v1/applications/{id}/status/ - Company-side status change
"""
