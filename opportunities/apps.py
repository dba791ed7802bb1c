"""Opportunities app configuration."""

from django.apps import AppConfig


class OpportunitiesConfig(AppConfig):
    """Configuration for the opportunities app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'opportunities'
    verbose_name = 'Opportunities'
