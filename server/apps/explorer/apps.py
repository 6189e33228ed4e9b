"""Django app configuration for explorer app."""

from django.apps import AppConfig


class ExplorerConfig(AppConfig):
    """Configuration for explorer app."""

    name = 'server.apps.explorer'
    verbose_name = 'Explorer'
