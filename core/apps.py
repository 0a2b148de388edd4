"""
App configuration for the core app.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """App configuration for core."""

    name = "core"
    verbose_name = "Core"

    def ready(self):
        """Called when Django starts."""
        from core.instrumentation import setup_opentelemetry

        setup_opentelemetry()
