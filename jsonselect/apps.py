""".. Ignore pydocstyle D400.

=========================
JSON Select Configuration
=========================

"""
import logging

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext_lazy as _

from .exceptions import InvalidSpecification
from .projection import normalize_fields
from .settings import DEFAULTS, get_settings

logger = logging.getLogger(__name__)


class JsonSelectConfig(AppConfig):
    """Application configuration."""

    name = "jsonselect"
    verbose_name = _("JSON Select")

    def _check_settings(self):
        """Validate the ``JSON_SELECT`` setting in the django config."""
        json_select_settings = get_settings()
        if not isinstance(json_select_settings, dict):
            message = "Setting JSON_SELECT must be a dictionary."
            logger.error(message)
            raise ImproperlyConfigured(message)

        unknown = sorted(set(json_select_settings) - set(DEFAULTS))
        if unknown:
            message = "Unknown JSON_SELECT settings: {}.".format(", ".join(unknown))
            logger.error(message)
            raise ImproperlyConfigured(message)

        try:
            normalize_fields(json_select_settings.get("DEFAULT"))
        except InvalidSpecification as error:
            logger.error("Invalid JSON_SELECT['DEFAULT'] setting: %s", error)
            raise ImproperlyConfigured(
                "Setting JSON_SELECT['DEFAULT'] must be a string or a dictionary."
            ) from error

    def ready(self):
        """Application initialization."""
        self._check_settings()
        return super().ready()
