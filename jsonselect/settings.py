"""Settings for JSON Select.

Settings are read from the ``JSON_SELECT`` dictionary in Django
settings on every access, so they may be overridden at runtime:

.. code-block:: python

    JSON_SELECT = {
        # Field specification used when no other is given.
        "DEFAULT": "-password",
        # Query parameter with field specification, ``None`` to disable.
        "QUERY_PARAM": "fields",
    }
"""
from django.conf import settings

DEFAULTS = {
    "DEFAULT": None,
    "QUERY_PARAM": "select",
}


def get_settings():
    """Return the ``JSON_SELECT`` setting as given in Django settings."""
    return getattr(settings, "JSON_SELECT", {})


def get_setting(name):
    """Return the value of a JSON Select setting or its default."""
    return get_settings().get(name, DEFAULTS[name])
