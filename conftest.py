"""Configure Django before collecting tests with pytest."""
import os

import django


def pytest_configure(config):
    """Set up Django with the test settings."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "tests.settings")
    django.setup()
