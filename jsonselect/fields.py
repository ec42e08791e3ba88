"""Support for field selection in JSON fields."""
from rest_framework.fields import JSONField

from .projection import normalize_fields, select


class SelectableJSONField(JSONField):
    """JSON field which supports field selection.

    Unlike serializers, identifier fields are not excluded by default.
    """

    def __init__(self, *args, select=None, **kwargs):
        """Initialize attributes."""
        self.select = normalize_fields(select)
        super().__init__(*args, **kwargs)

    def to_representation(self, value):
        """Select fields of outgoing native value."""
        value = select(value, self.select)
        return super().to_representation(value)
