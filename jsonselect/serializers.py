"""Support for field selection in serializers.

Field specification used for a serializer is resolved on every call, in
this order:

* ``select`` key in the serializer context or, when the context has no
  such key, the query parameter of the request in the context (see the
  ``QUERY_PARAM`` setting),
* ``json_select`` attribute of the serializer ``Meta`` class,
* the default given to :func:`json_select`,
* the ``DEFAULT`` setting.

Only top-level serializers read the context. When the context holds a
field specification, nested serializers do not apply any selection, so
the specification given for the top-level document is never applied to
its subdocuments.

Identifier fields ``_id``, ``id`` and ``__v`` are excluded unless they
are explicitly mentioned.
"""
import functools
import logging

from rest_framework.serializers import ListSerializer

from .projection import normalize_fields, select, set_default
from .settings import get_setting

logger = logging.getLogger(__name__)

CONTEXT_KEY = "select"


def _is_top_level(serializer):
    """Check if serializer represents a top-level document."""
    parent = serializer.parent
    while parent is not None:
        if not isinstance(parent, ListSerializer):
            return False
        parent = parent.parent
    return True


def _get_call_fields(context):
    """Get field specification given with the call.

    :return: tuple of a flag whether the specification is given and the
        specification itself
    """
    if CONTEXT_KEY in context:
        return True, context[CONTEXT_KEY]

    request = context.get("request")
    query_param = get_setting("QUERY_PARAM")
    if request is None or query_param is None:
        return False, None

    query_params = getattr(request, "query_params", {})
    if query_param in query_params:
        return True, query_params[query_param]

    return False, None


def _resolve_fields(serializer, default):
    """Resolve field specification for the current call."""
    given, fields = _get_call_fields(serializer.context)
    if given:
        if not _is_top_level(serializer):
            logger.debug(
                "Skipping selection in nested %s.", type(serializer).__name__
            )
            return None
        logger.debug("Using call fields in %s.", type(serializer).__name__)
        return fields

    meta = getattr(serializer, "Meta", None)
    fields = getattr(meta, "json_select", None)
    if fields:
        logger.debug("Using Meta fields in %s.", type(serializer).__name__)
        return fields

    if default:
        logger.debug("Using default fields in %s.", type(serializer).__name__)
        return default

    return get_setting("DEFAULT")


def apply_json_select(serializer, data, default=None):
    """Apply field selection to the serialized data.

    :param serializer: Serializer that produced the data
    :type serializer: `Serializer`
    :param data: Serialized data
    :param default: Default field specification
    :type default: str or dict
    """
    fields = _resolve_fields(serializer, default)
    if not fields:
        return data

    fields = normalize_fields(fields)
    set_default(fields)
    return select(data, fields)


def json_select(serializer_class, fields=None):
    """Enable field selection on the given serializer class.

    The ``to_representation`` method of the class is wrapped in place.

    :param serializer_class: Serializer class
    :param fields: Default field specification
    :type fields: str or dict
    :return: The given serializer class
    """
    # Fail early on invalid defaults.
    normalize_fields(fields)

    to_representation = serializer_class.to_representation

    @functools.wraps(to_representation)
    def wrapper(self, instance):
        data = to_representation(self, instance)
        return apply_json_select(self, data, fields)

    serializer_class.to_representation = wrapper
    return serializer_class


class SelectiveJSONMixin:
    """Mixin that enables field selection on serializers.

    Default field specification is given in ``json_select_default``.
    """

    json_select_default = None

    def to_representation(self, instance):
        """Apply field selection to the serialized data."""
        data = super().to_representation(instance)
        return apply_json_select(self, data, self.json_select_default)
