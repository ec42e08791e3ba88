"""Implementation of field selection.

Field specification is either a string of space separated field paths,
where a ``-`` prefix marks an excluded field (``"username -name.last"``),
or a mapping of field paths to truthy (include) or falsy (exclude) flags
(``{"username": 1, "name.last": 0}``). Nested fields are addressed with
a dot.

Fields that are not included are set to ``None``. Identifier fields
(see :data:`DEFAULT_EXCLUDED_FIELDS`) are removed from the result when
they are excluded.
"""
import copy
import re
from collections.abc import Mapping

from .exceptions import InvalidSpecification

FIELD_SEPARATOR = re.compile(r"\s+")
FIELD_DEREFERENCE = "."
EXCLUDE_PREFIX = "-"

#: Identifier fields excluded by default.
DEFAULT_EXCLUDED_FIELDS = ("_id", "id", "__v")


def normalize_fields(fields):
    """Convert field specification to a mapping of fields to flags.

    :param fields: Field specification
    :type fields: str or dict
    :return: Mapping of field paths to ``1`` (include) or ``0`` (exclude)
        or ``None`` if no fields are given
    :rtype: dict or None
    :raises InvalidSpecification: if fields are neither a string nor
        a mapping
    """
    if isinstance(fields, Mapping):
        return dict(fields)

    if fields is None or fields is False or fields == "":
        return None

    if isinstance(fields, str):
        normalized = {}
        for field in FIELD_SEPARATOR.split(fields):
            if not field:
                continue

            include = int(not field.startswith(EXCLUDE_PREFIX))
            if not include:
                field = field[len(EXCLUDE_PREFIX) :]
            normalized[field] = include
        return normalized

    raise InvalidSpecification("Invalid select fields. Must be a string or object.")


def set_default(fields):
    """Exclude identifier fields unless they are explicitly mentioned.

    The passed dictionary is mutated.
    """
    for field in DEFAULT_EXCLUDED_FIELDS:
        fields.setdefault(field, 0)


def _search_in_fields(name, fields):
    """Check if field with the given name is included."""
    if not isinstance(fields, Mapping):
        return False
    return str(name) in fields


def _subfields(name, fields):
    """Get inclusion map for the given field."""
    if not isinstance(fields, Mapping):
        return None
    return fields.get(str(name))


def _keys(data):
    if isinstance(data, dict):
        return list(data.keys())
    return range(len(data))


def _only_include(data, fields):
    """Set all fields not present in ``fields`` to ``None``.

    The passed data is mutated.
    """
    for name in _keys(data):
        if not _search_in_fields(name, fields):
            data[name] = None
            continue

        value = data[name]
        if isinstance(value, list):
            for item in value:
                if isinstance(item, (dict, list)):
                    _only_include(item, _subfields(name, fields))
        # Identifier values are opaque, do not descend into them.
        elif isinstance(value, dict) and name not in DEFAULT_EXCLUDED_FIELDS:
            _only_include(value, _subfields(name, fields))


def include(data, fields):
    """Return a copy of data with only the given fields.

    :param data: Data to apply the inclusion to
    :param fields: Nested inclusion map, as returned by
        :func:`process_inclusive`
    :type fields: dict
    """
    data = copy.deepcopy(data)
    if isinstance(data, (dict, list)):
        _only_include(data, fields)
    return data


def _exclude_field(data, path):
    """Exclude a field in data recursively.

    The passed data is mutated.
    """
    if isinstance(data, list):
        for item in data:
            _exclude_field(item, path)
        return

    if not isinstance(data, dict):
        return

    name = path[0]
    if len(path) > 1:
        _exclude_field(data.get(name), path[1:])
        return

    if name in DEFAULT_EXCLUDED_FIELDS:
        data.pop(name, None)
    else:
        data[name] = None


def exclude(data, fields):
    """Return a copy of data without the given fields.

    :param data: Data to apply the exclusion to
    :param fields: Dotted paths of excluded fields
    :type fields: list
    """
    data = copy.deepcopy(data)
    for field in fields:
        _exclude_field(data, field.split(FIELD_DEREFERENCE))
    return data


def process_inclusive(fields):
    """Transform dotted paths of included fields to a nested inclusion map.

    Only the first two levels of a path are considered, so ``a.b.c`` is
    treated as ``a.b``.

    :param fields: Dotted paths of included fields
    :type fields: list
    :rtype: dict
    """
    inclusive = {}
    for field in fields:
        path = field.split(FIELD_DEREFERENCE)
        name = path[0]
        if len(path) > 1:
            # A field already included as a whole stays included as a whole.
            subfields = inclusive.setdefault(name, {})
            if isinstance(subfields, dict):
                subfields[path[1]] = 1
            continue

        inclusive[name] = 1

    return inclusive


def select(data, fields):
    """Include and exclude the selected fields in data.

    Inclusion is applied first, exclusion second. The passed data is
    never mutated, but it is returned as-is when there are no fields.

    :param data: Data to apply the selection to
    :param fields: Field specification
    :type fields: str or dict
    """
    fields = normalize_fields(fields)
    if fields is None:
        return data

    inclusive, exclusive = [], []
    for field, flag in fields.items():
        (inclusive if flag else exclusive).append(field)

    if inclusive:
        data = include(data, process_inclusive(inclusive))

    if exclusive:
        data = exclude(data, exclusive)

    return data
