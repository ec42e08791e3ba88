""".. Ignore pydocstyle D400.

===========
JSON Select
===========

Include and exclude fields of serialized documents.

"""
from jsonselect.__about__ import (  # noqa: F401
    __author__,
    __copyright__,
    __email__,
    __license__,
    __summary__,
    __title__,
    __url__,
    __version__,
)
from jsonselect.exceptions import InvalidSpecification  # noqa: F401
from jsonselect.projection import select  # noqa: F401
