"""JSON Select exceptions."""


class InvalidSpecification(TypeError):
    """Raised when field specification is neither a string nor a mapping."""

    pass
