from pydantic import field_validator


def _reject_null(cls, value):
    if value is None:
        raise ValueError("may not be null")
    return value


def non_nullable(*fields: str):
    """
    Partial-update fields are Optional so they can be omitted, but an explicit
    null for a column that cannot hold one is a validation error (422).
    Omitted fields keep their default and are never validated.
    """
    return field_validator(*fields)(classmethod(_reject_null))
