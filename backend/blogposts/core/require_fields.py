"""Required Field Check — presence validation shared by POST and PUT bodies.

Invariants:
    - Fields are checked in the order given; the first absent one is reported
    - Only key presence is checked (None, "" and non-str values all pass)
"""

from typing import Mapping, Sequence

from blogposts.core.errors import MissingFieldError


CREATE_FIELDS: tuple[str, ...] = ("title", "author", "content")
UPDATE_FIELDS: tuple[str, ...] = ("author", "title", "content", "id")


def require_fields(body: Mapping, required: Sequence[str]) -> None:
    """Raise MissingFieldError for the first key of `required` absent from body."""
    for field in required:
        if field not in body:
            raise MissingFieldError(field)
