"""Validation of the query parameters that name users and pages."""

from __future__ import annotations

import re
from collections.abc import Mapping

from friendgraph.models import UserIDQuery, UserPagingQuery

MIN_ID = 1

_NUMERIC = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")
_INTEGER = re.compile(r"[-+]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ValidationError(ValueError):
    """A query parameter failed one of its rules."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: failed on the {reason!r} rule")
        self.field = field
        self.reason = reason


def parse_min_id(value: str | None, field: str) -> int:
    """Return ``value`` as an integer of at least 1, or raise ValidationError.

    The value must be present, look numeric, fit in a signed 64-bit integer
    and be no smaller than ``MIN_ID``.
    """
    if not value:
        raise ValidationError(field, "required")
    if not _NUMERIC.fullmatch(value):
        raise ValidationError(field, "numeric")
    if not _INTEGER.fullmatch(value):
        raise ValidationError(field, "min_id")
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX or number < MIN_ID:
        raise ValidationError(field, "min_id")
    return number


def validate_user_id_query(params: Mapping[str, str]) -> UserIDQuery:
    """Validate the ``id`` parameter of a request."""
    return UserIDQuery(id=parse_min_id(params.get("id"), "id"))


def validate_paging_query(params: Mapping[str, str]) -> UserPagingQuery:
    """Validate the ``id``, ``page`` and ``limit`` parameters of a request."""
    return UserPagingQuery(
        id=parse_min_id(params.get("id"), "id"),
        page=parse_min_id(params.get("page"), "page"),
        limit=parse_min_id(params.get("limit"), "limit"),
    )