# add_to_project/components.py - filter matching
"""Workflow filters and the issue/PR values they are matched against.

A ``FilterSpec`` is what the workflow asked for (``assignee: alice, bob``
plus an operator), a ``Candidate`` is what the issue or pull request actually
carries. ``evaluate`` decides whether one pair matches; ``should_add`` requires
every pair to match.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from .utils import setup_logger

logger = setup_logger(__name__)


class Operator(str, Enum):
    AND = "and"
    ANY = "any"


def parse_operator(text: Optional[str]) -> Operator:
    """Anything other than ``and`` (after trimming, case-insensitive) is ANY."""
    if (text or "").strip().lower() == "and":
        return Operator.AND
    return Operator.ANY


def split_values(raw: Optional[str]) -> Tuple[str, ...]:
    return tuple(v.strip() for v in (raw or "").split(",") if v.strip())


class FilterSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_name: str
    configured_values: Tuple[str, ...] = ()
    operator: Operator = Operator.ANY

    @field_validator("configured_values", mode="before")
    @classmethod
    def _clean_values(cls, value):
        # Entries are trimmed and never empty, however the filter is built
        if value is None or isinstance(value, str):
            return split_values(value)
        return tuple(v.strip() for v in value if v and v.strip())

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, value):
        if value is None or isinstance(value, str):
            return parse_operator(value)
        return value

    @classmethod
    def from_input(cls, field_name: str, raw_values: Optional[str],
                   raw_operator: Optional[str] = None) -> "FilterSpec":
        """Build a filter from comma-separated workflow input."""
        return cls(
            field_name=field_name,
            configured_values=raw_values,
            operator=raw_operator,
        )


class Candidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    field_name: str
    actual_values: Tuple[str, ...] = ()
    subject_id: Optional[Union[int, str]] = None

    @classmethod
    def from_payload(cls, field_name: str, subject: Optional[Dict[str, Any]],
                     attr: str) -> "Candidate":
        """Collect ``attr`` from every entry of ``subject[field_name]``.

        ``subject`` is the ``issue`` or ``pull_request`` object of the event
        payload; a missing subject or list gives an empty candidate, and
        entries without ``attr`` are skipped.
        """
        subject = subject or {}
        entries = subject.get(field_name) or []
        return cls(
            field_name=field_name,
            actual_values=tuple(v for v in (entry.get(attr) for entry in entries) if v is not None),
            subject_id=subject.get("number"),
        )


def evaluate(spec: FilterSpec, candidate: Candidate) -> bool:
    """Return True if ``candidate`` satisfies ``spec``.

    An empty filter always matches. AND needs every configured value present,
    ANY needs at least one.
    """
    if not spec.configured_values:
        return True

    actual = set(candidate.actual_values)
    fields = ", ".join(spec.configured_values)

    if spec.operator is Operator.AND:
        if not all(value in actual for value in spec.configured_values):
            logger.info(
                f'Skipping issue {candidate.subject_id} because it doesn\'t match '
                f'all the fields from "{spec.field_name}": {fields}'
            )
            return False
    elif not any(value in actual for value in spec.configured_values):
        logger.info(
            f'Skipping issue {candidate.subject_id} because it doesn\'t match '
            f'one of the fields from "{spec.field_name}": {fields}'
        )
        return False

    return True


def should_add(pairs: Iterable[Tuple[FilterSpec, Candidate]]) -> bool:
    """All pairs must match; stops at the first one that doesn't."""
    return all(evaluate(spec, candidate) for spec, candidate in pairs)


def build_pairs(config, subject: Optional[Dict[str, Any]]) -> Tuple[Tuple[FilterSpec, Candidate], ...]:
    """Assignee and label pairs for one issue or pull request."""
    return (
        (
            FilterSpec.from_input("assignee", config.assignee, config.assignee_operator),
            Candidate.from_payload("assignees", subject, "login"),
        ),
        (
            FilterSpec.from_input("labeled", config.labeled, config.label_operator),
            Candidate.from_payload("labels", subject, "name"),
        ),
    )
