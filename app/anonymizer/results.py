# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2026 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Result values returned by handlers and by the executor.

Both levels serialize with ``to_dict()``, which is the payload the REST API and
the management command emit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime


def _validate_counts(counts: dict[str, int]) -> None:
    """Reject anything but non-negative integer counts."""
    for category, count in counts.items():
        if not isinstance(category, str):
            message = f'Category names must be strings, got {category!r}'
            raise TypeError(message)

        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            message = f'Count for category "{category}" must be a non-negative integer, got {count!r}'
            raise ValueError(message)


@dataclass(frozen=True)
class HandlerResult:
    """Outcome of one handler invocation."""

    success: bool = True
    message: str = ''
    updated_by_category: dict[str, int] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the reported counts."""
        _validate_counts(self.updated_by_category)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            'success': self.success,
            'message': self.message,
            'updated_by_category': dict(self.updated_by_category),
            'data': dict(self.data),
        }


@dataclass(frozen=True)
class HandlerDetail:
    """A successful handler invocation inside an aggregate result."""

    handler: str
    description: str
    result: HandlerResult

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            'handler': self.handler,
            'description': self.description,
            'result': self.result.to_dict(),
        }


@dataclass(frozen=True)
class AggregateResult:
    """Merged outcome of running every registered handler once.

    ``executed_count`` always equals ``len(details)``: handlers that raised are
    only visible through ``errors``.
    """

    success: bool
    updated_by_category: dict[str, int]
    details: tuple[HandlerDetail, ...]
    errors: tuple[str, ...]
    timestamp: datetime

    def __post_init__(self) -> None:
        """Validate the merged counts."""
        _validate_counts(self.updated_by_category)

    @property
    def executed_count(self) -> int:
        """Number of handlers that returned a result without raising."""
        return len(self.details)

    @property
    def all_failed(self) -> bool:
        """Check whether handlers failed and none succeeded."""
        return bool(self.errors) and not self.details

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        return {
            'success': self.success,
            'executed_count': self.executed_count,
            'updated_by_category': dict(self.updated_by_category),
            'details': [detail.to_dict() for detail in self.details],
            'errors': list(self.errors),
            'timestamp': self.timestamp.isoformat(),
        }
