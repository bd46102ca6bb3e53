"""
HTTP error translation shared by the theory and tools routes.

Every rejected request gets a ``detail`` body shaped like
``TheoryError.to_dict()``: ``{"error_kind", "value", "message"}``.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from fastapi import HTTPException

from core.theory.errors import TheoryError

logger = logging.getLogger(__name__)


def _raise(status_code: int, detail: dict[str, Any]) -> NoReturn:
    logger.warning("Rejected request: %s (%r)", detail["error_kind"], detail["value"])
    raise HTTPException(status_code=status_code, detail=detail)


def reject(error_kind: str, message: str, value: Any = None, status_code: int = 422) -> NoReturn:
    """Raise an HTTPException with an error-kind detail body."""
    _raise(status_code, {"error_kind": error_kind, "value": value, "message": message})


def reject_theory_error(exc: TheoryError) -> NoReturn:
    """Translate a TheoryError into a 422 response."""
    _raise(422, exc.to_dict())
