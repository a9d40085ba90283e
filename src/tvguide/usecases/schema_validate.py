from __future__ import annotations

from collections.abc import Sequence

from ..infra.exceptions import SchemaError
from ..shared.types import REQUIRED_COLUMNS


def validate_columns(headers: Sequence[object]) -> None:
    """Check the header row carries every required column.

    Extra columns are allowed. The first missing column (in declaration order)
    is reported together with every column that was found.

    Raises:
        SchemaError: If a required column is absent
    """
    found = [str(h).strip() for h in headers if h is not None and str(h).strip()]
    for expected in REQUIRED_COLUMNS:
        if expected not in found:
            raise SchemaError(
                f"Missing required column: {expected}. Found columns: {', '.join(found)}",
                missing=expected,
                found=found,
            )
