"""
Corpus Loading

Validates raw stat rows handed over by the data-access layer before any
aggregation runs. A row without points or a match id would corrupt every
downstream average, so loading fails on the first bad row.
"""

from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from core.logging import get_logger
from schemas.stats import StatLine

log = get_logger("stats")


class StatLineContractError(ValueError):
    """Raised when a raw stat row violates the StatLine contract."""

    def __init__(self, index: int, row: Any, errors: list[dict]):
        self.index = index
        self.row = row
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e["loc"]) for e in errors)
        super().__init__(f"Invalid stat row at index {index}: {fields}")


def load_stat_lines(rows: Iterable[Mapping[str, Any]]) -> list[StatLine]:
    """
    Convert raw rows into StatLines.

    Extra keys on a row (row ids, timestamps, joined player records) are
    ignored.

    Raises:
        StatLineContractError: On the first row that fails validation
    """
    stat_lines = []
    for index, row in enumerate(rows):
        if isinstance(row, StatLine):
            stat_lines.append(row)
            continue
        try:
            stat_lines.append(StatLine.model_validate(row))
        except ValidationError as e:
            errors = e.errors(include_url=False)
            log.warning("stat_row_rejected", index=index, errors=errors)
            raise StatLineContractError(index, row, errors) from e
    return stat_lines
