"""
Transaction record model and row normalization.

Each parsed data row becomes a Transaction with positional fields:
- Posted Date (kept raw, parsed only when sorting)
- Reference Number
- Payee
- Address
- Amount (float, unparsable values become 0.0)

Every ingested transaction starts out as Category.UNCATEGORIZED unless a
previously exported file is reloaded with its categories restored. Categories
are never inferred from transaction content.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)

# Leading decimal literal, the part of a value a lenient float parse accepts
_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


class Category(str, Enum):
    SPLITWISE = "splitwise"
    PERSONAL = "personal"
    UNCATEGORIZED = "uncategorized"

    @classmethod
    def parse(cls, value):
        """Return the Category for an enum member or its literal token.

        Raises:
            ValueError: If value names no category
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower()
            for category in cls:
                if category.value == token:
                    return category
        raise ValueError(f"Invalid category: {value!r}. Expected one of: {[c.value for c in cls]}")


@dataclass(frozen=True)
class Transaction:
    """Single credit card transaction from an export file."""
    id: int
    posted_date: str
    reference_number: str
    payee: str
    address: str
    amount: float
    category: Category = Category.UNCATEGORIZED


def parse_amount(value):
    """Parse an amount the lenient way bank exports need.

    Args:
        value (str or None): Raw amount field

    Returns:
        float: Leading numeric value of the field, or 0.0 if there is none

    Notes:
        - Trailing garbage after the number is ignored ('12.50USD' -> 12.5)
        - Currency symbols before the number are not stripped ('$5' -> 0.0)
        - NaN and infinite results become 0.0
    """
    if value is None:
        return 0.0
    match = _LEADING_NUMBER.match(str(value).strip())
    if not match:
        return 0.0
    result = float(match.group(0))
    if not np.isfinite(result):
        return 0.0
    return result


def _field(values: Sequence[str], index: int) -> str:
    return values[index] if index < len(values) else ''


def _restored_category(values: Sequence[str]) -> Category:
    try:
        return Category.parse(_field(values, 5))
    except ValueError:
        return Category.UNCATEGORIZED


def normalize_row(values: Sequence[str], row_id: int, restore_category: bool = False) -> Transaction:
    """Build a Transaction from one parsed row.

    Missing trailing columns normalize to empty strings (or 0.0 for amount),
    extra columns are ignored. With restore_category, a category token in the
    sixth column (as written by the exporter) is kept; anything else there
    leaves the transaction uncategorized.
    """
    if len(values) < 5:
        logger.debug(f"Row {row_id} has {len(values)} columns, filling missing fields")
    return Transaction(
        id=row_id,
        posted_date=_field(values, 0),
        reference_number=_field(values, 1),
        payee=_field(values, 2),
        address=_field(values, 3),
        amount=parse_amount(_field(values, 4)),
        category=_restored_category(values) if restore_category else Category.UNCATEGORIZED,
    )


def normalize_rows(rows: Sequence[Sequence[str]], restore_categories: bool = False) -> List[Transaction]:
    """Normalize parsed rows into transactions with sequential ids."""
    transactions = [
        normalize_row(values, row_id, restore_categories) for row_id, values in enumerate(rows)
    ]
    logger.debug(f"Normalized {len(transactions)} transactions")
    return transactions
