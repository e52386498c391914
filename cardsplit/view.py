"""
View Engine: filtered, searched and sorted projections of a ledger, and
per-category summaries.

Views are recomputed from the full ledger on every call and never modify it.
Summaries always cover the whole ledger, whatever the current view shows.

Sort keys:
- date: posted date parsed as a calendar date; unparsable dates go last
- amount: absolute amount (sign ignored)
- payee: case-insensitive payee
- referenceNumber, address: raw field value
"""

import logging
from datetime import datetime
from enum import Enum

import pandas as pd

from cardsplit.models import Category

logger = logging.getLogger(__name__)

FILTER_ALL = 'all'

DATE_FORMATS = [
    '%m/%d/%Y',  # US (most card exports)
    '%Y-%m-%d',  # ISO
    '%Y-%m-%d %H:%M:%S',  # ISO with time
    '%m-%d-%Y',  # US with dashes
    '%Y/%m/%d',
    '%m/%d/%y'   # Short year
]


class SortKey(str, Enum):
    DATE = "date"
    AMOUNT = "amount"
    PAYEE = "payee"
    REFERENCE_NUMBER = "referenceNumber"
    ADDRESS = "address"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_FILTER = FILTER_ALL
DEFAULT_SORT_KEY = SortKey.DATE
DEFAULT_SORT_DIRECTION = SortDirection.DESC


def parse_date(date_str):
    """Parse a posted date for sorting.

    Args:
        date_str (str): Raw posted date

    Returns:
        datetime or None: Parsed date, or None if no supported format matches
    """
    date_str = (date_str or '').strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return None


def date_sort_key(transaction):
    return parse_date(transaction.posted_date)


def amount_sort_key(transaction):
    return abs(transaction.amount)


def payee_sort_key(transaction):
    return transaction.payee.lower()


def reference_number_sort_key(transaction):
    return transaction.reference_number


def address_sort_key(transaction):
    return transaction.address


SORT_KEY_FUNCTIONS = {
    SortKey.DATE: date_sort_key,
    SortKey.AMOUNT: amount_sort_key,
    SortKey.PAYEE: payee_sort_key,
    SortKey.REFERENCE_NUMBER: reference_number_sort_key,
    SortKey.ADDRESS: address_sort_key,
}


def _parse_enum(enum_cls, value, label):
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if member.value == value:
            return member
    raise ValueError(f"Invalid {label}: {value!r}. Expected one of: {[m.value for m in enum_cls]}")


def parse_filter(value):
    """Return None for 'all', otherwise the Category to keep."""
    if value is None or value == FILTER_ALL:
        return None
    try:
        return Category.parse(value)
    except ValueError:
        raise ValueError(f"Invalid filter: {value!r}. Expected 'all' or one of: {[c.value for c in Category]}")


def parse_sort_option(option):
    """Split a combined sort option such as 'amount-desc'.

    Returns:
        tuple: (SortKey, SortDirection)

    Raises:
        ValueError: If the option is not '<key>-<direction>' with known values
    """
    key, sep, direction = (option or '').rpartition('-')
    if not sep:
        raise ValueError(f"Invalid sort option: {option!r}. Expected '<key>-<asc|desc>'")
    return _parse_enum(SortKey, key, 'sort key'), _parse_enum(SortDirection, direction, 'sort direction')


def filter_transactions(transactions, category=None):
    category = parse_filter(category)
    if category is None:
        return list(transactions)
    return [t for t in transactions if t.category == category]


def search_transactions(transactions, search_term=''):
    """Keep transactions whose payee or address contains search_term, ignoring case."""
    if not search_term:
        return list(transactions)
    needle = search_term.casefold()
    return [t for t in transactions if needle in t.payee.casefold() or needle in t.address.casefold()]


def sort_transactions(transactions, sort_key=DEFAULT_SORT_KEY, direction=DEFAULT_SORT_DIRECTION):
    """Sort transactions by one of the named sort keys.

    Ties keep their input order. Transactions whose key is missing (only an
    unparsable date) are placed after all others, whatever the direction.
    """
    sort_key = _parse_enum(SortKey, sort_key, 'sort key')
    direction = _parse_enum(SortDirection, direction, 'sort direction')
    key_func = SORT_KEY_FUNCTIONS[sort_key]

    keyed = [(key_func(t), t) for t in transactions]
    present = [(k, t) for k, t in keyed if k is not None]
    missing = [t for k, t in keyed if k is None]
    if missing:
        logger.debug(f"{len(missing)} transactions have no {sort_key.value} value, sorting them last")

    present.sort(key=lambda pair: pair[0], reverse=direction == SortDirection.DESC)
    return [t for _, t in present] + missing


def get_view(transactions, filter_category=DEFAULT_FILTER, search_term='',
             sort_key=DEFAULT_SORT_KEY, direction=DEFAULT_SORT_DIRECTION):
    """Filter, then search, then sort transactions for display.

    Args:
        transactions (iterable of Transaction): Full ledger contents
        filter_category (str or Category): 'all' or a category to keep
        search_term (str): Case-insensitive payee/address substring
        sort_key (str or SortKey): Named sort key
        direction (str or SortDirection): 'asc' or 'desc'

    Returns:
        list[Transaction]: New list; the input is not modified

    Raises:
        ValueError: If a view parameter is not recognised
    """
    sort_key = _parse_enum(SortKey, sort_key, 'sort key')
    direction = _parse_enum(SortDirection, direction, 'sort direction')

    result = filter_transactions(transactions, filter_category)
    result = search_transactions(result, search_term)
    result = sort_transactions(result, sort_key, direction)
    logger.debug(
        f"View filter={filter_category} search={search_term!r} "
        f"sort={sort_key.value}-{direction.value}: {len(result)} transactions"
    )
    return result


def summarize(df):
    """Compute per-category counts and absolute-amount totals.

    Args:
        df (pd.DataFrame): Ledger frame with 'category' and 'amount' columns

    Returns:
        dict: {category: {'count': int, 'total': float}} for every category
    """
    categories = [c.value for c in Category]
    grouped = (
        df.assign(abs_amount=df['amount'].astype(float).abs())
        .groupby('category')['abs_amount']
        .agg(['count', 'sum'])
        .reindex(categories, fill_value=0)
    )
    return {
        category: {'count': int(row['count']), 'total': float(row['sum'])}
        for category, row in grouped.iterrows()
    }


def grand_total(summary):
    """Combine the category buckets of a summary into one count and total."""
    return {
        'count': sum(bucket['count'] for bucket in summary.values()),
        'total': sum(bucket['total'] for bucket in summary.values()),
    }


def format_amount(amount):
    """Format an amount with two decimals, keeping the sign."""
    formatted = f"{abs(amount):.2f}"
    return f"-{formatted}" if amount < 0 else formatted


def format_summary(summary):
    """Format a summary as report text.

    Returns:
        str: One count and one amount line per category, then the totals
    """
    lines = []
    for category in Category:
        bucket = summary[category.value]
        label = category.value.capitalize()
        lines.append(f"{label} Transactions: {bucket['count']}")
        lines.append(f"{label} Amount: ${bucket['total']:.2f}")

    totals = grand_total(summary)
    lines.append(f"Total Transactions: {totals['count']}")
    lines.append(f"Total Amount: ${totals['total']:.2f}")
    return "\n".join(lines)


def view_frame(transactions):
    """Return view rows as a DataFrame ready for display."""
    return pd.DataFrame(
        [
            {
                'ID': t.id,
                'Posted Date': t.posted_date,
                'Payee': t.payee,
                'Address': t.address,
                'Amount': format_amount(t.amount),
                'Category': t.category.value,
            }
            for t in transactions
        ],
        columns=['ID', 'Posted Date', 'Payee', 'Address', 'Amount', 'Category'],
    )
