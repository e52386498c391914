"""
CardSplit - categorize credit card transactions for Splitwise.

This package provides functionality to:
- Read a credit card CSV export (Posted Date, Reference Number, Payee, Address, Amount)
- Tag each transaction as splitwise, personal or uncategorized
- Filter, search and sort the transactions for display
- Summarize counts and absolute totals per category
- Export the categorized transactions back to CSV

Everything happens in memory; nothing is stored or sent anywhere.
"""

from .exceptions import CardSplitError, ReadError
from .models import Category, Transaction, normalize_rows, parse_amount
from .parser import parse_csv_text, decode_bytes, read_file
from .ledger import Ledger
from .view import (
    SortKey,
    SortDirection,
    get_view,
    summarize,
    grand_total,
    parse_sort_option,
    format_amount,
    format_summary
)
from .exporter import export_csv, save_export
from .session import Session

__all__ = [
    'CardSplitError',
    'ReadError',
    'Category',
    'Transaction',
    'normalize_rows',
    'parse_amount',
    'parse_csv_text',
    'decode_bytes',
    'read_file',
    'Ledger',
    'SortKey',
    'SortDirection',
    'get_view',
    'summarize',
    'grand_total',
    'parse_sort_option',
    'format_amount',
    'format_summary',
    'export_csv',
    'save_export',
    'Session'
]
