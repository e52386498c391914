"""
Session: the operations a presentation layer calls.

A Session owns one Ledger. Loading a file replaces the ledger contents only
after the whole file has been read, decoded, parsed and normalized, so a
failed load leaves the previous ledger in place.
"""

import logging

from cardsplit.exporter import export_csv, save_export
from cardsplit.ledger import Ledger
from cardsplit.models import normalize_rows
from cardsplit.parser import parse_bytes, read_file
from cardsplit import view

logger = logging.getLogger(__name__)


class Session:

    def __init__(self, ledger=None):
        self.ledger = ledger if ledger is not None else Ledger()

    def load_file(self, raw, restore_categories=False):
        """Load an export from raw bytes (or already decoded text).

        With restore_categories, the Category column of a file written by
        export_csv is applied instead of starting every transaction uncategorized.

        Raises:
            ReadError: If the bytes cannot be decoded; the ledger is unchanged
        """
        transactions = normalize_rows(parse_bytes(raw), restore_categories)
        self.ledger.replace(transactions)
        return len(transactions)

    def load_path(self, file_path, restore_categories=False):
        """Load an export file from disk.

        Raises:
            ReadError: If the file cannot be read; the ledger is unchanged
        """
        logger.info(f"Loading transactions from {file_path}")
        return self.load_file(read_file(file_path), restore_categories)

    def set_category(self, transaction_id, category):
        return self.ledger.set_category(transaction_id, category)

    def get_view(self, filter_category=view.DEFAULT_FILTER, search_term='',
                 sort_key=view.DEFAULT_SORT_KEY, direction=view.DEFAULT_SORT_DIRECTION):
        return view.get_view(self.ledger.all(), filter_category, search_term, sort_key, direction)

    def get_summary(self):
        return view.summarize(self.ledger.to_frame())

    def grand_total(self):
        return view.grand_total(self.get_summary())

    def export_csv(self):
        return export_csv(self.ledger.all())

    def save_export(self, output_path):
        return save_export(self.export_csv(), output_path)

    def subscribe(self, callback):
        return self.ledger.subscribe(callback)
