"""
In-memory ledger of the transactions loaded from one export file.
"""

import dataclasses
import logging
from typing import Callable, List, Optional

import pandas as pd

from cardsplit.models import Category, Transaction

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ['id', 'posted_date', 'reference_number', 'payee', 'address', 'amount', 'category']


class Ledger:
    """Ordered collection of transactions keyed by id.

    Load order is the canonical order. Loading replaces the whole contents at
    once and only the category of a record can change afterwards.
    """

    def __init__(self, transactions=None):
        self._transactions: List[Transaction] = list(transactions or [])
        self._index = {t.id: pos for pos, t in enumerate(self._transactions)}
        self._subscribers: List[Callable[['Ledger'], None]] = []

    def __len__(self):
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)

    def all(self) -> List[Transaction]:
        """Return every transaction in load order."""
        return list(self._transactions)

    def get(self, transaction_id: int) -> Optional[Transaction]:
        pos = self._index.get(transaction_id)
        return None if pos is None else self._transactions[pos]

    def replace(self, transactions) -> None:
        """Swap in a new set of transactions, discarding all prior categories."""
        transactions = list(transactions)
        index = {t.id: pos for pos, t in enumerate(transactions)}
        if len(index) != len(transactions):
            raise ValueError("Transaction ids must be unique within a ledger")
        self._transactions, self._index = transactions, index
        logger.info(f"Ledger loaded with {len(transactions)} transactions")
        self._notify()

    def set_category(self, transaction_id: int, category) -> bool:
        """Set the category of one transaction.

        Args:
            transaction_id (int): Id of the transaction to update
            category (Category or str): New category

        Returns:
            bool: True if the transaction exists, False if nothing was updated

        Raises:
            ValueError: If category is not a valid category
        """
        category = Category.parse(category)
        pos = self._index.get(transaction_id)
        if pos is None:
            logger.warning(f"No transaction with id {transaction_id}, category unchanged")
            return False

        current = self._transactions[pos]
        self._transactions[pos] = dataclasses.replace(current, category=category)
        logger.debug(f"Transaction {transaction_id}: {current.category.value} -> {category.value}")
        self._notify()
        return True

    def subscribe(self, callback: Callable[['Ledger'], None]) -> Callable[[], None]:
        """Call callback with the ledger after every load and category change.

        Returns:
            Callable: Function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        for callback in list(self._subscribers):
            callback(self)

    def to_frame(self) -> pd.DataFrame:
        """Return the ledger as a DataFrame in load order."""
        df = pd.DataFrame(
            [[t.id, t.posted_date, t.reference_number, t.payee, t.address, t.amount, t.category.value]
             for t in self._transactions],
            columns=FRAME_COLUMNS,
        )
        return df.astype({'id': 'int64', 'amount': 'float64'})
