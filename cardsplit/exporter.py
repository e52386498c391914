"""
CSV export of a categorized ledger.

The export always covers the full ledger in load order. Payee and address are
wrapped in double quotes without escaping, the same dialect the parser reads.
"""

import logging
import pathlib

logger = logging.getLogger(__name__)

EXPORT_HEADER = 'Posted Date,Reference Number,Payee,Address,Amount,Category'
DEFAULT_EXPORT_FILENAME = 'categorized_transactions.csv'


def format_export_amount(amount):
    """Format an amount the way it is written to exports ('-15.67', '0', '12')."""
    amount = float(amount)
    if amount.is_integer():
        return str(int(amount))
    return repr(amount)


def export_row(transaction):
    return (
        f'{transaction.posted_date},{transaction.reference_number},'
        f'"{transaction.payee}","{transaction.address}",'
        f'{format_export_amount(transaction.amount)},{transaction.category.value}'
    )


def export_csv(transactions):
    """Serialize transactions to CSV text.

    Args:
        transactions (iterable of Transaction): Ledger contents in load order

    Returns:
        str: Header line followed by one line per transaction, no trailing newline
    """
    lines = [EXPORT_HEADER]
    lines.extend(export_row(t) for t in transactions)
    logger.debug(f"Exported {len(lines) - 1} transactions")
    return '\n'.join(lines)


def save_export(csv_text, output_path):
    """Write export text to a file.

    Args:
        csv_text (str): Text from export_csv
        output_path (str or pathlib.Path): Output file, or a directory to
            write categorized_transactions.csv into

    Returns:
        pathlib.Path: Path of the written file
    """
    output_path = pathlib.Path(output_path)
    # If path is a directory, append the export filename
    if output_path.is_dir() or not output_path.suffix:
        output_path = output_path / DEFAULT_EXPORT_FILENAME

    output_path.parent.mkdir(parents=True, exist_ok=True)
    logger.info(f"Writing categorized transactions to {output_path}")
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        f.write(csv_text)
    return output_path
