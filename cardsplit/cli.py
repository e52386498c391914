"""
Command line shell for categorizing a credit card export.

Loads one CSV, applies category assignments by transaction id, prints the
summary and the requested view, and writes the categorized export.
"""

import argparse
import logging
import pathlib

from cardsplit.exporter import DEFAULT_EXPORT_FILENAME
from cardsplit.models import Category
from cardsplit.session import Session
from cardsplit.utils import ensure_directory, parse_id_list, setup_logging
from cardsplit.view import FILTER_ALL, format_summary, parse_sort_option, view_frame

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(description='Categorize credit card transactions for Splitwise')
    parser.add_argument('--input', type=str, required=True,
                        help='Path to the credit card CSV export')
    parser.add_argument('--restore-categories', action='store_true',
                        help='Keep the Category column of a previously exported file')
    parser.add_argument('--splitwise', type=str, default='',
                        help='Comma-separated ids to mark as splitwise')
    parser.add_argument('--personal', type=str, default='',
                        help='Comma-separated ids to mark as personal')
    parser.add_argument('--uncategorized', type=str, default='',
                        help='Comma-separated ids to reset to uncategorized')
    parser.add_argument('--filter', type=str, default=FILTER_ALL,
                        choices=[FILTER_ALL] + [c.value for c in Category],
                        help='Only show transactions in this category')
    parser.add_argument('--search', type=str, default='',
                        help='Only show transactions whose payee or address contains this text')
    parser.add_argument('--sort', type=str, default='date-desc',
                        help='Sort option, e.g. date-desc, amount-asc, payee-asc')
    parser.add_argument('--output', type=str, default=None,
                        help='Export file or directory (default: DATA_DIR/output)')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--log-level', type=str, default='info',
                        help='Log level when --debug is not set')
    return parser


def run(args):
    """Run one categorization pass.

    Returns:
        pathlib.Path: Path of the written export
    """
    session = Session()
    session.load_path(args.input, restore_categories=args.restore_categories)

    assignments = [
        (Category.SPLITWISE, args.splitwise),
        (Category.PERSONAL, args.personal),
        (Category.UNCATEGORIZED, args.uncategorized),
    ]
    for category, ids in assignments:
        for transaction_id in parse_id_list(ids):
            session.set_category(transaction_id, category)

    sort_key, direction = parse_sort_option(args.sort)
    rows = session.get_view(args.filter, args.search, sort_key, direction)

    print(format_summary(session.get_summary()))
    print()
    if rows:
        print(view_frame(rows).to_string(index=False))
    else:
        print("No transactions match your current filters.")

    output = pathlib.Path(args.output) if args.output else ensure_directory('output') / DEFAULT_EXPORT_FILENAME
    return session.save_export(output)


def main(argv=None):
    """Main execution function."""
    args = build_parser().parse_args(argv)
    setup_logging(debug=args.debug, log_level=args.log_level)
    try:
        logger.info("Starting categorization")
        output = run(args)
        logger.info(f"Categorized transactions written to {output}")
        return output
    except Exception as e:
        logger.error(f"Error during categorization: {str(e)}")
        raise


if __name__ == '__main__':
    main()
