"""
CSV parsing for credit card exports.

The parser is deliberately simple: lines are split on newlines and fields on
commas. Quoted fields containing commas are NOT supported, the quote
characters are just stripped from each field. The exporter writes the same
dialect so exported files load back unchanged.
"""

import logging
import os
from typing import List

from cardsplit.exceptions import ReadError

logger = logging.getLogger(__name__)

# Tried in order until one decodes the whole file
ENCODINGS = ['utf-8', 'utf-8-sig', 'cp1252']


def parse_csv_text(text):
    """Split CSV text into rows of raw field values.

    Args:
        text (str): Full file contents

    Returns:
        list[list[str]]: One list of trimmed, unquoted values per data line

    Notes:
        - The first line is the header and is skipped without validation
        - Lines that are blank after trimming are skipped
        - No column count or type validation happens here
    """
    lines = text.split('\n')
    if lines:
        logger.debug(f"Skipping header: {lines[0].strip()!r}")

    rows = []
    for line in lines[1:]:
        if not line.strip():
            continue
        rows.append([value.strip().replace('"', '') for value in line.split(',')])

    logger.debug(f"Parsed {len(rows)} data rows")
    return rows


def decode_bytes(raw: bytes) -> str:
    """Decode raw file bytes trying each supported encoding.

    Raises:
        ReadError: If the bytes are not text in any supported encoding
    """
    if isinstance(raw, str):
        return raw
    for encoding in ENCODINGS:
        try:
            text = raw.decode(encoding)
            logger.debug(f"Decoded input with encoding: {encoding}")
            return text
        except UnicodeDecodeError:
            continue
    raise ReadError(
        "Could not read file with any supported encoding",
        details={'encodings': ENCODINGS, 'size': len(raw)},
    )


def read_file(file_path) -> bytes:
    """Read the raw bytes of an export file.

    Raises:
        ReadError: If the path is missing, is a directory or cannot be read
    """
    if not os.path.exists(file_path):
        raise ReadError(f"File not found: {file_path}", details={'path': str(file_path)})
    if os.path.isdir(file_path):
        raise ReadError(f"Path is a directory: {file_path}", details={'path': str(file_path)})

    logger.debug(f"Reading file: {file_path}")
    try:
        with open(file_path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise ReadError(f"Error reading {file_path}: {str(e)}", details={'path': str(file_path)}) from e


def parse_bytes(raw: bytes) -> List[List[str]]:
    """Decode and parse raw file bytes."""
    return parse_csv_text(decode_bytes(raw))
