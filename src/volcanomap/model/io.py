"""
Input Manager (CSV)
Reads the volcano table from disk and turns it into validated records.
"""
import csv
import logging
from typing import Optional, Sequence

from volcanomap.model.records import COLUMNS, VolcanoRecord, validate_rows

# Get module logger
logger = logging.getLogger(__name__)


def sniff_delimiter(header_line: str) -> str:
    """Semicolon-separated exports are common in European locales."""
    return ';' if ';' in header_line else ','


def missing_columns(fieldnames: Optional[Sequence[str]]) -> list[str]:
    """Expected columns absent from the header, in table order."""
    present = {name.strip() for name in fieldnames or ()}
    return [col for col in COLUMNS if col not in present]


def load_volcano_csv(filepath: str) -> list[VolcanoRecord]:
    """
    Load the volcano table from a CSV file with a header row.

    Rows with unparsable coordinates/elevation or an empty type are dropped.
    A header without some of the expected columns is only warned about; the
    affected fields read as empty.

    Raises:
        IOError: If the file cannot be opened or decoded.
    """
    logger.info(f"Loading volcano table from: {filepath}")
    try:
        with open(filepath, mode='r', encoding='utf-8-sig', newline='') as f:
            delimiter = sniff_delimiter(f.readline())
            f.seek(0)
            reader = csv.DictReader(f, delimiter=delimiter)
            rows = list(reader)
            fieldnames = reader.fieldnames
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error(f"CSV import failed: {e}")
        raise IOError(f"Failed to read CSV: {e}") from e

    missing = missing_columns(fieldnames)
    if missing:
        logger.warning(f"Missing columns in {filepath}: {', '.join(missing)}")

    records = validate_rows(rows)
    logger.info(f"Loaded {len(records)} volcanoes ({len(rows) - len(records)} rows skipped).")
    return records
