"""
report.py - Excel Report Writer
================================
Writes the accumulated output rows to a single-sheet .xlsx file.
"""

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .rows import OUTPUT_COLUMNS


logger = logging.getLogger(__name__)

SHEET_NAME = "Matched Charges"


def write_report(rows: List[Dict[str, str]], output_path: Path) -> Path | None:
    """
    Write the report rows to an Excel file.

    Args:
        rows: Output rows in the order they were collected
        output_path: Where to write the .xlsx file (parent dirs are created)

    Returns:
        The path written, or None when there were no rows (no file is created)
    """
    if not rows:
        logger.warning("No rows to write")
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    df = pd.DataFrame(rows, columns=OUTPUT_COLUMNS)
    df.to_excel(output_path, sheet_name=SHEET_NAME, index=False, engine="openpyxl")

    logger.info(f"Report written to {output_path.resolve()} ({len(rows)} rows)")
    return output_path
