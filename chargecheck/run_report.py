"""
run_report.py - Main Application Entry Point
=============================================
This is the main script that builds the matched charges report.

What it does:
-------------
1. Loads configuration from environment variables (.env file)
2. Reads company numbers from the input file (column B, from row 3)
3. For each company, fetches its charges from Companies House
4. For companies with charges, fetches the profile and first director
5. Writes one row per charge to an Excel report

Usage:
------
    python -m chargecheck.run_report companies.xlsx
    python -m chargecheck.run_report companies.csv --output report.xlsx
    python -m chargecheck.run_report companies.xlsx --filter lender_match
    python -m chargecheck.run_report companies.xlsx --dry-run

Command Line Options:
---------------------
    input_file      : Path to input Excel (.xlsx, .xls) or CSV file (required)
    --output        : Report path (default: ~/Downloads/matched_charges.xlsx)
    --filter        : "all" charges or only "lender_match" charges
    --lenders-file  : Lender roster for --filter lender_match, one name per line
    --dry-run       : Load and validate input without making API calls
    --debug         : Enable debug logging for troubleshooting
"""

import sys
import logging
import time
import argparse
from pathlib import Path
from typing import Dict, List

from .config import CHARGE_FILTER_MODES, load_lender_names, load_settings, validate_filter_mode
from .http_client import HttpClient
from .loader import load_company_numbers
from .registry import RegistryClient
from .report import write_report
from .rows import collect_company_rows
from .selector import select_charge_filter


# =============================================================================
# LOGGING SETUP
# =============================================================================

LOG_LEVEL = logging.INFO

logging.basicConfig(
    level=LOG_LEVEL,
    format='%(asctime)s [%(levelname)s] %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger(__name__)

# How often (in companies) to log progress
PROGRESS_EVERY = 10


# =============================================================================
# CORE LOOP
# =============================================================================

def collect_rows(registry: RegistryClient, company_numbers: List[str]) -> List[Dict[str, str]]:
    """
    Check every company in order and collect the report rows.

    Companies are checked one at a time. A failed lookup only empties that
    lookup's result; it never stops the loop.
    """
    rows: List[Dict[str, str]] = []
    companies_with_charges = 0
    start_time = time.time()

    for i, number in enumerate(company_numbers):
        if i > 0 and i % PROGRESS_EVERY == 0:
            elapsed = time.time() - start_time
            rate = i / elapsed if elapsed > 0 else 0
            remaining = len(company_numbers) - i
            eta = remaining / rate if rate > 0 else 0
            logger.info(
                f"Progress: {i}/{len(company_numbers)} "
                f"({i/len(company_numbers)*100:.1f}%) "
                f"| ETA: {eta/60:.1f}m"
            )

        logger.info(f"Checking company: {number}")
        company_rows = collect_company_rows(registry, number)
        if company_rows:
            companies_with_charges += 1
            rows.extend(company_rows)

    logger.info("-" * 50)
    logger.info(f"Processing complete in {time.time() - start_time:.1f} seconds")
    logger.info(f"Companies checked: {len(company_numbers)}")
    logger.info(f"Companies with charges: {companies_with_charges}")
    logger.info(f"Charges found: {len(rows)}")
    logger.info("-" * 50)
    return rows


# =============================================================================
# COMMAND LINE ARGUMENT PARSING
# =============================================================================

def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Returns:
        Namespace with input_file, output, filter, lenders_file, dry_run, debug
    """
    parser = argparse.ArgumentParser(
        description='Report Companies House charges for a list of companies',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m chargecheck.run_report companies.xlsx
  python -m chargecheck.run_report companies.csv --output report.xlsx
  python -m chargecheck.run_report companies.xlsx --filter lender_match --lenders-file lenders.txt
        """
    )

    parser.add_argument(
        'input_file',
        help='Path to input Excel (.xlsx, .xls) or CSV file'
    )

    parser.add_argument(
        '--output',
        default=None,
        help='Report path (default: CH_OUTPUT_PATH or ~/Downloads/matched_charges.xlsx)'
    )

    parser.add_argument(
        '--filter',
        choices=CHARGE_FILTER_MODES,
        default=None,
        help='Which charges to report (default: CH_CHARGE_FILTER or "all")'
    )

    parser.add_argument(
        '--lenders-file',
        default=None,
        help='Lender names for --filter lender_match, one per line'
    )

    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Load and validate input without making API calls'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


# =============================================================================
# MAIN EXECUTION FUNCTION
# =============================================================================

def run_report(argv=None):
    """
    Main execution logic for the charges report.

    Exits with status 1 on configuration errors and on an unreadable,
    unsupported or empty input file. Finding no charges is not an error.
    """
    args = parse_arguments(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    client = None

    try:
        # ---------------------------------------------------------------------
        # STEP 1: Configuration (command line wins over .env)
        # ---------------------------------------------------------------------
        settings = load_settings()
        if args.output:
            settings.output_path = Path(args.output).expanduser()
        if args.filter:
            settings.charge_filter_mode = validate_filter_mode(args.filter)
        if args.lenders_file:
            settings.lender_names = load_lender_names(args.lenders_file)

        logger.info(f"Base URL: {settings.base_url}")
        logger.info(f"Charge filter: {settings.charge_filter_mode}")

        # ---------------------------------------------------------------------
        # STEP 2: Company numbers from the input file
        # ---------------------------------------------------------------------
        logger.info(f"Loading company numbers from {args.input_file}...")
        company_numbers = load_company_numbers(args.input_file)
        if not company_numbers:
            logger.error("No company numbers found in file.")
            sys.exit(1)

        if len(company_numbers) > settings.max_companies:
            logger.warning(
                f"File has {len(company_numbers)} company numbers, "
                f"only the first {settings.max_companies} will be checked"
            )
        company_numbers = company_numbers[:settings.max_companies]
        logger.info(f"Loaded {len(company_numbers)} company numbers")

        if args.dry_run:
            logger.info("DRY RUN MODE - No API calls will be made")
            logger.info(f"First company number: {company_numbers[0]}")
            logger.info("Dry run complete. Use without --dry-run to process.")
            return

        # ---------------------------------------------------------------------
        # STEP 3: Look up every company
        # ---------------------------------------------------------------------
        client = HttpClient(settings)
        charge_filter = select_charge_filter(settings.charge_filter_mode, settings.lender_names)
        registry = RegistryClient(client, charge_filter)

        rows = collect_rows(registry, company_numbers)

        # ---------------------------------------------------------------------
        # STEP 4: Write the report
        # ---------------------------------------------------------------------
        if rows:
            output_path = write_report(rows, settings.output_path)
            logger.info(f"Excel file created: {output_path}")
        else:
            logger.info("No matching charges found, so no Excel file was created.")

    except KeyboardInterrupt:
        logger.warning("Interrupted by user. No report was written.")
        sys.exit(130)

    except (RuntimeError, OSError, ValueError) as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)

    finally:
        if client:
            client.close()


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    if __package__ is None:
        print(
            "ERROR: This script must be run as a module.\n"
            "Usage: python -m chargecheck.run_report <input_file>"
        )
        sys.exit(1)

    run_report()
