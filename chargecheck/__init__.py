"""
chargecheck - Companies House Charges Report
=============================================

A Python package that reports the registered charges (security interests)
of a list of UK companies, using the Companies House REST API.

Modules:
--------
- config.py      : Configuration management (loads settings from .env)
- loader.py      : Input file loading (company numbers from Excel/CSV column B)
- http_client.py : HTTP client for the Companies House API
- selector.py    : Charge filter strategies ("all" / "lender_match")
- registry.py    : Charges, profile and officers lookups
- rows.py        : Builds one report row per charge
- report.py      : Excel report writer
- run_report.py  : Main entry point and orchestration

Usage:
------
    python -m chargecheck.run_report companies.xlsx
    python -m chargecheck.run_report companies.csv --filter lender_match
    python -m chargecheck.run_report companies.xlsx --dry-run

Workflow:
---------
1. Load configuration from .env file (COMPANIES_HOUSE_API_KEY is required)
2. Read company numbers from column B, starting at row 3, up to the first blank
3. Check at most 500 companies, one at a time, in file order
4. For companies with charges, fetch the profile and first director
5. Write the rows to ~/Downloads/matched_charges.xlsx

Output:
-------
One row per charge, sheet "Matched Charges", with columns:
Company Name, Company Number, Company Type, Incorporation Date,
Registered Office Address, Director Name, Dormant Latest Accounts?,
Accounts Overdue?, Confirmation Statement Overdue?, Charge Holders
"""
