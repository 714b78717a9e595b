"""Library App - CSV-backed catalog manager

This package contains:
- Book record type (book.py)
- CSV persistence layer (database.py)
- Catalog operations (library.py)
- Interactive menu CLI (main.py)
- Input validation and output helpers (validators.py, ui_helpers.py)
"""

__version__ = "0.6.0"
