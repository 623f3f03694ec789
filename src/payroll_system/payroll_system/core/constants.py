"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MAX_BASIC_SALARY = 10_000_000
MAX_ALLOWANCES = 5_000_000
MAX_LOAN_PRINCIPAL = 50_000_000
AMOUNT_DECIMAL_PLACES = 2
