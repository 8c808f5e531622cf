import os
from pathlib import Path
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BASE_DIR / "output")))

# Application settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# EPF (KWSP) rates
EPF_EMPLOYEE_RATE = Decimal('0.11')
EPF_EMPLOYER_RATE = Decimal('0.13')
EPF_EMPLOYER_REDUCED_RATE = Decimal('0.12')  # gross above EPF_EMPLOYER_RATE_THRESHOLD
EPF_EMPLOYER_RATE_THRESHOLD = Decimal('5000')

# SOCSO (PERKESO) and EIS (SIP) wage ceilings
SOCSO_WAGE_CEILING = Decimal('5000')
EIS_WAGE_CEILING = Decimal('4000')

DEFAULT_DAYS_IN_MONTH = 30

CURRENCY_SYMBOL = "RM"
