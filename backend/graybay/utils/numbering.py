"""
Human-facing document numbers for quotes and invoices.
"""

import random
import time
from datetime import datetime

from graybay.utils.dates import utcnow


def generate_quote_number(attempt: int = 0) -> str:
    """
    Q- followed by six digits.
    The first attempt uses the millisecond clock; retries draw random digits.
    """
    if attempt == 0:
        digits = int(time.time() * 1000) % 1_000_000
    else:
        digits = random.randrange(1_000_000)
    return f"Q-{digits:06d}"


def generate_invoice_number(now: datetime = None) -> str:
    """INV-YYYYMM-NNN with a random three digit suffix."""
    now = now or utcnow()
    return f"INV-{now.year}{now.month:02d}-{random.randrange(1000):03d}"
