"""
Central configuration for the settlement engine.

Shared constants live here so the allocator, the evaluators and the
settlement code agree on handicap bounds, payouts and currency precision.
"""

import os
from decimal import ROUND_HALF_EVEN, Decimal

from dotenv import load_dotenv
load_dotenv()

# --- Handicap allocation ---
MIN_HANDICAP = 0
MAX_HANDICAP = 54
MIN_STROKE_INDEX = 1
MAX_STROKE_INDEX = 18
HOLES_PER_ALLOCATION_CYCLE = 18

# --- Side bets ---
OYESES_MULTIPLIER = 1
SKINS_MULTIPLIER = 2  # flat double stake, no carry-over on ties

# --- Money ---
# Every settlement step is quantized to the smallest currency unit.
CURRENCY_QUANTUM = Decimal(os.environ.get("BETTING_CURRENCY_QUANTUM", "0.01"))
ROUNDING_MODE = ROUND_HALF_EVEN

# --- Logging ---
LOG_LEVEL = os.environ.get("BETTING_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
