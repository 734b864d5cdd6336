import os
from dotenv import load_dotenv
from typing import Optional

# Load environment variables from the config.env file (optional)
load_dotenv('config.env')


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# --- 1. INPUT CONFIGURATION ---
CART_INPUT_FILE: Optional[str] = os.getenv("SHOP_CART_INPUT_FILE") or None

# --- 2. SEARCH REPORTING ---
VERBOSE = _env_flag("SHOP_CART_VERBOSE")
PROGRESS_INTERVAL = int(os.getenv("SHOP_CART_PROGRESS_EVERY", "100000"))

# --- 3. RESULT CONSTANTS ---
NO_FEASIBLE_COST = -1  # Reserved cost: no combination fits the budget

# --- 4. EXIT CODES ---
EXIT_OK = 0
EXIT_USAGE_ERROR = 1
EXIT_PARSE_ERROR = 2
