"""Configuration management for the Dish Bank planner."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or not value.strip():
        return None
    return float(value)


# Remote dish API (spreadsheet-backed web app)
DISHES_API_URL: Final[str] = os.getenv(
    'DISHES_API_URL',
    'https://script.google.com/macros/s/AKfycbzWpctMluC3K1Xv4LhUYD-8nit4D5Ch7NInDZ7lLNeU5U9bH_bEHRcIxgWuDBkBTzUa/exec'
)
# Seconds; unset means wait as long as the source takes
DISHES_API_TIMEOUT: Final[Optional[float]] = _optional_float(os.getenv('DISHES_API_TIMEOUT'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
