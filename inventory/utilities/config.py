"""Configuration management for the Inventory application."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, '').strip()
    return int(raw) if raw else None


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Persistence
STORAGE_KEY: Final[str] = os.getenv('STORAGE_KEY', '@inventory_app:products')

# Starter catalog generated when storage is empty
MOCK_DATA_COUNT: Final[int] = int(os.getenv('MOCK_DATA_COUNT', '100'))
MOCK_DATA_SEED: Final[Optional[int]] = _optional_int('MOCK_DATA_SEED')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('DATA_DIR', str(BASE_DIR / 'data')))
# Directory used as the share target for CSV exports; unset means sharing is unavailable
EXPORT_DIR: Final[Optional[Path]] = Path(os.environ['EXPORT_DIR']) if os.getenv('EXPORT_DIR') else None
