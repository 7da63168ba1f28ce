from pathlib import Path

from inventory.utilities.config import DATA_DIR as _CONFIG_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIG_DATA_DIR).resolve()
PRODUCTS_FILE = DATA_DIR / 'products.json'

__all__ = ['DATA_DIR', 'PRODUCTS_FILE']
