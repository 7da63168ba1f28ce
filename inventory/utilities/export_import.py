"""
Export functionality for the product catalog.

The "share" target is a directory (configured through EXPORT_DIR). When no
target is configured sharing is unavailable; failures are reported back as a
user-facing notice instead of an exception.
"""
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, Optional
import logging

from inventory.domain.Product import Product
from inventory.infra.csv_utils import export_filename, products_to_csv
from inventory.utilities.constants import EXPORT_FAILED_NOTICE, SHARE_UNAVAILABLE_NOTICE

logger = logging.getLogger(__name__)


@dataclass
class ExportOutcome:
    """Result of an export attempt, ready to be shown to the user."""
    success: bool
    path: Optional[Path] = None
    notice: Optional[str] = None


class DataExporter:
    """Write product exports into the share directory."""

    def __init__(self, export_dir: Optional[Path]):
        self.export_dir = Path(export_dir) if export_dir is not None else None

    def is_available(self) -> bool:
        return self.export_dir is not None

    def export_csv(self, products: Iterable[Product], today: Optional[date] = None) -> ExportOutcome:
        """Export the full (unfiltered, unsorted) collection as UTF-8 CSV."""
        if not self.is_available():
            logger.warning("CSV export requested but no export directory is configured")
            return ExportOutcome(success=False, notice=SHARE_UNAVAILABLE_NOTICE)

        output_path = self.export_dir / export_filename(today)
        try:
            content = products_to_csv(products)
            self.export_dir.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except (OSError, ArithmeticError, ValueError) as e:
            logger.error(f"CSV export failed: {e}")
            return ExportOutcome(success=False, notice=EXPORT_FAILED_NOTICE)

        logger.info(f"Exported products to CSV: {output_path}")
        return ExportOutcome(success=True, path=output_path)


# CLI interface
if __name__ == "__main__":
    import argparse
    from inventory.infra.Product_Repository import JsonProductRepository
    from inventory.infra.paths import PRODUCTS_FILE
    from inventory.utilities.config import STORAGE_KEY

    parser = argparse.ArgumentParser(description='Export the product catalog as CSV')
    parser.add_argument('--dir', required=True, help='Output directory')
    args = parser.parse_args()

    stored = JsonProductRepository(PRODUCTS_FILE, STORAGE_KEY).load() or []
    exporter = DataExporter(Path(args.dir))
    outcome = exporter.export_csv(stored)
    if outcome.success:
        print(f"✓ Exported to: {outcome.path}")
    else:
        print(f"✗ {outcome.notice}")
