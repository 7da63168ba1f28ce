from datetime import date

from fastapi import APIRouter, Depends, Response

from inventory.api.dependencies import get_store, get_today
from inventory.domain.Product_Store import ProductStore
from inventory.infra.csv_utils import export_filename, products_to_csv
from inventory.utilities.config import EXPORT_DIR
from inventory.utilities.export_import import DataExporter

router = APIRouter(prefix="/api/export")


def get_exporter() -> DataExporter:
    return DataExporter(EXPORT_DIR)


@router.get("")
def export_csv(store: ProductStore = Depends(get_store), today: date = Depends(get_today)):
    """Download the full catalog as CSV."""
    content = products_to_csv(store.snapshot())
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={
            "Content-Disposition": f"attachment; filename={export_filename(today)}"
        },
    )


@router.post("/share")
def share_csv(store: ProductStore = Depends(get_store), today: date = Depends(get_today),
              exporter: DataExporter = Depends(get_exporter)):
    """Write the CSV into the share directory; failures come back as a notice."""
    outcome = exporter.export_csv(store.snapshot(), today)
    return {
        "success": outcome.success,
        "path": str(outcome.path) if outcome.path else None,
        "notice": outcome.notice,
    }
