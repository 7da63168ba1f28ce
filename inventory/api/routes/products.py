from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from inventory.api.dependencies import describe_validation_error, get_store, get_today, product_payload
from inventory.domain.Product_Store import ProductStore
from inventory.logic.view.pipeline import SortConfig, derive, list_categories, next_sort_config
from inventory.utilities.constants import ALL_CATEGORIES, SORT_DIRECTIONS, SORT_KEYS

router = APIRouter(prefix="/api")

_SORT_KEY_PATTERN = '^(' + '|'.join(SORT_KEYS) + ')$'
_DIRECTION_PATTERN = '^(' + '|'.join(SORT_DIRECTIONS) + ')$'


@router.get("/products")
def list_products(search: str = Query(default=""),
                  category: str = Query(default=ALL_CATEGORIES),
                  sort: str = Query(default="name", pattern=_SORT_KEY_PATTERN),
                  direction: str = Query(default="asc", pattern=_DIRECTION_PATTERN),
                  store: ProductStore = Depends(get_store),
                  today=Depends(get_today)):
    """Derived product list for the given search text, category and sort."""
    products = derive(store.snapshot(), search_text=search, active_category=category,
                      sort_key=sort, sort_direction=direction)
    return {
        "count": len(products),
        "total": len(store),
        "sort": {"key": sort, "direction": direction},
        "products": [product_payload(p, today) for p in products],
    }


@router.get("/products/{product_id}")
def get_product(product_id: str, store: ProductStore = Depends(get_store), today=Depends(get_today)):
    product = store.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product_payload(product, today)


@router.post("/products", status_code=status.HTTP_201_CREATED)
def create_product(data: dict, store: ProductStore = Depends(get_store), today=Depends(get_today)):
    try:
        product = store.create(data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=describe_validation_error(e))
    return product_payload(product, today)


@router.put("/products/{product_id}")
def edit_product(product_id: str, data: dict, store: ProductStore = Depends(get_store),
                 today=Depends(get_today)):
    try:
        product = store.update(product_id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=describe_validation_error(e))
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product_payload(product, today)


@router.delete("/products/{product_id}")
def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    """Idempotent: deleting an unknown id succeeds with deleted=False."""
    deleted = store.delete(product_id)
    return {"success": True, "deleted": deleted}


@router.get("/categories")
def categories(store: ProductStore = Depends(get_store)):
    return {"categories": list_categories(store.snapshot())}


@router.get("/sort/next")
def sort_next(key: str = Query(..., pattern=_SORT_KEY_PATTERN),
              current_key: Optional[str] = Query(default=None, pattern=_SORT_KEY_PATTERN),
              current_direction: str = Query(default="asc", pattern=_DIRECTION_PATTERN)):
    """Sort config after the user taps a sort button."""
    current = SortConfig(current_key or "name", current_direction)
    nxt = next_sort_config(current, key)
    return {"key": nxt.key, "direction": nxt.direction}
