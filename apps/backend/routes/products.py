import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from apps.backend.services.product_creator import create_products
from apps.backend.services.shopify_client import ShopifyClient
from apps.backend.services.shopify_session import get_shopify_client

log = logging.getLogger("paymentcustom.products")

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/count")
def products_count(client: ShopifyClient = Depends(get_shopify_client)):
    payload = client.get("/products/count.json")
    return {"count": int(payload.get("count") or 0)}


@router.get("/create")
def products_create(client: ShopifyClient = Depends(get_shopify_client)):
    status = 200
    err = None

    try:
        create_products(client)
    except Exception as e:
        log.error("Failed to process products/create: %s", e)
        status = 500
        err = str(e)

    return JSONResponse(status_code=status, content={"success": status == 200, "error": err})
