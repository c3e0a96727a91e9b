# apps/backend/services/shopify_session.py

from __future__ import annotations

from dataclasses import dataclass

from fastapi import Depends, HTTPException, Request

from apps.backend.services.settings import settings
from apps.backend.services.shopify_client import ShopifyClient

SHOP_DOMAIN_HEADER = "X-Shopify-Shop-Domain"
ACCESS_TOKEN_HEADER = "X-Shopify-Access-Token"


@dataclass(frozen=True)
class ShopifySession:
    shop_domain: str          # "example.myshopify.com"
    access_token: str


def get_shopify_session(request: Request) -> ShopifySession:
    """
    Resolves the authenticated shop for an /api request.
    Headers win; configured offline credentials are the fallback.
    """
    shop = (request.headers.get(SHOP_DOMAIN_HEADER) or settings.SHOPIFY_SHOP_DOMAIN).lower().strip()
    token = (request.headers.get(ACCESS_TOKEN_HEADER) or settings.SHOPIFY_ACCESS_TOKEN).strip()

    if not shop or not token:
        raise HTTPException(status_code=401, detail="Missing Shopify session")

    return ShopifySession(shop_domain=shop, access_token=token)


def get_shopify_client(session: ShopifySession = Depends(get_shopify_session)) -> ShopifyClient:
    return ShopifyClient(session.shop_domain, session.access_token)
