# apps/backend/services/shopify_client.py

from __future__ import annotations

import requests
from typing import Dict, Any, Optional

from apps.backend.services.settings import settings


class ShopifyClientError(Exception):
    pass


class GraphqlQueryError(ShopifyClientError):
    """
    Raised when the Admin API answers a GraphQL request with top-level `errors`.
    `response` holds the raw response body.
    """

    def __init__(self, message: str, response: Dict[str, Any]):
        super().__init__(message)
        self.response = response


class ShopifyClient:
    """
    Shopify Admin API client (GraphQL + REST).

    Design goals:
    - Simple, explicit HTTP usage (no SDK)
    - One request per call, no retries
    - Shopify-version pinned
    """

    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        *,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        if not shop_domain or not access_token:
            raise ValueError("ShopifyClient requires shop_domain and access_token")

        self.shop_domain = shop_domain.lower().strip()
        self.access_token = access_token.strip()
        self.api_version = api_version or settings.SHOPIFY_API_VERSION
        self.timeout = timeout or settings.SHOPIFY_TIMEOUT_SECONDS
        self.base_url = f"https://{self.shop_domain}/admin/api/{self.api_version}"

        self.headers = {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    # ---------------------------------------------------------
    # Low-level request handler
    # ---------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        response = requests.request(
            method=method,
            url=f"{self.base_url}{path}",
            headers=self.headers,
            params=params,
            json=json,
            timeout=self.timeout,
        )
        response.raise_for_status()

        if not response.content:
            return {}
        return response.json()

    # ---------------------------------------------------------
    # GraphQL
    # ---------------------------------------------------------
    def graphql(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Runs a GraphQL Admin API query and returns its `data` payload.
        """
        body = self._request("POST", "/graphql.json", json={"query": query, "variables": variables or {}})

        if body.get("errors"):
            messages = [str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in body["errors"]]
            raise GraphqlQueryError("GraphQL query returned errors: " + "; ".join(messages), response=body)

        data = body.get("data")
        if data is None:
            raise GraphqlQueryError("GraphQL response has no data", response=body)
        return data

    # ---------------------------------------------------------
    # REST
    # ---------------------------------------------------------
    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self._request("GET", path, params=params)
