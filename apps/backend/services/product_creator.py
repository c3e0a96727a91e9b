# apps/backend/services/product_creator.py

from __future__ import annotations

import json
import random
from typing import List

from apps.backend.services.shopify_client import GraphqlQueryError, ShopifyClient

DEFAULT_PRODUCTS_COUNT = 5

CREATE_PRODUCTS_MUTATION = """
mutation populateProduct($input: ProductInput!) {
  productCreate(input: $input) {
    product {
      id
    }
  }
}
"""

ADJECTIVES = [
    "autumn", "hidden", "bitter", "misty", "silent", "empty", "dry", "dark",
    "summer", "icy", "delicate", "quiet", "white", "cool", "spring", "winter",
    "patient", "twilight", "dawn", "crimson", "wispy", "weathered", "blue",
    "billowing", "broken", "cold", "damp", "falling", "frosty", "green", "long",
]

NOUNS = [
    "waterfall", "river", "breeze", "moon", "rain", "wind", "sea", "morning",
    "snow", "lake", "sunset", "pine", "shadow", "leaf", "dawn", "glitter",
    "forest", "hill", "cloud", "meadow", "sun", "glade", "bird", "brook",
    "butterfly", "bush", "dew", "dust", "field", "fire", "flower",
]


def random_title() -> str:
    return f"{random.choice(ADJECTIVES)} {random.choice(NOUNS)}"


def create_products(client: ShopifyClient, count: int = DEFAULT_PRODUCTS_COUNT) -> List[str]:
    """
    Seeds the store with `count` sample products. Returns the created product ids.
    """
    created: List[str] = []
    try:
        for _ in range(count):
            data = client.graphql(CREATE_PRODUCTS_MUTATION, {"input": {"title": random_title()}})
            product = (data.get("productCreate") or {}).get("product") or {}
            if product.get("id"):
                created.append(product["id"])
    except GraphqlQueryError as e:
        raise RuntimeError(f"{e}\n{json.dumps(e.response, indent=2)}") from e
    return created
