import os

from dotenv import load_dotenv

load_dotenv()


def is_enabled(flag: str, default: bool = False) -> bool:
    return (os.getenv(flag, str(default)) or "").lower() == "true"


def _csv(name: str) -> list[str]:
    return [v.strip() for v in (os.getenv(name) or "").split(",") if v.strip()]


class Settings:
    APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    REQUEST_LOGGING = is_enabled("REQUEST_LOGGING", True)

    PORT = int(os.getenv("BACKEND_PORT") or os.getenv("PORT") or "3000")
    CORS_ALLOW_ORIGINS = _csv("CORS_ALLOW_ORIGINS")

    # Shopify Admin API
    SHOPIFY_API_VERSION = os.getenv("SHOPIFY_API_VERSION", "2024-04")
    SHOPIFY_TIMEOUT_SECONDS = float(os.getenv("SHOPIFY_TIMEOUT_SECONDS", "20"))

    # Offline token fallback for a single dev store (custom app install)
    SHOPIFY_SHOP_DOMAIN = os.getenv("SHOPIFY_SHOP_DOMAIN", "")
    SHOPIFY_ACCESS_TOKEN = os.getenv("SHOPIFY_ACCESS_TOKEN", "")


settings = Settings()
