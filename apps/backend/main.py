# apps/backend/main.py
import logging
import time

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from apps.backend.routes.health import router as health_router
from apps.backend.routes.payment_customization import router as payment_customization_router
from apps.backend.routes.products import router as products_router
from apps.backend.services.admin.logger import log_request_response
from apps.backend.services.settings import settings

log = logging.getLogger("paymentcustom.main")

app = FastAPI(
    title="Payment Customization",
    version=settings.APP_VERSION,
    description="Admin backend for the move-payment-method checkout function",
)

# -------------------------------------------------------------------
# CORS (management UI origins only)
# -------------------------------------------------------------------
if settings.CORS_ALLOW_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

# -------------------------------------------------------------------
# Request logging
# -------------------------------------------------------------------
if settings.REQUEST_LOGGING:
    @app.middleware("http")
    async def request_logging(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        await log_request_response(request, response, start_time)
        return response

# -------------------------------------------------------------------
# Routers
# -------------------------------------------------------------------
app.include_router(health_router)
app.include_router(payment_customization_router)
app.include_router(products_router)

# -------------------------------------------------------------------
# Root
# -------------------------------------------------------------------
@app.get("/")
async def root():
    return {
        "status": "Payment Customization Online",
        "routes": [
            "/health",
            "/api/paymentCustomization/create",
            "/api/products/count",
            "/api/products/create",
        ],
    }

# -------------------------------------------------------------------
# Startup
# -------------------------------------------------------------------
@app.on_event("startup")
async def startup_event():
    log.info("Payment customization backend starting (Shopify API %s)", settings.SHOPIFY_API_VERSION)


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
