from fastapi import FastAPI

from storefront.api.products import router as products_router
from storefront.core.config import settings
from storefront.core.log_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Storefront Glue", version="1.0.0")

app.include_router(products_router, tags=["products"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
