# shop/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from .api.catalog import router as catalog_router
from .api.purchase import router as purchase_router
from .config import get_settings

logger = logging.getLogger("uvicorn.error")  # shows up in the uvicorn terminal


def configure_logging(level: str) -> logging.Logger:
    """Level + a stream handler for the ``shop`` loggers (uvicorn only wires its own)."""
    shop_logger = logging.getLogger("shop")
    shop_logger.setLevel(level)
    if not shop_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:     %(name)s - %(message)s"))
        shop_logger.addHandler(handler)
    return shop_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- startup ---
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("shop API ready (shipping fee %s)", settings.shipping_fee)
    yield
    # --- shutdown (nothing to release, state lives in memory) ---


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Shop checkout API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(catalog_router)
    app.include_router(purchase_router)

    # CORS (so the front end dev server can call us)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health():
        return {"status": "ok", "shipping_fee": float(get_settings().shipping_fee)}

    @app.get("/")
    def root():
        return {"status": "ok"}

    return app


app = create_app()


def serve() -> None:
    import os
    import uvicorn
    uvicorn.run("shop.main:app", host=os.getenv("HOST", "127.0.0.1"), port=int(os.getenv("PORT", 8000)))


if __name__ == "__main__":
    serve()
