from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import rates, quote

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("swiftship")

app = FastAPI(
    title=f"{settings.APP_NAME} Rate Calculator",
    description=settings.APP_TAGLINE,
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(rates.router, prefix="/api")
app.include_router(quote.router, prefix="/api")

logger.info("%s rate calculator ready (default presentation: %s)",
            settings.APP_NAME, settings.DEFAULT_PRESENTATION)


@app.get("/health")
def health():
    return {"status": "ok", "app": "swiftship-rate-calculator"}
