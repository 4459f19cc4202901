from fastapi import FastAPI

from app.api import api_router
from app.config import get_settings
from app.exceptions import add_exception_handlers
from app.logging_config import setup_logging
from app.middleware import add_middlewares

settings = get_settings()

setup_logging(settings.log_level)

app = FastAPI(title=settings.app_title)

if settings.log_requests:
    add_middlewares(app)

add_exception_handlers(app)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
