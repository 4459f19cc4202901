import time

from fastapi import FastAPI, Request
from loguru import logger


async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        }
    )
    return response


def add_middlewares(app: FastAPI):
    app.middleware("http")(log_requests)
