from typing import List

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse

from app.schemas.simulation import Violation, ViolationResponse

DEFAULT_ERROR_MESSAGE = "Response Error!"
MALFORMED_PAYLOAD_MESSAGE = "Malformed simulation payload"


def _build_error_content(status_code: int, message: str = DEFAULT_ERROR_MESSAGE, detail=None) -> dict:
    content = {
        "status_code": status_code,
        "message": message,
    }
    if detail is not None:
        content["data"] = detail
    return content


# ==================================================
# NOTE: simulación que no cumple las reglas de negocio
class SimulationValidationError(HTTPException):
    def __init__(
        self,
        violations: List[Violation],
        detail: str = "Simulation rejected",
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: dict = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.violations = violations


async def simulation_validation_exception_handler(request: Request, exc: SimulationValidationError):
    logger.warning(
        f"Simulation rejected on {request.url.path}: "
        f"{[(v.field, v.message) for v in exc.violations]}"
    )
    response = ViolationResponse(
        status_code=exc.status_code,
        message=exc.detail,
        violations=exc.violations,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(mode="json"),
    )


# ==================================================
# NOTE: cuerpo que no se puede convertir en Simulation
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    logger.warning(f"Malformed payload on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_build_error_content(
            status.HTTP_400_BAD_REQUEST, message=MALFORMED_PAYLOAD_MESSAGE, detail=errors
        ),
    )


# ==================================================
# NOTE: 500 Internal Server Error
async def internal_server_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_build_error_content(status.HTTP_500_INTERNAL_SERVER_ERROR),
    )


# ==================================================
def add_exception_handlers(app: FastAPI):
    app.add_exception_handler(SimulationValidationError, simulation_validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, internal_server_error_handler)
