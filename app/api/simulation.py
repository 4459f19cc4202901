import json
from decimal import Decimal
from typing import Any, Callable

from fastapi import APIRouter, Request, Response, status
from fastapi.routing import APIRoute
from loguru import logger

from app.schemas.simulation import Simulation, ViolationResponse
from app.services.simulation import ensure_valid


class DecimalJSONRequest(Request):
    """Request cuyo cuerpo JSON conserva los números con decimales como Decimal."""

    async def json(self) -> Any:
        if not hasattr(self, "_json"):
            body = await self.body()
            self._json = json.loads(body, parse_float=Decimal)
        return self._json


class DecimalJSONRoute(APIRoute):
    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()

        async def decimal_route_handler(request: Request) -> Response:
            request = DecimalJSONRequest(request.scope, request.receive)
            return await original_route_handler(request)

        return decimal_route_handler


router = APIRouter(route_class=DecimalJSONRoute)


@router.post(
    "/simulation",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=Simulation,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ViolationResponse}},
)
async def simulate(simulation: Simulation):
    """Acepta la simulación si cumple todas las reglas y la devuelve tal como llegó."""
    accepted = ensure_valid(simulation)
    logger.info(
        f"Simulation accepted: amount={accepted.amount} installments={accepted.installments} "
        f"insurance={accepted.insurance}"
    )
    return accepted
