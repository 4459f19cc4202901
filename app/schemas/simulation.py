from decimal import Decimal
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Simulation(BaseModel):
    """
    Solicitud de simulación de financiamiento.

    Construirla no dispara ninguna regla de negocio: los rangos de monto y
    cuotas sólo se evalúan con app.services.simulation.validate().
    """

    model_config = ConfigDict(frozen=True)

    amount: Optional[Decimal] = Field(None, description="Monto solicitado")
    installments: Optional[int] = Field(None, description="Cantidad de cuotas")
    name: Optional[str] = Field(None, description="Nombre del solicitante")
    cpf: Optional[str] = Field(None, description="Documento del solicitante")
    email: Optional[str] = Field(None, description="Correo del solicitante")
    insurance: bool = Field(False, description="Incluye seguro")

    @field_validator("insurance", mode="before")
    @classmethod
    def _insurance_defaults_to_false(cls, value: Any) -> Any:
        return False if value is None else value

    @classmethod
    def builder(cls) -> "SimulationBuilder":
        return SimulationBuilder()

    def to_builder(self) -> "SimulationBuilder":
        return SimulationBuilder(**self.model_dump())


AmountInput = Union[Decimal, int, str]


class SimulationBuilder:
    """Construcción por etapas de una Simulation; build() entrega el valor inmutable."""

    def __init__(
        self,
        *,
        amount: Optional[AmountInput] = None,
        installments: Optional[int] = None,
        name: Optional[str] = None,
        cpf: Optional[str] = None,
        email: Optional[str] = None,
        insurance: Optional[bool] = False,
    ):
        self._fields = {
            "amount": amount,
            "installments": installments,
            "name": name,
            "cpf": cpf,
            "email": email,
            "insurance": insurance,
        }

    def amount(self, amount: Optional[AmountInput]) -> "SimulationBuilder":
        self._fields["amount"] = amount
        return self

    def installments(self, installments: Optional[int]) -> "SimulationBuilder":
        self._fields["installments"] = installments
        return self

    def name(self, name: Optional[str]) -> "SimulationBuilder":
        self._fields["name"] = name
        return self

    def cpf(self, cpf: Optional[str]) -> "SimulationBuilder":
        self._fields["cpf"] = cpf
        return self

    def email(self, email: Optional[str]) -> "SimulationBuilder":
        self._fields["email"] = email
        return self

    def insurance(self, insurance: Optional[bool]) -> "SimulationBuilder":
        self._fields["insurance"] = insurance
        return self

    def build(self) -> Simulation:
        return Simulation(**self._fields)


class Violation(BaseModel):
    field: str = Field(..., description="Campo que no cumple la regla")
    value: Any = Field(None, description="Valor rechazado")
    message: str = Field(..., description="Mensaje legible para el cliente")


class ViolationResponse(BaseModel):
    status_code: int
    message: str = "Simulation rejected"
    violations: List[Violation]
