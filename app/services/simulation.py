from decimal import Decimal
from typing import List

from app.exceptions import SimulationValidationError
from app.schemas.simulation import Simulation, Violation

AMOUNT_MIN = Decimal("1")
AMOUNT_MAX = Decimal("40")
INSTALLMENTS_MIN = 2
INSTALLMENTS_MAX = 48

AMOUNT_EMPTY = "Amount cannot be empty"
AMOUNT_TOO_LOW = "Amount must be equal or greater than $ 1.000"
AMOUNT_TOO_HIGH = "Amount must be equal or less than $ 40.000"
INSTALLMENTS_EMPTY = "Installments cannot be empty"
INSTALLMENTS_TOO_LOW = "Installments must be equal or greater than 2"
INSTALLMENTS_TOO_HIGH = "Installments must be equal or less than 48"


def validate(simulation: Simulation) -> List[Violation]:
    """
    Evalúa todas las reglas de la simulación y devuelve cada una que falle.

    Las reglas son independientes entre sí; un valor ausente sólo reporta
    la regla de campo vacío. Los montos se comparan por valor numérico,
    de modo que 1 y 1.000 son equivalentes.

    :param simulation: Simulación a evaluar
    :return: Lista de violaciones, vacía si la simulación es válida
    """
    violations: List[Violation] = []

    amount = simulation.amount
    if amount is None:
        violations.append(Violation(field="amount", value=None, message=AMOUNT_EMPTY))
    else:
        if amount < AMOUNT_MIN:
            violations.append(Violation(field="amount", value=amount, message=AMOUNT_TOO_LOW))
        if amount > AMOUNT_MAX:
            violations.append(Violation(field="amount", value=amount, message=AMOUNT_TOO_HIGH))

    installments = simulation.installments
    if installments is None:
        violations.append(Violation(field="installments", value=None, message=INSTALLMENTS_EMPTY))
    else:
        if installments < INSTALLMENTS_MIN:
            violations.append(Violation(field="installments", value=installments, message=INSTALLMENTS_TOO_LOW))
        if installments > INSTALLMENTS_MAX:
            violations.append(Violation(field="installments", value=installments, message=INSTALLMENTS_TOO_HIGH))

    return violations


def is_valid(simulation: Simulation) -> bool:
    return not validate(simulation)


def ensure_valid(simulation: Simulation) -> Simulation:
    """Devuelve la simulación sin cambios o lanza SimulationValidationError."""
    violations = validate(simulation)
    if violations:
        raise SimulationValidationError(violations)
    return simulation
