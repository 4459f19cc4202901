from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.schemas.simulation import Simulation, SimulationBuilder


def test_builder_builds_simulation():
    simulation = (
        Simulation.builder()
        .name("Elias")
        .cpf("123456")
        .email("elias@elias.com")
        .amount(Decimal(1000))
        .installments(48)
        .insurance(False)
        .build()
    )
    assert simulation.name == "Elias"
    assert simulation.amount == Decimal("1000")
    assert simulation.installments == 48
    assert simulation.insurance is False


def test_builder_allows_partial_and_out_of_range_values():
    # el rango se evalúa en validate(), no al construir
    simulation = SimulationBuilder().amount("500").build()
    assert simulation.amount == Decimal("500")
    assert simulation.installments is None
    assert simulation.insurance is False


def test_to_builder_copies_fields():
    original = Simulation.builder().name("John").amount("15").installments(5).build()
    changed = original.to_builder().installments(10).build()
    assert changed.installments == 10
    assert changed.name == "John"
    assert changed.amount == Decimal("15")
    assert original.installments == 5


def test_simulation_is_immutable_and_structural():
    first = Simulation(amount=Decimal("1"), installments=2)
    second = Simulation(amount=Decimal("1"), installments=2)
    assert first == second
    with pytest.raises(ValidationError):
        first.installments = 3


def test_insurance_null_means_false():
    assert Simulation(insurance=None).insurance is False


def test_builder_rejects_unknown_fields():
    with pytest.raises(TypeError):
        SimulationBuilder(amount="15", rate="5")
