"""
Electrical load calculation engine.

Turns a ProjectInput into CalculationResults:
  - per-circuit current, breaker size, wire size and voltage drop
  - standards warnings (voltage drop over the limit, undersized breaker)
  - totals: load (kW), demanded current, main breaker, main feeder
  - bill of materials

The engine is pure: no I/O, no shared mutable state. Input validation is the
caller's job (see engine.validation); degenerate values yield degenerate
numbers rather than errors. The only hard precondition is a positive voltage.
"""

import logging
import math

from loadcalc.config import (
    BREAKER_SAFETY_MARGIN,
    CURRENT_DENSITY,
    DEFAULT_POWER_FACTOR,
    PANEL_COUNT,
    STANDARD_BREAKER_SIZES,
    STANDARD_WIRE_SIZES,
    VOLTAGE_DROP_LIMIT,
    CableType,
)
from loadcalc.engine.sizing import (
    circuit_current,
    find_next_standard_size,
    select_breaker_size,
    select_wire_size,
    voltage_drop_percent,
)
from loadcalc.models.project import Circuit, ProjectInput
from loadcalc.models.results import (
    AppWarning,
    BreakerQuantity,
    CableQuantity,
    CalculationResults,
    CircuitResult,
    MaterialQuantities,
    WarningKey,
)

logger = logging.getLogger(__name__)


def calculate(project: ProjectInput) -> CalculationResults:
    """Run the full calculation for a project."""
    voltage = project.project_info.voltage
    if not math.isfinite(voltage) or voltage <= 0:
        raise ValueError(f"Supply voltage must be a positive number, got {voltage}")

    cable_type = project.wiring_info.cable_type
    demand_factor = project.panel_info.demand_factor

    warnings: list[AppWarning] = []
    circuit_results: list[CircuitResult] = []
    total_load_w = 0.0
    total_apparent_va = 0.0

    for circuit in project.circuits:
        result = calculate_circuit(circuit, voltage, cable_type)
        warnings.extend(check_circuit(result))
        circuit_results.append(result)

        total_load_w += circuit.power
        # Missing/zero power factor falls back to the default here only;
        # the per-circuit current is zero in that case.
        total_apparent_va += circuit.power / (circuit.power_factor or DEFAULT_POWER_FACTOR)

    demanded_va = total_apparent_va * demand_factor
    total_current = demanded_va / voltage

    main_breaker_size = find_next_standard_size(
        total_current * BREAKER_SAFETY_MARGIN, STANDARD_BREAKER_SIZES
    )
    main_feeder_wire_size = find_next_standard_size(
        total_current / CURRENT_DENSITY[cable_type], STANDARD_WIRE_SIZES
    )

    # Display figure only. Sizing above is driven by apparent power.
    total_load_kw = (
        (total_load_w / 1000) * demand_factor * project.specifications.safety_factor
    )

    logger.debug(
        "Calculated %d circuits: %.2f kW, %.2f A, main breaker %s A, feeder %s mm², %d warnings",
        len(circuit_results),
        total_load_kw,
        total_current,
        main_breaker_size,
        main_feeder_wire_size,
        len(warnings),
    )

    return CalculationResults(
        project_info=project.project_info.model_copy(),
        total_load_kw=total_load_kw,
        total_current=total_current,
        main_breaker_size=main_breaker_size,
        main_feeder_wire_size=main_feeder_wire_size,
        circuit_results=circuit_results,
        warnings=warnings,
        quantities=build_material_quantities(circuit_results),
    )


def calculate_circuit(circuit: Circuit, voltage: float, cable_type: CableType) -> CircuitResult:
    """Size a single branch circuit."""
    current = circuit_current(circuit.power, voltage, circuit.power_factor)
    breaker_size = select_breaker_size(current)
    wire_size = select_wire_size(current, cable_type)
    voltage_drop = voltage_drop_percent(
        circuit.cable_length, current, voltage, wire_size, cable_type
    )

    return CircuitResult(
        **circuit.model_dump(),
        current=current,
        breaker_size=breaker_size,
        wire_size=wire_size,
        voltage_drop=voltage_drop,
    )


def check_circuit(result: CircuitResult) -> list[AppWarning]:
    """
    Standards checks for a sized circuit. Both checks are independent.

    An undersized breaker only happens when the breaker table saturated.
    Wire table saturation is not reported.
    """
    warnings: list[AppWarning] = []

    if result.voltage_drop > VOLTAGE_DROP_LIMIT:
        warnings.append(AppWarning(
            key=WarningKey.VOLTAGE_DROP_EXCEEDED,
            params={
                "name": result.name,
                "value": result.voltage_drop,
                "limit": VOLTAGE_DROP_LIMIT,
            },
        ))

    if result.breaker_size < result.current:
        warnings.append(AppWarning(
            key=WarningKey.BREAKER_UNDERSIZED,
            params={
                "name": result.name,
                "breaker": result.breaker_size,
                "current": result.current,
            },
        ))

    return warnings


def build_material_quantities(circuit_results: list[CircuitResult]) -> MaterialQuantities:
    """
    Aggregate breakers (count per rating) and cable (total length per size).

    Groups are sorted ascending by size, so the output does not depend on
    circuit order.
    """
    breaker_counts: dict[int, int] = {}
    cable_lengths: dict[float, float] = {}

    for result in circuit_results:
        if result.breaker_size > 0:
            breaker_counts[result.breaker_size] = breaker_counts.get(result.breaker_size, 0) + 1
        if result.wire_size > 0:
            cable_lengths[result.wire_size] = cable_lengths.get(result.wire_size, 0.0) + result.cable_length

    return MaterialQuantities(
        cable_lengths_by_size=[
            CableQuantity(size=size, length=length)
            for size, length in sorted(cable_lengths.items())
        ],
        breakers=[
            BreakerQuantity(size=size, count=count)
            for size, count in sorted(breaker_counts.items())
        ],
        panels=PANEL_COUNT,
    )
