"""
LoadCalc configuration and constants.

The electrical constants are deliberately simplified (single-phase, one
operating temperature). Real installations need the full IEC/NEC tables.
"""

from enum import Enum


class BuildingType(str, Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class CircuitType(str, Enum):
    LIGHTING = "lighting"
    SOCKETS = "sockets"
    AC = "ac"
    HEAVY_DUTY = "heavy_duty"
    UNSPECIFIED = ""


class CableType(str, Enum):
    COPPER = "copper"
    ALUMINUM = "aluminum"


class InstallationMethod(str, Enum):
    PIPE = "pipe"
    DUCT = "duct"
    FREE_WIRE = "free_wire"


class Language(str, Enum):
    EN = "en"
    AR = "ar"


SUPPORTED_VOLTAGES: list[int] = [220, 380]
FREQUENCY_HZ = 50

# Resistivity (Ω·mm²/m) at operating temperature (~70°C)
CABLE_RESISTIVITY: dict[CableType, float] = {
    CableType.COPPER: 0.021,
    CableType.ALUMINUM: 0.034,
}

# Current density (A/mm²), a rough wire sizing factor
CURRENT_DENSITY: dict[CableType, float] = {
    CableType.COPPER: 6.0,
    CableType.ALUMINUM: 4.0,
}

# Standard ratings, ascending. Size selection relies on the ordering.
STANDARD_BREAKER_SIZES: list[int] = [
    10, 16, 20, 25, 32, 40, 50, 63, 80, 100, 125, 160, 200, 250, 320, 400,
]  # A

STANDARD_WIRE_SIZES: list[float] = [
    1.5, 2.5, 4.0, 6.0, 10.0, 16.0, 25.0, 35.0, 50.0, 70.0, 95.0, 120.0,
    150.0, 185.0, 240.0,
]  # mm²

VOLTAGE_DROP_LIMIT = 3.0  # percent

# Fixed margin for breaker sizing, independent of Specifications.safety_factor
BREAKER_SAFETY_MARGIN = 1.25

# Used only when summing apparent power
DEFAULT_POWER_FACTOR = 0.9

PANEL_COUNT = 1

# Form defaults for a new project
DEFAULT_BUILDING_TYPE = BuildingType.RESIDENTIAL
DEFAULT_VOLTAGE = 220
DEFAULT_CABLE_TYPE = CableType.COPPER
DEFAULT_INSTALLATION_METHOD = InstallationMethod.PIPE
DEFAULT_AMBIENT_TEMP = 40.0  # °C
DEFAULT_DEMAND_FACTOR = 0.8
DEFAULT_SAFETY_FACTOR = 1.25
DEFAULT_MAX_LOAD_PERCENTAGE = 80.0

# Browser origins allowed to call the API during frontend development
DEV_ORIGINS = [
    f"http://{host}:{port}"
    for host in ("localhost", "127.0.0.1")
    for port in (5173, 3000)
]

# Circuit templates offered by the form. Power in W, length in m.
CIRCUIT_TEMPLATES = {
    "LIGHTING": {
        "name_key": "templateLighting",
        "type": CircuitType.LIGHTING,
        "power": 800.0,
        "power_factor": 0.9,
        "cable_length": 20.0,
    },
    "GENERAL_SOCKETS": {
        "name_key": "templateSockets",
        "type": CircuitType.SOCKETS,
        "power": 2000.0,
        "power_factor": 0.85,
        "cable_length": 25.0,
    },
    "AC_1_5_TON": {
        "name_key": "templateAC",
        "type": CircuitType.AC,
        "power": 2200.0,
        "power_factor": 0.8,
        "cable_length": 15.0,
    },
    "WATER_HEATER": {
        "name_key": "templateWaterHeater",
        "type": CircuitType.HEAVY_DUTY,
        "power": 3000.0,
        "power_factor": 1.0,
        "cable_length": 10.0,
    },
    "CUSTOM": {
        "name_key": "templateCustom",
        "type": CircuitType.UNSPECIFIED,
        "power": 0.0,
        "power_factor": 0.9,
        "cable_length": 10.0,
    },
}
