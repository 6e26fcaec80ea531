"""
Circuit templates and the default project offered by the form.
"""

from loadcalc.config import (
    BuildingType,
    CableType,
    CircuitType,
    InstallationMethod,
    Language,
    CIRCUIT_TEMPLATES,
    SUPPORTED_VOLTAGES,
)
from loadcalc.engine.localization import translate
from loadcalc.models.presets import CircuitTemplate, FormOptions, TemplateKey
from loadcalc.models.project import Circuit, ProjectInput


def list_templates() -> list[CircuitTemplate]:
    """All circuit templates in declaration order."""
    return [get_template(key) for key in TemplateKey]


def get_template(key: TemplateKey) -> CircuitTemplate:
    return CircuitTemplate(key=key, **CIRCUIT_TEMPLATES[key.value])


def create_circuit_from_template(
    key: TemplateKey,
    existing_circuits: list[Circuit],
    language: Language = Language.EN,
) -> Circuit:
    """
    Build a new circuit from a template.

    The name is the localized template name. When circuits of the same
    (specified) type already exist, it gets a running number: "Lighting",
    "Lighting 2", "Lighting 3", ...
    """
    template = get_template(key)
    base_name = translate(template.name_key, language=language)

    count = 0
    if template.type != CircuitType.UNSPECIFIED:
        count = sum(1 for c in existing_circuits if c.type == template.type)
    name = f"{base_name} {count + 1}" if count > 0 else base_name

    return Circuit(
        name=name,
        type=template.type,
        power=template.power,
        power_factor=template.power_factor,
        cable_length=template.cable_length,
    )


def default_project() -> ProjectInput:
    """A blank project with the form's default settings and no circuits."""
    return ProjectInput()


def form_options() -> FormOptions:
    """Selectable values and defaults for the project form."""
    return FormOptions(
        building_types=[b.value for b in BuildingType],
        voltages=list(SUPPORTED_VOLTAGES),
        circuit_types=[c.value for c in CircuitType],
        cable_types=[c.value for c in CableType],
        installation_methods=[m.value for m in InstallationMethod],
        languages=[lang.value for lang in Language],
        templates=list_templates(),
        default_project=default_project(),
    )
