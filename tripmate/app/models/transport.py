"""Transport detail models - a tagged variant keyed on ``mode``.

Each variant carries only the fields valid for its modes. Unknown or
inapplicable fields are rejected, so a flight can never carry a platform and a
taxi can never carry a gate.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from tripmate.app.models.common import MetroCity, TransportMode


class _TransportBase(BaseModel):
    """Fields shared by every transport mode."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    provider: str | None = None  # e.g. "EVA Air", "Kenting Express"
    identifier: str | None = None  # flight no., train no., bus route
    seat: str | None = None


class FlightDetails(_TransportBase):
    mode: Literal["FLIGHT"] = "FLIGHT"
    terminal: str | None = None
    gate: str | None = None


class PlatformDetails(_TransportBase):
    """Rail and bus legs, which depart from a platform or bay."""

    mode: Literal["TRAIN_HSR", "TRAIN_TRA", "BUS"]
    platform: str | None = None


class MetroDetails(_TransportBase):
    mode: Literal["METRO"] = "METRO"
    metro_city: MetroCity
    # Generators only report the city, so a leg may not know its line yet.
    metro_line_color: str | None = None


class BasicDetails(_TransportBase):
    """Modes with no mode-specific fields."""

    mode: Literal["TAXI", "WALK", "OTHER"]


TransportDetails = Annotated[
    Union[FlightDetails, PlatformDetails, MetroDetails, BasicDetails],
    Field(discriminator="mode"),
]


def details_for_mode(mode: TransportMode | str, **fields: object) -> TransportDetails:
    """Build the variant matching ``mode`` from keyword fields.

    Raises:
        ValueError: if ``mode`` is not a known TransportMode
        pydantic.ValidationError: if a field does not belong to the mode's variant
    """
    mode = TransportMode(mode)
    if mode == TransportMode.FLIGHT:
        return FlightDetails(**fields)  # type: ignore[arg-type]
    if mode == TransportMode.METRO:
        fields.setdefault("metro_city", MetroCity.NONE)
        return MetroDetails(**fields)  # type: ignore[arg-type]
    if mode in (TransportMode.TRAIN_HSR, TransportMode.TRAIN_TRA, TransportMode.BUS):
        return PlatformDetails(mode=mode.value, **fields)  # type: ignore[arg-type]
    return BasicDetails(mode=mode.value, **fields)  # type: ignore[arg-type]
