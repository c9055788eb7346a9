"""Plot models and raw-record normalization.

Two record shapes exist in the wild:

- Generated datasets: ``isSold`` is a boolean, ``owner`` is absent for
  unsold plots, and ``coordinates`` holds numeric ``longitude``/``latitude``
  ranges.
- Exported datasets: ``isSold`` is the string ``"True"``/``"False"``,
  ``owner`` is ``"None"`` for unsold plots, and ``coord`` holds
  ``long``/``lat`` ranges with numbers as strings.

``plot_from_record`` accepts either and always returns a frozen ``Plot``.
Pure parsing lives here so the dependency direction stays
infrastructure -> domain.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Range(BaseModel):
    """Closed numeric interval in degrees."""

    model_config = {"frozen": True}

    min: float
    max: float


class Coordinates(BaseModel):
    """Bounding box of a plot."""

    model_config = {"frozen": True}

    longitude: Range
    latitude: Range

    def to_dict(self) -> dict[str, list[float]]:
        return {
            "longitude": [self.longitude.min, self.longitude.max],
            "latitude": [self.latitude.min, self.latitude.max],
        }


_EMPTY_COORDINATES = Coordinates(
    longitude=Range(min=0.0, max=0.0),
    latitude=Range(min=0.0, max=0.0),
)


class Plot(BaseModel):
    """One land plot record. Immutable once loaded."""

    model_config = {"frozen": True, "populate_by_name": True}

    id: int = Field(ge=1)
    is_sold: bool = Field(default=False, alias="isSold")
    owner: str | None = None
    coordinates: Coordinates = Field(default=_EMPTY_COORDINATES)

    @field_validator("is_sold", mode="before")
    @classmethod
    def _coerce_sold(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value

    @field_validator("owner", mode="before")
    @classmethod
    def _coerce_owner(cls, value: Any) -> Any:
        if value in ("", "None"):
            return None
        return value

    def to_dict(self) -> dict[str, Any]:
        """Flat representation used in service payloads."""
        return {
            "id": self.id,
            "status": "sold" if self.is_sold else "available",
            "owner": self.owner,
            **self.coordinates.to_dict(),
        }


def coordinates_from_coord(coord: dict[str, Any]) -> Coordinates:
    """Convert an exported ``coord`` block (``long``/``lat``) to ``Coordinates``."""
    return Coordinates(
        longitude=Range(min=coord["long"]["min"], max=coord["long"]["max"]),
        latitude=Range(min=coord["lat"]["min"], max=coord["lat"]["max"]),
    )


def plot_from_record(record: dict[str, Any]) -> Plot:
    """Build a ``Plot`` from either the generated or the exported record shape.

    Raises:
        pydantic.ValidationError: When required fields are missing or malformed.
        KeyError: When an exported ``coord`` block is incomplete.
    """
    data = dict(record)
    coord = data.pop("coord", None)
    if coord is not None and "coordinates" not in data:
        data["coordinates"] = coordinates_from_coord(coord)
    return Plot.model_validate(data)
