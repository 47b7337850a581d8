"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, barcodectl.toml only contains
overrides. The capacity table and base year have not been confirmed
against the real barcode standard; a site that has the confirmed list
overrides ``[scheme]`` rather than editing code.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from barcodectl.domain.fields import (
    DEFAULT_BASE_YEAR,
    DEFAULT_CAPACITIES,
    Scheme,
    parse_capacity,
)

CAPACITY_TABLE_SIZE = 26


class SchemeConfig(BaseModel):
    """[scheme] section."""

    model_config = {"frozen": True}

    base_year: int = Field(default=DEFAULT_BASE_YEAR, ge=1)
    capacities: tuple[str, ...] = DEFAULT_CAPACITIES
    year_window_warning: int = Field(default=8, ge=0)

    @field_validator("capacities")
    @classmethod
    def _check_capacities(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) != CAPACITY_TABLE_SIZE:
            msg = f"capacities must list exactly {CAPACITY_TABLE_SIZE} entries, got {len(value)}"
            raise ValueError(msg)
        sizes = [parse_capacity(label) for label in value]
        if len(set(sizes)) != len(sizes):
            msg = "capacities must not repeat a size"
            raise ValueError(msg)
        if sizes != sorted(sizes):
            msg = "capacities must be listed in ascending order"
            raise ValueError(msg)
        return tuple(label.strip().upper() for label in value)

    def build_scheme(self) -> Scheme:
        """Build the domain scheme described by this section."""
        return Scheme.create(base_year=self.base_year, capacities=self.capacities)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    show_legend: bool = True
    options_limit: int = Field(default=50, ge=1)
