"""Server-defined taxonomy entries referenced by data points.

Entries are immutable and identified by their id: two entries of the
same type are equal when their ids match, whatever display strings they
carry. Data points hold their own copy, so the user service reconciles
them against the canonical lists after a fetch.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class TaxonomyEntry(BaseModel):
    """Base for lookup entries identified by `id_field`."""

    model_config = ConfigDict(frozen=True)

    id_field: ClassVar[str]

    @property
    def entry_id(self) -> Any:
        return getattr(self, self.id_field)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.entry_id == other.entry_id  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.entry_id))


class HousingType(TaxonomyEntry):
    """Housing option (rent, own, ...)."""

    id_field: ClassVar[str] = "housing_type_id"

    housing_type_id: int = Field(..., description="Taxonomy id")
    description: str | None = Field(default=None, description="Display string")


class IncomeType(TaxonomyEntry):
    """Income type option (employed, self-employed, ...)."""

    id_field: ClassVar[str] = "income_type_id"

    income_type_id: int = Field(..., description="Taxonomy id")
    description: str | None = Field(default=None, description="Display string")


class SalaryFrequency(TaxonomyEntry):
    """Pay frequency option (weekly, monthly, ...)."""

    id_field: ClassVar[str] = "salary_frequency_id"

    salary_frequency_id: int = Field(..., description="Taxonomy id")
    description: str | None = Field(default=None, description="Display string")


class TimeAtAddressOption(TaxonomyEntry):
    """Time-at-address bucket."""

    id_field: ClassVar[str] = "time_at_address_id"

    time_at_address_id: int = Field(..., description="Taxonomy id")
    description: str | None = Field(default=None, description="Display string")


class Country(TaxonomyEntry):
    """Country identified by its ISO 3166-1 alpha-2 code."""

    id_field: ClassVar[str] = "iso_code"

    iso_code: str = Field(..., min_length=2, max_length=2, description="ISO code")
    name: str | None = Field(default=None, description="Display name")
