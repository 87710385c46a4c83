"""Data point domain models.

A data point is one verifiable field of a user's profile. Every variant
pins its `kind`, so `AnyDataPoint` is a discriminated union over the
closed set of variants.

Assigning any value field of a variant clears the attached
verification and resets `verified`, even when the new value equals the
old one. Construction does not invalidate.
"""

import datetime as dt
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from kycsdk.datapoints.enums import DataPointKind
from kycsdk.datapoints.localization import (
    CREDIT_SCORE_KEYS,
    LocalizationProvider,
    default_localizer,
)
from kycsdk.datapoints.taxonomy import (
    Country,
    HousingType,
    IncomeType,
    SalaryFrequency,
    TimeAtAddressOption,
)
from kycsdk.datapoints.verification import Verification

# Placeholder the UI shows for a verified SSN it does not know.
# Sent back on update it means "leave the stored SSN unchanged".
UNKNOWN_VALID_SSN = "000000000"

UNSET_COUNTRY_CODE = -1


class DataPoint(BaseModel):
    """Base for all data point variants.

    Subclasses declare `value_fields` (assignment invalidates the
    verification) and `required_fields` (all must be present for the
    data point to be complete).
    """

    model_config = ConfigDict(validate_assignment=True)

    value_fields: ClassVar[tuple[str, ...]] = ()
    required_fields: ClassVar[tuple[str, ...]] = ()
    # Variants where an explicit "declined to answer" counts as complete
    accepts_not_specified: ClassVar[bool] = False

    kind: DataPointKind = Field(..., frozen=True, description="Field kind")
    verification: Verification | None = Field(
        default=None, description="Verification attached to the current value"
    )
    verified: bool = Field(default=False, description="Is verified")
    not_specified: bool = Field(
        default=False, description="User declined to provide the value"
    )

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in self.value_fields:
            self.invalidate_verification()

    def invalidate_verification(self) -> None:
        self.verification = None
        self.verified = False

    def attach_verification(self, verification: Verification) -> None:
        """Attach a verification returned for this data point's value.

        The data point keeps its own copy; `verified` follows the
        verification outcome.
        """
        self.verification = verification.model_copy(deep=True)
        self.verified = verification.is_passed

    def complete(self) -> bool:
        if self.accepts_not_specified and self.not_specified:
            return True
        return all(getattr(self, name) is not None for name in self.required_fields)

    def deep_copy(self) -> "DataPoint":
        return self.model_copy(deep=True)


class PersonalName(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("first_name", "last_name")
    required_fields: ClassVar[tuple[str, ...]] = ("first_name", "last_name")

    kind: Literal[DataPointKind.PERSONAL_NAME] = Field(
        default=DataPointKind.PERSONAL_NAME, frozen=True
    )
    first_name: str | None = None
    last_name: str | None = None

    def full_name(self) -> str | None:
        """First and last name joined by a space, skipping absent parts."""
        parts = [part for part in (self.first_name, self.last_name) if part is not None]
        if not parts:
            return None
        return " ".join(parts)


class PhoneNumber(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("country_code", "phone_number")
    required_fields: ClassVar[tuple[str, ...]] = ("phone_number",)

    kind: Literal[DataPointKind.PHONE_NUMBER] = Field(
        default=DataPointKind.PHONE_NUMBER, frozen=True
    )
    country_code: int = Field(default=UNSET_COUNTRY_CODE, description="-1 when unset")
    phone_number: str | None = None

    def complete(self) -> bool:
        return self.country_code != UNSET_COUNTRY_CODE and super().complete()


class Email(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("email",)
    required_fields: ClassVar[tuple[str, ...]] = ("email",)
    accepts_not_specified: ClassVar[bool] = True

    kind: Literal[DataPointKind.EMAIL] = Field(default=DataPointKind.EMAIL, frozen=True)
    email: str | None = None


class BirthDate(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("date",)
    required_fields: ClassVar[tuple[str, ...]] = ("date",)

    kind: Literal[DataPointKind.BIRTH_DATE] = Field(
        default=DataPointKind.BIRTH_DATE, frozen=True
    )
    date: dt.date | None = None


class SSN(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("ssn",)
    required_fields: ClassVar[tuple[str, ...]] = ("ssn",)
    accepts_not_specified: ClassVar[bool] = True

    kind: Literal[DataPointKind.SSN] = Field(default=DataPointKind.SSN, frozen=True)
    ssn: str | None = None

    @property
    def is_unknown_valid(self) -> bool:
        """True when holding the display placeholder for a stored SSN."""
        return self.ssn == UNKNOWN_VALID_SSN


class Address(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = (
        "address",
        "apt_unit",
        "country",
        "city",
        "state_code",
        "zip",
    )
    required_fields: ClassVar[tuple[str, ...]] = ("address", "city", "state_code", "zip")

    kind: Literal[DataPointKind.ADDRESS] = Field(default=DataPointKind.ADDRESS, frozen=True)
    address: str | None = None
    apt_unit: str | None = None
    country: Country | None = None
    city: str | None = None
    state_code: str | None = None
    zip: str | None = None

    def address_description(self) -> str | None:
        """One-line description for US addresses, None otherwise.

        Present components are joined with ", " in the order
        address, city, state, zip.
        """
        if self.country is None or self.country.iso_code != "US":
            return None
        components = (self.address, self.city, self.state_code, self.zip)
        return ", ".join(component for component in components if component is not None)


class Housing(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("housing_type",)
    required_fields: ClassVar[tuple[str, ...]] = ("housing_type",)

    kind: Literal[DataPointKind.HOUSING] = Field(default=DataPointKind.HOUSING, frozen=True)
    housing_type: HousingType | None = None


class IncomeSource(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("salary_frequency", "income_type")
    required_fields: ClassVar[tuple[str, ...]] = ("salary_frequency", "income_type")

    kind: Literal[DataPointKind.INCOME_SOURCE] = Field(
        default=DataPointKind.INCOME_SOURCE, frozen=True
    )
    salary_frequency: SalaryFrequency | None = None
    income_type: IncomeType | None = None


class Income(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("net_monthly_income", "gross_annual_income")
    required_fields: ClassVar[tuple[str, ...]] = ("net_monthly_income", "gross_annual_income")

    kind: Literal[DataPointKind.INCOME] = Field(default=DataPointKind.INCOME, frozen=True)
    net_monthly_income: int | None = None
    gross_annual_income: int | None = None


class CreditScore(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("credit_range",)
    required_fields: ClassVar[tuple[str, ...]] = ("credit_range",)

    kind: Literal[DataPointKind.CREDIT_SCORE] = Field(
        default=DataPointKind.CREDIT_SCORE, frozen=True
    )
    credit_range: int | None = Field(
        default=None, description="Index into excellent/good/fair/poor"
    )

    def credit_score_range_description(
        self, localizer: LocalizationProvider | None = None
    ) -> str:
        """Display label for the range; empty string when out of range."""
        index = self.credit_range
        if index is None or not 0 <= index < len(CREDIT_SCORE_KEYS):
            return ""
        return (localizer or default_localizer).localized(CREDIT_SCORE_KEYS[index])


class PaydayLoan(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("used_payday_loan",)
    required_fields: ClassVar[tuple[str, ...]] = ("used_payday_loan",)

    kind: Literal[DataPointKind.PAYDAY_LOAN] = Field(
        default=DataPointKind.PAYDAY_LOAN, frozen=True
    )
    used_payday_loan: bool | None = None


class MemberOfArmedForces(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("member_of_armed_forces",)
    required_fields: ClassVar[tuple[str, ...]] = ("member_of_armed_forces",)

    kind: Literal[DataPointKind.MEMBER_OF_ARMED_FORCES] = Field(
        default=DataPointKind.MEMBER_OF_ARMED_FORCES, frozen=True
    )
    member_of_armed_forces: bool | None = None


class TimeAtAddress(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("time_at_address",)
    required_fields: ClassVar[tuple[str, ...]] = ("time_at_address",)

    kind: Literal[DataPointKind.TIME_AT_ADDRESS] = Field(
        default=DataPointKind.TIME_AT_ADDRESS, frozen=True
    )
    time_at_address: TimeAtAddressOption | None = None


class FinancialAccount(DataPoint):
    value_fields: ClassVar[tuple[str, ...]] = ("account_id",)
    required_fields: ClassVar[tuple[str, ...]] = ("account_id",)

    kind: Literal[DataPointKind.FINANCIAL_ACCOUNT] = Field(
        default=DataPointKind.FINANCIAL_ACCOUNT, frozen=True
    )
    account_id: str | None = None


AnyDataPoint = Annotated[
    Union[
        PersonalName,
        PhoneNumber,
        Email,
        BirthDate,
        SSN,
        Address,
        Housing,
        IncomeSource,
        Income,
        CreditScore,
        PaydayLoan,
        MemberOfArmedForces,
        TimeAtAddress,
        FinancialAccount,
    ],
    Field(discriminator="kind"),
]

