"""Data point domain: typed, independently verifiable user fields.

Contains the data point variants, their ordered collection, the
taxonomy entries they reference and the wire codec.
"""

from kycsdk.datapoints.collection import DataPointList
from kycsdk.datapoints.enums import DataPointKind, VerificationStatus
from kycsdk.datapoints.models import (
    SSN,
    UNKNOWN_VALID_SSN,
    UNSET_COUNTRY_CODE,
    Address,
    AnyDataPoint,
    BirthDate,
    CreditScore,
    DataPoint,
    Email,
    FinancialAccount,
    Housing,
    Income,
    IncomeSource,
    MemberOfArmedForces,
    PaydayLoan,
    PersonalName,
    PhoneNumber,
    TimeAtAddress,
)
from kycsdk.datapoints.taxonomy import (
    Country,
    HousingType,
    IncomeType,
    SalaryFrequency,
    TaxonomyEntry,
    TimeAtAddressOption,
)
from kycsdk.datapoints.user import User
from kycsdk.datapoints.verification import Verification

__all__ = [
    # Enums
    "DataPointKind",
    "VerificationStatus",
    # Data points
    "DataPoint",
    "AnyDataPoint",
    "PersonalName",
    "PhoneNumber",
    "Email",
    "BirthDate",
    "SSN",
    "Address",
    "Housing",
    "IncomeSource",
    "Income",
    "CreditScore",
    "PaydayLoan",
    "MemberOfArmedForces",
    "TimeAtAddress",
    "FinancialAccount",
    "UNKNOWN_VALID_SSN",
    "UNSET_COUNTRY_CODE",
    # Collection
    "DataPointList",
    # Taxonomy
    "TaxonomyEntry",
    "HousingType",
    "IncomeType",
    "SalaryFrequency",
    "TimeAtAddressOption",
    "Country",
    # Records
    "User",
    "Verification",
]
