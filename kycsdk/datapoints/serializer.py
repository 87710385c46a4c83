"""Wire codec for data points, verifications and users.

Each variant has one encoder and one decoder, registered by kind.
Encoders return the variant-specific fields; value fields that are
unset are emitted as explicit nulls. Keys mapped to `OMIT` are left out
of the payload entirely, which is how the envelope drops an absent
verification or a false `not_specified`.
"""

import datetime as dt
from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter, ValidationError

from kycsdk.datapoints.collection import DataPointList
from kycsdk.datapoints.enums import DataPointKind, VerificationStatus
from kycsdk.datapoints.models import (
    SSN,
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
    UNSET_COUNTRY_CODE,
)
from kycsdk.datapoints.taxonomy import (
    Country,
    HousingType,
    IncomeType,
    SalaryFrequency,
    TimeAtAddressOption,
)
from kycsdk.datapoints.user import User
from kycsdk.datapoints.verification import Verification
from kycsdk.exceptions import JsonError
from kycsdk.observability.logging import get_logger

logger = get_logger(__name__)

JsonDict = dict[str, Any]


class _Omit:
    def __repr__(self) -> str:
        return "OMIT"


OMIT: Any = _Omit()

_data_point_adapter: TypeAdapter[Any] = TypeAdapter(AnyDataPoint)


def _emit(payload: JsonDict, fields: JsonDict) -> JsonDict:
    for key, value in fields.items():
        if value is not OMIT:
            payload[key] = value
    return payload


# Encoders


def _encode_personal_name(dp: PersonalName) -> JsonDict:
    return {"first_name": dp.first_name, "last_name": dp.last_name}


def _encode_phone_number(dp: PhoneNumber) -> JsonDict:
    return {"country_code": str(dp.country_code), "phone_number": dp.phone_number}


def _encode_email(dp: Email) -> JsonDict:
    return {"email": dp.email}


def _encode_birth_date(dp: BirthDate) -> JsonDict:
    return {"date": dp.date.isoformat() if dp.date is not None else None}


def _encode_ssn(dp: SSN) -> JsonDict:
    return {"ssn": dp.ssn}


def _encode_address(dp: Address) -> JsonDict:
    return {
        "address": dp.address,
        "apt": dp.apt_unit,
        "country": dp.country.iso_code if dp.country is not None else None,
        "city": dp.city,
        "state": dp.state_code,
        "zip": dp.zip,
    }


def _encode_housing(dp: Housing) -> JsonDict:
    housing_type = dp.housing_type
    return {"housing_type_id": housing_type.housing_type_id if housing_type else None}


def _encode_income_source(dp: IncomeSource) -> JsonDict:
    return {
        "income_type_id": dp.income_type.income_type_id if dp.income_type else None,
        "salary_frequency_id": (
            dp.salary_frequency.salary_frequency_id if dp.salary_frequency else None
        ),
    }


def _encode_income(dp: Income) -> JsonDict:
    return {
        "gross_annual_income": dp.gross_annual_income,
        "net_monthly_income": dp.net_monthly_income,
    }


def _encode_credit_score(dp: CreditScore) -> JsonDict:
    return {"credit_range": dp.credit_range}


def _encode_payday_loan(dp: PaydayLoan) -> JsonDict:
    return {"payday_loan": dp.used_payday_loan}


def _encode_member_of_armed_forces(dp: MemberOfArmedForces) -> JsonDict:
    return {"member_of_armed_forces": dp.member_of_armed_forces}


def _encode_time_at_address(dp: TimeAtAddress) -> JsonDict:
    option = dp.time_at_address
    return {"time_at_address_id": option.time_at_address_id if option else None}


def _encode_financial_account(dp: FinancialAccount) -> JsonDict:
    return {"account_id": dp.account_id}


_ENCODERS: dict[DataPointKind, Callable[[Any], JsonDict]] = {
    DataPointKind.PERSONAL_NAME: _encode_personal_name,
    DataPointKind.PHONE_NUMBER: _encode_phone_number,
    DataPointKind.EMAIL: _encode_email,
    DataPointKind.BIRTH_DATE: _encode_birth_date,
    DataPointKind.SSN: _encode_ssn,
    DataPointKind.ADDRESS: _encode_address,
    DataPointKind.HOUSING: _encode_housing,
    DataPointKind.INCOME_SOURCE: _encode_income_source,
    DataPointKind.INCOME: _encode_income,
    DataPointKind.CREDIT_SCORE: _encode_credit_score,
    DataPointKind.PAYDAY_LOAN: _encode_payday_loan,
    DataPointKind.MEMBER_OF_ARMED_FORCES: _encode_member_of_armed_forces,
    DataPointKind.TIME_AT_ADDRESS: _encode_time_at_address,
    DataPointKind.FINANCIAL_ACCOUNT: _encode_financial_account,
}


def serialize_verification(verification: Verification) -> JsonDict:
    payload: JsonDict = {
        "type": "verification",
        "verification_id": verification.verification_id,
        "status": verification.status.value,
        "verification_type": verification.verification_type,
        "secret": verification.secret,
    }
    return _emit(
        payload,
        {
            "verification_result": (
                verification.verification_result
                if verification.verification_result is not None
                else OMIT
            )
        },
    )


def serialize_data_point(data_point: DataPoint) -> JsonDict:
    """Render a data point in its wire shape."""
    encoder = _ENCODERS.get(data_point.kind)
    if encoder is None:
        raise ValueError(f"No encoder for data point kind {data_point.kind!r}")
    payload: JsonDict = {"data_type": data_point.kind.wire_name}
    _emit(
        payload,
        {
            "verification": (
                serialize_verification(data_point.verification)
                if data_point.verification is not None
                else OMIT
            ),
            "verified": True if data_point.verified else OMIT,
            "not_specified": True if data_point.not_specified else OMIT,
        },
    )
    return _emit(payload, encoder(data_point))


def serialize_data_point_list(data_points: DataPointList) -> JsonDict:
    return {
        "type": "list",
        "data": [serialize_data_point(data_point) for data_point in data_points],
    }


# Decoders


def _taxonomy(
    payload: JsonDict, object_key: str, id_key: str, entry_type: type[Any]
) -> Any:
    """Decode a taxonomy reference sent as an embedded object or an id."""
    embedded = payload.get(object_key)
    if isinstance(embedded, dict):
        return entry_type.model_validate(embedded)
    entry_id = payload.get(id_key)
    if entry_id is None:
        return None
    return entry_type.model_validate({id_key: entry_id})


def _decode_country_code(value: Any) -> int:
    if value is None or value == "":
        return UNSET_COUNTRY_CODE
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise JsonError(f"Invalid country code: {value!r}") from e


def _decode_date(value: Any) -> dt.date | None:
    if value is None:
        return None
    try:
        return dt.date.fromisoformat(str(value)[:10])
    except ValueError as e:
        raise JsonError(f"Invalid date: {value!r}") from e


def _decode_country(value: Any) -> Country | None:
    if value is None:
        return None
    if isinstance(value, dict):
        return Country.model_validate(value)
    return Country(iso_code=value)


_DECODERS: dict[DataPointKind, Callable[[JsonDict], JsonDict]] = {
    DataPointKind.PERSONAL_NAME: lambda p: {
        "first_name": p.get("first_name"),
        "last_name": p.get("last_name"),
    },
    DataPointKind.PHONE_NUMBER: lambda p: {
        "country_code": _decode_country_code(p.get("country_code")),
        "phone_number": p.get("phone_number"),
    },
    DataPointKind.EMAIL: lambda p: {"email": p.get("email")},
    DataPointKind.BIRTH_DATE: lambda p: {"date": _decode_date(p.get("date"))},
    DataPointKind.SSN: lambda p: {"ssn": p.get("ssn")},
    DataPointKind.ADDRESS: lambda p: {
        "address": p.get("address"),
        "apt_unit": p.get("apt"),
        "country": _decode_country(p.get("country")),
        "city": p.get("city"),
        "state_code": p.get("state"),
        "zip": p.get("zip"),
    },
    DataPointKind.HOUSING: lambda p: {
        "housing_type": _taxonomy(p, "housing_type", "housing_type_id", HousingType),
    },
    DataPointKind.INCOME_SOURCE: lambda p: {
        "income_type": _taxonomy(p, "income_type", "income_type_id", IncomeType),
        "salary_frequency": _taxonomy(
            p, "salary_frequency", "salary_frequency_id", SalaryFrequency
        ),
    },
    DataPointKind.INCOME: lambda p: {
        "gross_annual_income": p.get("gross_annual_income"),
        "net_monthly_income": p.get("net_monthly_income"),
    },
    DataPointKind.CREDIT_SCORE: lambda p: {"credit_range": p.get("credit_range")},
    DataPointKind.PAYDAY_LOAN: lambda p: {"used_payday_loan": p.get("payday_loan")},
    DataPointKind.MEMBER_OF_ARMED_FORCES: lambda p: {
        "member_of_armed_forces": p.get("member_of_armed_forces"),
    },
    DataPointKind.TIME_AT_ADDRESS: lambda p: {
        "time_at_address": _taxonomy(
            p, "time_at_address", "time_at_address_id", TimeAtAddressOption
        ),
    },
    DataPointKind.FINANCIAL_ACCOUNT: lambda p: {"account_id": p.get("account_id")},
}


def deserialize_verification(payload: JsonDict) -> Verification:
    if not isinstance(payload, dict) or payload.get("verification_id") is None:
        raise JsonError("Verification payload lacks verification_id", payload)
    try:
        return Verification(
            verification_id=str(payload["verification_id"]),
            status=VerificationStatus.from_wire(payload.get("status")),
            verification_type=payload.get("verification_type"),
            secret=payload.get("secret"),
            verification_result=payload.get("verification_result"),
        )
    except ValidationError as e:
        raise JsonError(f"Invalid verification payload: {e}", payload) from e


def deserialize_data_point(payload: JsonDict) -> DataPoint | None:
    """Build a data point from its wire shape.

    Returns None for data types this client has no variant for.
    """
    if not isinstance(payload, dict):
        raise JsonError("Data point payload is not an object", payload)
    kind = DataPointKind.from_wire(payload.get("data_type"))
    decoder = _DECODERS.get(kind)
    if decoder is None:
        return None

    verification = payload.get("verification")
    try:
        fields = decoder(payload)
        fields["kind"] = kind
        fields["verification"] = (
            deserialize_verification(verification) if verification is not None else None
        )
        fields["verified"] = bool(payload.get("verified", False))
        fields["not_specified"] = bool(payload.get("not_specified", False))
        return _data_point_adapter.validate_python(fields)
    except ValidationError as e:
        raise JsonError(f"Invalid {kind.wire_name} data point: {e}", payload) from e


def deserialize_data_point_list(payload: JsonDict | list[Any] | None) -> DataPointList:
    """Decode a list envelope (or a bare list) into a DataPointList."""
    if payload is None:
        return DataPointList()
    items = payload.get("data") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        raise JsonError("Data point list payload lacks a data array", payload)

    data_points = DataPointList()
    for item in items:
        data_point = deserialize_data_point(item)
        if data_point is None:
            logger.warning(
                "unknown_data_point_skipped",
                data_type=item.get("data_type"),
            )
            continue
        data_points.add(data_point)
    return data_points


def parse_user(payload: Any) -> User | None:
    """Extract the user carried by a response, if any."""
    if not isinstance(payload, dict) or payload.get("type") != "user":
        return None
    if payload.get("user_id") is None:
        return None
    return User(
        user_id=str(payload["user_id"]),
        user_token=payload.get("user_token"),
        user_data=deserialize_data_point_list(payload.get("user_data")),
    )


def parse_verification(payload: Any) -> Verification | None:
    """Extract the verification carried by a response, if any."""
    if not isinstance(payload, dict) or payload.get("type") != "verification":
        return None
    return deserialize_verification(payload)
