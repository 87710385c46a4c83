"""Tests for data point domain models."""

import datetime as dt
from typing import Any

import pytest
from pydantic import ValidationError

from kycsdk.datapoints import (
    SSN,
    UNKNOWN_VALID_SSN,
    Address,
    BirthDate,
    Country,
    CreditScore,
    DataPoint,
    DataPointKind,
    Email,
    FinancialAccount,
    Housing,
    HousingType,
    Income,
    IncomeSource,
    IncomeType,
    MemberOfArmedForces,
    PaydayLoan,
    PersonalName,
    PhoneNumber,
    SalaryFrequency,
    TimeAtAddress,
    TimeAtAddressOption,
    VerificationStatus,
)
from kycsdk.datapoints.localization import DEFAULT_STRINGS, DictLocalizationProvider
from tests.factories import DataPointFactory, VerificationFactory

MUTATIONS: list[tuple[type[DataPoint], str, Any]] = [
    (PersonalName, "first_name", "Grace"),
    (PersonalName, "last_name", "Hopper"),
    (PhoneNumber, "country_code", 44),
    (PhoneNumber, "phone_number", "2071234567"),
    (Email, "email", "grace@example.com"),
    (BirthDate, "date", dt.date(1906, 12, 9)),
    (SSN, "ssn", "987654321"),
    (Address, "address", "2 Side St"),
    (Address, "apt_unit", "1A"),
    (Address, "country", Country(iso_code="CA")),
    (Address, "city", "Toronto"),
    (Address, "state_code", "ON"),
    (Address, "zip", "M5H"),
    (Housing, "housing_type", HousingType(housing_type_id=7)),
    (IncomeSource, "salary_frequency", SalaryFrequency(salary_frequency_id=1)),
    (IncomeSource, "income_type", IncomeType(income_type_id=1)),
    (Income, "net_monthly_income", 1),
    (Income, "gross_annual_income", 12),
    (CreditScore, "credit_range", 3),
    (PaydayLoan, "used_payday_loan", True),
    (MemberOfArmedForces, "member_of_armed_forces", False),
    (TimeAtAddress, "time_at_address", TimeAtAddressOption(time_at_address_id=4)),
    (FinancialAccount, "account_id", "acc_2"),
]


class TestInvalidateOnMutate:
    """Assigning a value field clears verification state."""

    @pytest.mark.parametrize(
        ("variant", "field_name", "value"),
        MUTATIONS,
        ids=[f"{variant.__name__}.{name}" for variant, name, _ in MUTATIONS],
    )
    def test_mutation_clears_verification(
        self, variant: type[DataPoint], field_name: str, value: Any
    ) -> None:
        """Setting any value field resets verified and drops the verification."""
        data_point = variant(verified=True, verification=VerificationFactory.create())

        setattr(data_point, field_name, value)

        assert data_point.verified is False
        assert data_point.verification is None
        assert getattr(data_point, field_name) == value

    def test_setting_same_value_still_invalidates(self) -> None:
        """There is no dirty check: re-setting the current value invalidates."""
        email = Email(
            email="ada@example.com",
            verified=True,
            verification=VerificationFactory.create(),
        )

        email.email = "ada@example.com"

        assert email.verified is False
        assert email.verification is None

    def test_construction_does_not_invalidate(self) -> None:
        """Verified state passed at construction is kept."""
        verification = VerificationFactory.create()
        phone = PhoneNumber(
            country_code=1,
            phone_number="4155550100",
            verified=True,
            verification=verification,
        )
        assert phone.verified is True
        assert phone.verification == verification

    def test_non_value_fields_do_not_invalidate(self) -> None:
        """Changing not_specified leaves the verification alone."""
        ssn = SSN(ssn="123456789", verified=True, verification=VerificationFactory.create())

        ssn.not_specified = True

        assert ssn.verified is True
        assert ssn.verification is not None


class TestKind:
    """Tests for the fixed kind of each variant."""

    def test_variants_pin_their_kind(self) -> None:
        """Each variant reports its own kind."""
        kinds = [data_point.kind for data_point in DataPointFactory.empty()]
        assert kinds == [
            DataPointKind.PERSONAL_NAME,
            DataPointKind.PHONE_NUMBER,
            DataPointKind.EMAIL,
            DataPointKind.BIRTH_DATE,
            DataPointKind.SSN,
            DataPointKind.ADDRESS,
            DataPointKind.HOUSING,
            DataPointKind.INCOME_SOURCE,
            DataPointKind.INCOME,
            DataPointKind.CREDIT_SCORE,
            DataPointKind.PAYDAY_LOAN,
            DataPointKind.MEMBER_OF_ARMED_FORCES,
            DataPointKind.TIME_AT_ADDRESS,
            DataPointKind.FINANCIAL_ACCOUNT,
        ]

    def test_kind_is_immutable(self) -> None:
        """Reassigning kind is rejected."""
        email = Email()
        with pytest.raises(ValidationError):
            email.kind = DataPointKind.SSN

    def test_kind_cannot_be_overridden_at_construction(self) -> None:
        """A variant refuses a foreign kind."""
        with pytest.raises(ValidationError):
            Email(kind=DataPointKind.SSN)


class TestFlags:
    """Tests for the verified and not_specified flags."""

    def test_defaults(self) -> None:
        email = Email()
        assert email.verified is False
        assert email.not_specified is False

    @pytest.mark.parametrize("field_name", ["verified", "not_specified"])
    def test_none_rejected(self, field_name: str) -> None:
        with pytest.raises(ValidationError):
            Email(**{field_name: None})


class TestComplete:
    """Tests for completeness predicates."""

    @pytest.mark.parametrize(
        "data_point", DataPointFactory.populated(), ids=lambda dp: dp.kind.value
    )
    def test_populated_is_complete(self, data_point: DataPoint) -> None:
        """Every fully populated variant is complete."""
        assert data_point.complete() is True

    @pytest.mark.parametrize("data_point", DataPointFactory.empty(), ids=lambda dp: dp.kind.value)
    def test_empty_is_incomplete(self, data_point: DataPoint) -> None:
        """Every empty variant is incomplete."""
        assert data_point.complete() is False

    def test_partial_name_is_incomplete(self) -> None:
        """Both name parts are required."""
        assert PersonalName(first_name="Ada").complete() is False

    def test_phone_needs_country_code(self) -> None:
        """An unset country code (-1) keeps the phone incomplete."""
        assert PhoneNumber(phone_number="4155550100").complete() is False

    def test_address_apt_and_country_are_optional(self) -> None:
        """Address only needs address, city, state and zip."""
        address = Address(address="1 Main St", city="Springfield", state_code="IL", zip="62701")
        assert address.complete() is True

    @pytest.mark.parametrize("variant", [Email, SSN])
    def test_not_specified_counts_as_complete(self, variant: type[DataPoint]) -> None:
        """Email and SSN declined by the user are complete without a value."""
        assert variant(not_specified=True).complete() is True

    @pytest.mark.parametrize("variant", [PersonalName, PhoneNumber, BirthDate, Housing])
    def test_not_specified_ignored_elsewhere(self, variant: type[DataPoint]) -> None:
        """Other variants still need their values."""
        assert variant(not_specified=True).complete() is False


class TestPersonalName:
    """Tests for the PersonalName display helpers."""

    def test_full_name(self) -> None:
        assert PersonalName(first_name="Ada", last_name="Lovelace").full_name() == "Ada Lovelace"

    def test_full_name_first_only(self) -> None:
        assert PersonalName(first_name="Ada").full_name() == "Ada"

    def test_full_name_last_only(self) -> None:
        assert PersonalName(last_name="Lovelace").full_name() == "Lovelace"

    def test_full_name_absent(self) -> None:
        assert PersonalName().full_name() is None


class TestAddressDescription:
    """Tests for the US address one-liner."""

    def test_us_address_with_all_components(self) -> None:
        """Components are joined in address, city, state, zip order."""
        address = Address(
            address="1 Main St",
            apt_unit="4B",
            country=Country(iso_code="US"),
            city="Springfield",
            state_code="IL",
            zip="62701",
        )
        assert address.address_description() == "1 Main St, Springfield, IL, 62701"

    def test_missing_components_are_omitted(self) -> None:
        """Absent parts are skipped, not replaced by placeholders."""
        address = Address(address="1 Main St", country=Country(iso_code="US"), zip="62701")
        assert address.address_description() == "1 Main St, 62701"

    def test_non_us_address_has_no_description(self) -> None:
        address = Address(address="10 Downing St", country=Country(iso_code="GB"), city="London")
        assert address.address_description() is None

    def test_address_without_country_has_no_description(self) -> None:
        assert Address(address="1 Main St").address_description() is None


class TestCreditScore:
    """Tests for credit score range descriptions."""

    def test_good_bucket(self) -> None:
        """Index 1 is the good bucket."""
        description = CreditScore(credit_range=1).credit_score_range_description()
        assert description == DEFAULT_STRINGS["credit-score.good"]

    @pytest.mark.parametrize(
        ("index", "key"),
        [
            (0, "credit-score.excellent"),
            (1, "credit-score.good"),
            (2, "credit-score.fair"),
            (3, "credit-score.poor"),
        ],
    )
    def test_all_buckets(self, index: int, key: str) -> None:
        assert CreditScore(credit_range=index).credit_score_range_description() == DEFAULT_STRINGS[key]

    @pytest.mark.parametrize("index", [99, 4, -1, None])
    def test_out_of_range_is_empty(self, index: int | None) -> None:
        """Out-of-range or unset index yields an empty string."""
        assert CreditScore(credit_range=index).credit_score_range_description() == ""

    def test_custom_localizer(self) -> None:
        """Descriptions come from the supplied localization provider."""
        localizer = DictLocalizationProvider({"credit-score.fair": "Correcto"})
        assert CreditScore(credit_range=2).credit_score_range_description(localizer) == "Correcto"


class TestEquality:
    """Tests for structural equality."""

    def test_equal_values_are_equal(self) -> None:
        assert PersonalName(first_name="Ada") == PersonalName(first_name="Ada")

    def test_different_values_differ(self) -> None:
        assert PersonalName(first_name="Ada") != PersonalName(first_name="Grace")

    def test_verified_flag_participates(self) -> None:
        assert Email(email="a@b.co", verified=True) != Email(email="a@b.co")

    def test_not_specified_participates(self) -> None:
        assert SSN(not_specified=True) != SSN()

    def test_verification_compared_deeply(self) -> None:
        """Verifications are compared by value, and both-absent is equal."""
        first = Email(email="a@b.co", verification=VerificationFactory.create())
        second = Email(email="a@b.co", verification=VerificationFactory.create())
        other = Email(
            email="a@b.co",
            verification=VerificationFactory.create(status=VerificationStatus.FAILED),
        )
        assert first == second
        assert first != other
        assert first != Email(email="a@b.co")

    def test_different_variants_differ(self) -> None:
        assert PaydayLoan(used_payday_loan=True) != MemberOfArmedForces(member_of_armed_forces=True)

    def test_taxonomy_entries_compare_by_id(self) -> None:
        """Display strings do not affect taxonomy equality."""
        assert Housing(housing_type=HousingType(housing_type_id=1, description="Rent")) == Housing(
            housing_type=HousingType(housing_type_id=1)
        )


class TestDeepCopy:
    """Tests for deep copies."""

    @pytest.mark.parametrize(
        "data_point", DataPointFactory.populated(), ids=lambda dp: dp.kind.value
    )
    def test_copy_is_equal(self, data_point: DataPoint) -> None:
        data_point.attach_verification(VerificationFactory.create())
        assert data_point.deep_copy() == data_point

    def test_copy_duplicates_verification(self) -> None:
        """The copy owns its own verification."""
        email = Email(email="a@b.co")
        email.attach_verification(VerificationFactory.create())

        copy = email.deep_copy()
        copy.verification.secret = "changed"

        assert copy.verification is not email.verification
        assert email.verification.secret is None

    def test_mutating_copy_leaves_original(self) -> None:
        email = Email(email="a@b.co")
        email.attach_verification(VerificationFactory.create())

        copy = email.deep_copy()
        copy.email = "other@b.co"

        assert email.email == "a@b.co"
        assert email.verified is True


class TestAttachVerification:
    """Tests for attaching verification results."""

    def test_passed_verification_marks_verified(self) -> None:
        phone = PhoneNumber(country_code=1, phone_number="4155550100")
        verification = VerificationFactory.create(status=VerificationStatus.PASSED)

        phone.attach_verification(verification)

        assert phone.verified is True
        assert phone.verification == verification
        assert phone.verification is not verification

    def test_failed_verification_is_attached_unverified(self) -> None:
        phone = PhoneNumber(country_code=1, phone_number="4155550100")

        phone.attach_verification(VerificationFactory.create(status=VerificationStatus.FAILED))

        assert phone.verified is False
        assert phone.verification is not None

    def test_later_edit_clears_attached_verification(self) -> None:
        phone = PhoneNumber(country_code=1, phone_number="4155550100")
        phone.attach_verification(VerificationFactory.create())

        phone.phone_number = "4155550199"

        assert phone.verification is None
        assert phone.verified is False


class TestSSN:
    """Tests for the SSN placeholder."""

    def test_unknown_valid_placeholder(self) -> None:
        assert SSN(ssn=UNKNOWN_VALID_SSN).is_unknown_valid is True
        assert SSN(ssn="123456789").is_unknown_valid is False
