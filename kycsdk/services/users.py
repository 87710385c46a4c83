"""User record service.

Creates, logs in, fetches and updates a user's full set of data points.
Each operation is a single round trip; responses without a user payload
raise JsonError and transport errors propagate unchanged.
"""

from collections.abc import Iterable, Sequence
from typing import Any, cast

from kycsdk.api.auth import AccessAndUserToken, AccessToken
from kycsdk.api.router import Route, url_for
from kycsdk.api.transport import Transport
from kycsdk.datapoints.collection import DataPointList
from kycsdk.datapoints.enums import DataPointKind
from kycsdk.datapoints.models import SSN, Housing, IncomeSource
from kycsdk.datapoints.serializer import (
    parse_user,
    serialize_data_point_list,
    serialize_verification,
)
from kycsdk.datapoints.taxonomy import (
    HousingType,
    IncomeType,
    SalaryFrequency,
    TaxonomyEntry,
)
from kycsdk.datapoints.user import User
from kycsdk.datapoints.verification import Verification
from kycsdk.exceptions import IncorrectParametersError, JsonError
from kycsdk.observability.logging import get_logger

logger = get_logger(__name__)


def _index_by_id(entries: Iterable[TaxonomyEntry]) -> dict[Any, TaxonomyEntry]:
    """Map entry ids to entries, keeping the first entry for each id."""
    index: dict[Any, TaxonomyEntry] = {}
    for entry in entries:
        index.setdefault(entry.entry_id, entry)
    return index


def reconcile_taxonomies(
    data_points: DataPointList,
    housing_types: Iterable[HousingType] = (),
    income_types: Iterable[IncomeType] = (),
    salary_frequencies: Iterable[SalaryFrequency] = (),
) -> None:
    """Swap server-embedded taxonomy entries for the canonical local ones.

    Housing and income source data points whose entry id matches a
    canonical entry get that entry object. Entries without a match are
    left as the server sent them. Time-at-address is not reconciled.
    """
    housing_index = _index_by_id(housing_types)
    income_index = _index_by_id(income_types)
    frequency_index = _index_by_id(salary_frequencies)

    for data_point in data_points.get(DataPointKind.HOUSING):
        housing = cast(Housing, data_point)
        if housing.housing_type is None:
            continue
        canonical = housing_index.get(housing.housing_type.entry_id)
        if canonical is not None:
            housing.housing_type = canonical

    for data_point in data_points.get(DataPointKind.INCOME_SOURCE):
        income_source = cast(IncomeSource, data_point)
        if income_source.income_type is not None:
            canonical = income_index.get(income_source.income_type.entry_id)
            if canonical is not None:
                income_source.income_type = canonical
        if income_source.salary_frequency is not None:
            canonical = frequency_index.get(income_source.salary_frequency.entry_id)
            if canonical is not None:
                income_source.salary_frequency = canonical


def prepare_update_payload(data_points: DataPointList) -> DataPointList:
    """Flatten into a fresh list and drop a placeholder SSN.

    The SSN entries are left out when the first SSN holds the unknown
    valid SSN placeholder and the user has not declined to provide one,
    so the stored SSN is not overwritten.
    """
    outgoing = DataPointList(data_points)
    ssn = outgoing.first(DataPointKind.SSN)
    if isinstance(ssn, SSN) and ssn.is_unknown_valid and not ssn.not_specified:
        outgoing.remove(DataPointKind.SSN)
    return outgoing


class UserService:
    """Remote operations on user records."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def _expect_user(self, payload: Any, operation: str) -> User:
        user = parse_user(payload)
        if user is None:
            logger.error("user_payload_missing", operation=operation)
            raise JsonError(f"{operation}: response has no user payload", payload)
        return user

    async def create_user(
        self,
        developer_key: str,
        project_key: str,
        data_points: DataPointList,
    ) -> User:
        """Create a user from a set of data points."""
        logger.info("create_user", data_point_count=len(data_points))
        payload = await self._transport.post(
            url_for(self._transport.base_url, Route.USER),
            AccessToken(developer_key=developer_key, project_key=project_key),
            {"data_points": serialize_data_point_list(data_points)},
            filter_invalid_token_result=True,
        )
        return self._expect_user(payload, "create_user")

    async def login_with(
        self,
        developer_key: str,
        project_key: str,
        verifications: Sequence[Verification],
    ) -> User:
        """Log in with two completed verifications.

        The first and last of `verifications` are sent.

        Raises:
            IncorrectParametersError: Fewer than two verifications supplied;
                no request is made
        """
        if len(verifications) < 2:
            raise IncorrectParametersError(
                f"login requires two verifications, got {len(verifications)}"
            )
        first, second = verifications[0], verifications[-1]
        logger.info("login_with", verification_ids=[first.verification_id, second.verification_id])
        payload = await self._transport.post(
            url_for(self._transport.base_url, Route.LOGIN),
            AccessToken(developer_key=developer_key, project_key=project_key),
            {
                "verifications": {
                    "data": [serialize_verification(first), serialize_verification(second)],
                }
            },
            filter_invalid_token_result=True,
        )
        return self._expect_user(payload, "login_with")

    async def fetch_user_data(
        self,
        developer_key: str,
        project_key: str,
        user_token: str,
        known_housing_types: Iterable[HousingType] = (),
        known_income_types: Iterable[IncomeType] = (),
        known_salary_frequencies: Iterable[SalaryFrequency] = (),
        suppress_auth_failure_side_effects: bool = False,
    ) -> User:
        """Fetch the user's data points, reconciled against local taxonomies."""
        logger.info("fetch_user_data")
        payload = await self._transport.get(
            url_for(self._transport.base_url, Route.USER),
            AccessAndUserToken(
                developer_key=developer_key,
                project_key=project_key,
                user_token=user_token,
            ),
            filter_invalid_token_result=not suppress_auth_failure_side_effects,
        )
        user = self._expect_user(payload, "fetch_user_data")
        reconcile_taxonomies(
            user.user_data,
            housing_types=known_housing_types,
            income_types=known_income_types,
            salary_frequencies=known_salary_frequencies,
        )
        return user

    async def update_user_data(
        self,
        developer_key: str,
        project_key: str,
        user_token: str,
        data_points: DataPointList,
    ) -> User:
        """Send updated data points for the user."""
        outgoing = prepare_update_payload(data_points)
        logger.info(
            "update_user_data",
            data_point_count=len(outgoing),
            kinds=[kind.wire_name for kind in outgoing.kinds()],
        )
        payload = await self._transport.put(
            url_for(self._transport.base_url, Route.USER),
            AccessAndUserToken(
                developer_key=developer_key,
                project_key=project_key,
                user_token=user_token,
            ),
            {"data_points": serialize_data_point_list(outgoing)},
            filter_invalid_token_result=True,
        )
        return self._expect_user(payload, "update_user_data")
