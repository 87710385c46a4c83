"""Onboarding API client.

Usage:
    from kycsdk.client import KycClient

    async with KycClient.from_settings(developer_key="dk", project_key="pk") as client:
        user = await client.create_user(data_points)
        verification = await client.start_phone_verification(phone)
"""

from collections.abc import Callable, Sequence
from typing import Any

from kycsdk.api.images import ImageEncoder
from kycsdk.api.transport import HttpxTransport, Transport
from kycsdk.config import get_settings
from kycsdk.config.settings import Settings
from kycsdk.datapoints.collection import DataPointList
from kycsdk.datapoints.models import BirthDate, Email, PhoneNumber
from kycsdk.datapoints.taxonomy import HousingType, IncomeType, SalaryFrequency
from kycsdk.datapoints.user import User
from kycsdk.datapoints.verification import Verification
from kycsdk.observability.logging import setup_logging
from kycsdk.services.users import UserService
from kycsdk.services.verifications import VerificationService


class KycClient:
    """Async client binding developer/project keys to both services.

    Attributes:
        developer_key: Developer key sent with every request
        project_key: Project key sent with every request
        users: User record service
        verifications: Verification service
    """

    def __init__(
        self,
        developer_key: str,
        project_key: str,
        transport: Transport,
        image_encoder: ImageEncoder | None = None,
        show_verification_secret: bool = True,
        document_datapoint_type: str = "AU10TIX",
    ) -> None:
        self.developer_key = developer_key
        self.project_key = project_key
        self._transport = transport
        self.users = UserService(transport)
        self.verifications = VerificationService(
            transport,
            image_encoder=image_encoder,
            show_verification_secret=show_verification_secret,
            document_datapoint_type=document_datapoint_type,
        )

    @classmethod
    def from_settings(
        cls,
        developer_key: str,
        project_key: str,
        settings: Settings | None = None,
        on_invalid_session: Callable[[], None] | None = None,
        image_encoder: ImageEncoder | None = None,
    ) -> "KycClient":
        """Create a client with an httpx transport configured from settings.

        Also configures structured logging from `settings.observability`;
        `settings.debug` forces the DEBUG level.
        """
        settings = settings or get_settings()
        logging_config = settings.observability.logging
        setup_logging(
            level="DEBUG" if settings.debug else logging_config.level,
            format=logging_config.format,
            redact_pii=logging_config.redact_pii,
        )
        transport = HttpxTransport(
            base_url=settings.api.base_url,
            timeout=settings.api.timeout,
            on_invalid_session=on_invalid_session,
        )
        return cls(
            developer_key=developer_key,
            project_key=project_key,
            transport=transport,
            image_encoder=image_encoder,
            show_verification_secret=settings.verification.show_verification_secret,
            document_datapoint_type=settings.verification.document_datapoint_type,
        )

    async def __aenter__(self) -> "KycClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the transport if it holds resources."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()

    # Users
    async def create_user(self, data_points: DataPointList) -> User:
        return await self.users.create_user(self.developer_key, self.project_key, data_points)

    async def login_with(self, verifications: Sequence[Verification]) -> User:
        return await self.users.login_with(self.developer_key, self.project_key, verifications)

    async def fetch_user_data(
        self,
        user_token: str,
        known_housing_types: Sequence[HousingType] = (),
        known_income_types: Sequence[IncomeType] = (),
        known_salary_frequencies: Sequence[SalaryFrequency] = (),
        suppress_auth_failure_side_effects: bool = False,
    ) -> User:
        return await self.users.fetch_user_data(
            self.developer_key,
            self.project_key,
            user_token,
            known_housing_types=known_housing_types,
            known_income_types=known_income_types,
            known_salary_frequencies=known_salary_frequencies,
            suppress_auth_failure_side_effects=suppress_auth_failure_side_effects,
        )

    async def update_user_data(self, user_token: str, data_points: DataPointList) -> User:
        return await self.users.update_user_data(
            self.developer_key, self.project_key, user_token, data_points
        )

    # Verifications
    async def start_phone_verification(self, phone: PhoneNumber) -> Verification:
        return await self.verifications.start_phone_verification(
            self.developer_key, self.project_key, phone
        )

    async def start_email_verification(self, email: Email) -> Verification:
        return await self.verifications.start_email_verification(
            self.developer_key, self.project_key, email
        )

    async def start_birth_date_verification(self, birth_date: BirthDate) -> Verification:
        return await self.verifications.start_birth_date_verification(
            self.developer_key, self.project_key, birth_date
        )

    async def start_document_verification(
        self,
        user_token: str,
        document_images: Sequence[Any],
        selfie: Any | None = None,
        liveness_data: dict[str, Any] | None = None,
        workflow_object_id: str | None = None,
    ) -> Verification:
        return await self.verifications.start_document_verification(
            self.developer_key,
            self.project_key,
            user_token,
            document_images,
            selfie=selfie,
            liveness_data=liveness_data,
            workflow_object_id=workflow_object_id,
        )

    async def document_verification_status(self, verification_id: str) -> Verification:
        return await self.verifications.document_verification_status(
            self.developer_key, self.project_key, verification_id
        )

    async def complete_verification(
        self, verification_id: str, secret: str | None = None
    ) -> Verification:
        return await self.verifications.complete_verification(
            self.developer_key, self.project_key, verification_id, secret
        )

    async def verification_status(self, verification_id: str) -> Verification:
        return await self.verifications.verification_status(
            self.developer_key, self.project_key, verification_id
        )

    async def restart_verification(self, verification_id: str) -> Verification:
        return await self.verifications.restart_verification(
            self.developer_key, self.project_key, verification_id
        )
