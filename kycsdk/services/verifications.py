"""Verification service.

Drives the verification lifecycle against the API:

    start -> pending -> complete (passed/failed)
                ^
                +---- restart

Status probes are read-only and may be issued in any state. The service
keeps no state between calls; callers attach the returned Verification
to the originating data point with `DataPoint.attach_verification`.
"""

from collections.abc import Sequence
from typing import Any

from kycsdk.api.auth import AccessAndUserToken, AccessToken
from kycsdk.api.images import Base64ImageEncoder, ImageEncoder
from kycsdk.api.router import Route, url_for
from kycsdk.api.transport import Transport
from kycsdk.datapoints.models import BirthDate, Email, PhoneNumber
from kycsdk.datapoints.serializer import parse_verification
from kycsdk.datapoints.verification import Verification
from kycsdk.exceptions import JsonError
from kycsdk.observability.logging import get_logger

logger = get_logger(__name__)


class VerificationService:
    """Starts, polls, completes and restarts verifications."""

    def __init__(
        self,
        transport: Transport,
        image_encoder: ImageEncoder | None = None,
        show_verification_secret: bool = True,
        document_datapoint_type: str = "AU10TIX",
    ) -> None:
        """Initialize the service.

        Args:
            transport: JSON transport
            image_encoder: Encoder for document and selfie images
            show_verification_secret: Ask the server to return the secret
                with started verifications (test automation only)
            document_datapoint_type: Datapoint type for document checks
        """
        self._transport = transport
        self._image_encoder = image_encoder or Base64ImageEncoder()
        self._show_verification_secret = show_verification_secret
        self._document_datapoint_type = document_datapoint_type

    def _expect_verification(self, payload: Any, operation: str) -> Verification:
        verification = parse_verification(payload)
        if verification is None:
            logger.error("verification_payload_missing", operation=operation)
            raise JsonError(f"{operation}: response has no verification payload", payload)
        return verification

    async def _start(
        self,
        developer_key: str,
        project_key: str,
        datapoint_type: str,
        datapoint: dict[str, Any],
    ) -> Verification:
        logger.info("verification_start", datapoint_type=datapoint_type)
        payload = await self._transport.post(
            url_for(self._transport.base_url, Route.VERIFICATION_START),
            AccessToken(developer_key=developer_key, project_key=project_key),
            {
                "datapoint_type": datapoint_type,
                "show_verification_secret": self._show_verification_secret,
                "datapoint": datapoint,
            },
            filter_invalid_token_result=True,
        )
        verification = self._expect_verification(payload, f"start_{datapoint_type}_verification")
        logger.info(
            "verification_started",
            datapoint_type=datapoint_type,
            verification_id=verification.verification_id,
            status=verification.status.value,
        )
        return verification

    async def start_phone_verification(
        self, developer_key: str, project_key: str, phone: PhoneNumber
    ) -> Verification:
        """Send a one-time code to the phone number."""
        return await self._start(
            developer_key,
            project_key,
            "phone",
            {"country_code": phone.country_code, "phone_number": phone.phone_number},
        )

    async def start_email_verification(
        self, developer_key: str, project_key: str, email: Email
    ) -> Verification:
        """Send a one-time code to the email address."""
        return await self._start(developer_key, project_key, "email", {"email": email.email})

    async def start_birth_date_verification(
        self, developer_key: str, project_key: str, birth_date: BirthDate
    ) -> Verification:
        date = birth_date.date.isoformat() if birth_date.date is not None else None
        return await self._start(developer_key, project_key, "birthDate", {"date": date})

    async def start_document_verification(
        self,
        developer_key: str,
        project_key: str,
        user_token: str,
        document_images: Sequence[Any],
        selfie: Any | None = None,
        liveness_data: dict[str, Any] | None = None,
        workflow_object_id: str | None = None,
    ) -> Verification:
        """Upload document images for OCR and liveness checks.

        The returned verification is usually pending; poll it with
        `document_verification_status`.
        """
        encode = self._image_encoder.to_base64
        parameters: dict[str, Any] = {
            "datapoint_type": self._document_datapoint_type,
            "datapoint": {
                "document_images": [{"image_array": encode(image)} for image in document_images],
                "selfie": {"image_array": encode(selfie)} if selfie is not None else None,
                "liveness_data": liveness_data,
            },
        }
        if workflow_object_id is not None:
            parameters["workflow_object_id"] = workflow_object_id

        logger.info(
            "document_verification_start",
            image_count=len(document_images),
            has_selfie=selfie is not None,
            workflow_object_id=workflow_object_id,
        )
        payload = await self._transport.post(
            url_for(self._transport.base_url, Route.DOCUMENT_VERIFICATION),
            AccessAndUserToken(
                developer_key=developer_key,
                project_key=project_key,
                user_token=user_token,
            ),
            parameters,
            filter_invalid_token_result=True,
        )
        return self._expect_verification(payload, "start_document_verification")

    async def document_verification_status(
        self, developer_key: str, project_key: str, verification_id: str
    ) -> Verification:
        logger.info("document_verification_status", verification_id=verification_id)
        payload = await self._transport.get(
            url_for(
                self._transport.base_url,
                Route.DOCUMENT_VERIFICATION_STATUS,
                verification_id=verification_id,
            ),
            AccessToken(developer_key=developer_key, project_key=project_key),
            filter_invalid_token_result=True,
        )
        return self._expect_verification(payload, "document_verification_status")

    async def complete_verification(
        self,
        developer_key: str,
        project_key: str,
        verification_id: str,
        secret: str | None = None,
    ) -> Verification:
        """Submit the out-of-band secret (e.g. the SMS code)."""
        logger.info("verification_complete", verification_id=verification_id)
        payload = await self._transport.post(
            url_for(
                self._transport.base_url,
                Route.VERIFICATION_FINISH,
                verification_id=verification_id,
            ),
            AccessToken(developer_key=developer_key, project_key=project_key),
            {"secret": secret},
            filter_invalid_token_result=True,
        )
        verification = self._expect_verification(payload, "complete_verification")
        logger.info(
            "verification_completed",
            verification_id=verification.verification_id,
            status=verification.status.value,
        )
        return verification

    async def verification_status(
        self, developer_key: str, project_key: str, verification_id: str
    ) -> Verification:
        logger.info("verification_status", verification_id=verification_id)
        payload = await self._transport.get(
            url_for(
                self._transport.base_url,
                Route.VERIFICATION_STATUS,
                verification_id=verification_id,
            ),
            AccessToken(developer_key=developer_key, project_key=project_key),
            filter_invalid_token_result=True,
        )
        return self._expect_verification(payload, "verification_status")

    async def restart_verification(
        self, developer_key: str, project_key: str, verification_id: str
    ) -> Verification:
        """Reset the verification to pending and resend the secret.

        Safe to call on a verification that is already pending.
        """
        logger.info("verification_restart", verification_id=verification_id)
        payload = await self._transport.post(
            url_for(
                self._transport.base_url,
                Route.VERIFICATION_RESTART,
                verification_id=verification_id,
            ),
            AccessToken(developer_key=developer_key, project_key=project_key),
            None,
            filter_invalid_token_result=True,
        )
        return self._expect_verification(payload, "restart_verification")
