"""Onboarding API client.

Usage:
    from kycsdk.client import KycClient

    async with KycClient.from_settings(developer_key="dk", project_key="pk") as client:
        verification = await client.start_phone_verification(phone)
        verification = await client.complete_verification(
            verification.verification_id, secret="123456"
        )
        phone.attach_verification(verification)
"""

from kycsdk.client.client import KycClient

__all__ = ["KycClient"]
