"""Client-side model and orchestration layer for identity onboarding.

Represents a user's personal data as typed, independently verifiable
data points and drives their verification against the onboarding API.
"""

__version__ = "0.1.0"
