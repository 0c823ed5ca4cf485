"""Services package - service class exports."""

from app.services.frequency import FrequencyService

__all__ = [
    "FrequencyService",
]
