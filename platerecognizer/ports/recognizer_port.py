from typing import Protocol

from platerecognizer.domain.models import RecognitionResult, UsageStatistics
from platerecognizer.domain.requests import RecognitionRequest


class PlateRecognizerPort(Protocol):
    async def recognize(self, request: RecognitionRequest) -> RecognitionResult:
        ...

    async def get_usage_statistics(self) -> UsageStatistics:
        ...
