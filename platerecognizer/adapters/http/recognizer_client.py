import logging
from typing import Any, Mapping, Optional, Type, TypeVar, Union

import anyio
import httpx
from pydantic import BaseModel, ValidationError

from platerecognizer.core.config import ClientConfig, build_config
from platerecognizer.core.errors import (
    RecognitionRequestError,
    RecognitionTimeoutError,
    RequestError,
    StatisticsRequestError,
    StatisticsTimeoutError,
)
from platerecognizer.adapters.observability.logging_observer import LoggingObserver
from platerecognizer.domain.models import RecognitionResult, UsageStatistics
from platerecognizer.domain.requests import RecognitionRequest
from platerecognizer.domain import services
from platerecognizer.ports.observer_port import RequestObserverPort
from platerecognizer.ports.recognizer_port import PlateRecognizerPort

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT", bound=BaseModel)


class RecognizerClient(PlateRecognizerPort):
    """
    Async client for the Plate Recognizer cloud API.

    Holds a frozen ClientConfig and one httpx.AsyncClient that carries the
    token header and timeout. Calls share nothing else, so one instance can
    serve concurrent requests.
    """
    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any]],
        *,
        observer: Optional[RequestObserverPort] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = build_config(config)
        self.observer = observer or LoggingObserver()
        self._session = httpx.AsyncClient(
            base_url=self.config.url,
            headers={"Authorization": f"Token {self.config.api_key}"},
            timeout=httpx.Timeout(self.config.timeout_seconds),
            transport=transport,
        )
        logger.debug("Plate Recognizer client configured for %s", self.config.url)

    async def __aenter__(self) -> "RecognizerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._session.aclose()

    async def recognize(self, request: RecognitionRequest) -> RecognitionResult:
        url = services.combine_urls(self.config.url, services.PLATE_READER_PATH)
        data = services.build_form_data(request, self.config.default_regions)
        image = request.image

        if image.kind == "bytes":
            files = {"upload": (image.upload_name, image.data)}
            return await self._exchange(
                "POST", url, RecognitionResult,
                RecognitionRequestError, RecognitionTimeoutError,
                data=data, files=files,
            )

        try:
            upload = open(image.path, "rb")
        except OSError as exc:
            raise self._failed("POST", url, RecognitionRequestError(url, exc)) from exc

        # httpx streams the open file in chunks; the handle lives for this call only
        with upload:
            return await self._exchange(
                "POST", url, RecognitionResult,
                RecognitionRequestError, RecognitionTimeoutError,
                data=data, files={"upload": upload},
            )

    async def get_usage_statistics(self) -> UsageStatistics:
        url = services.combine_urls(self.config.url, services.STATISTICS_PATH)
        return await self._exchange(
            "GET", url, UsageStatistics,
            StatisticsRequestError, StatisticsTimeoutError,
        )

    async def _exchange(
        self,
        method: str,
        url: str,
        model: Type[ResultT],
        error_cls: Type[RequestError],
        timeout_cls: Type[RequestError],
        **kwargs: Any,
    ) -> ResultT:
        self._notify("on_request", method, url)
        try:
            with anyio.fail_after(self.config.timeout_seconds):
                response = await self._session.request(method, url, **kwargs)
            response.raise_for_status()
        except (httpx.TimeoutException, TimeoutError) as exc:
            raise self._failed(method, url, timeout_cls(url, exc)) from exc
        except httpx.HTTPStatusError as exc:
            error = error_cls(
                url, exc,
                status_code=exc.response.status_code,
                body=exc.response.text,
            )
            raise self._failed(method, url, error) from exc
        except httpx.HTTPError as exc:
            raise self._failed(method, url, error_cls(url, exc)) from exc

        try:
            payload = response.json()
            result = model.model_validate(payload)
        except (ValueError, ValidationError) as exc:
            error = error_cls(url, exc, status_code=response.status_code, body=response.text)
            raise self._failed(method, url, error) from exc

        self._notify("on_response", method, url, response.status_code, payload)
        return result

    def _failed(self, method: str, url: str, error: RequestError) -> RequestError:
        self._notify("on_error", method, url, error)
        return error

    def _notify(self, event: str, *args: Any) -> None:
        # Observer problems are logged and never change the outcome of a call
        try:
            getattr(self.observer, event)(*args)
        except Exception:
            logger.exception("Request observer failed in %s", event)
