import logging
from typing import Any

from platerecognizer.ports.observer_port import RequestObserverPort

logger = logging.getLogger(__name__)


class LoggingObserver(RequestObserverPort):
    """
    Default request observer: writes the request lifecycle to the
    `platerecognizer` logger at DEBUG level, payloads truncated.
    """
    def __init__(self, max_payload_chars: int = 500, log: logging.Logger = logger):
        self.max_payload_chars = max_payload_chars
        self.log = log

    def _truncate(self, payload: Any) -> str:
        text = repr(payload)
        if len(text) > self.max_payload_chars:
            return text[:self.max_payload_chars] + "..."
        return text

    def on_request(self, method: str, url: str) -> None:
        self.log.debug("%s %s opening", method, url)

    def on_response(self, method: str, url: str, status_code: int, payload: Any) -> None:
        if self.log.isEnabledFor(logging.DEBUG):
            self.log.debug("%s %s -> %s: %s", method, url, status_code, self._truncate(payload))

    def on_error(self, method: str, url: str, error: BaseException) -> None:
        self.log.debug("%s %s failed: %r", method, url, error)
