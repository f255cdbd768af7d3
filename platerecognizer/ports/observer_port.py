from typing import Any, Protocol


class RequestObserverPort(Protocol):
    def on_request(self, method: str, url: str) -> None:
        ...

    def on_response(self, method: str, url: str, status_code: int, payload: Any) -> None:
        ...

    def on_error(self, method: str, url: str, error: BaseException) -> None:
        ...
