"""Proxy pattern: a rate-limiting server in front of an application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter

MAX_ALLOWED_REQUESTS = 2


class Server(ABC):
    """Answers a request with an HTTP status code and a body."""

    @abstractmethod
    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        """Return (status code, body) for the request."""


class Application(Server):
    """The real application behind the proxy."""

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if url == "/app/status" and method == "GET":
            return 200, "Ok"
        if url == "/create/user" and method == "POST":
            return 201, "User Created"
        return 404, "Not Ok"


class Nginx(Server):
    """Forwards requests to the application, limiting how often each URL is hit."""

    def __init__(
        self,
        application: Server | None = None,
        max_allowed_request: int = MAX_ALLOWED_REQUESTS,
    ) -> None:
        self.application = application if application is not None else Application()
        self.max_allowed_request = max_allowed_request
        self.rate_limiter: Counter[str] = Counter()

    def handle_request(self, url: str, method: str) -> tuple[int, str]:
        if self._is_rate_limit_exceeded(url):
            return 403, "Not Allowed"
        return self.application.handle_request(url, method)

    def _is_rate_limit_exceeded(self, url: str) -> bool:
        if self.rate_limiter[url] + 1 > self.max_allowed_request:
            return True
        self.rate_limiter[url] += 1
        return False