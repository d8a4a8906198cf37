"""HTTP client for the upstream employee service.

Usage example:
    import requests

    from employee_gateway.infrastructure.cache import EmployeeSnapshotCache
    from employee_gateway.infrastructure.io.http import ResilientEmployeeClient
    from employee_gateway.infrastructure.resilience import RetryPolicy

    client = ResilientEmployeeClient(
        session=requests.Session(),
        base_url="http://localhost:8112/api/v1/employee",
        cache=EmployeeSnapshotCache(),
        retry_policy=RetryPolicy(max_retries=5, base_delay_seconds=1.0),
    )
    employees = client.list_all()
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import override
from urllib.parse import quote

import requests

from ...domain.employees import EmployeeCollection, EmployeeRecord, NewEmployee
from ...domain.employees import find_by_id as find_record_by_id
from ...exceptions import UpstreamFailure, UpstreamFailureKind
from ...observability import get_logger
from ...protocols import EmployeeBackend, RetryPolicy, SnapshotCache
from ..cache import EmployeeSnapshotCache
from ..resilience import RetryPolicy as RetryPolicyImpl
from ..resilience import retry_call
from .validation import (
    IncomingDataError,
    create_request_body,
    delete_request_body,
    parse_delete_response,
    parse_employee_list_response,
    parse_employee_response,
)

logger = get_logger("employee_gateway.infrastructure.http")

type JsonBody = dict[str, object] | None


def build_employee_client(
    *,
    base_url: str,
    max_retries: int,
    retry_backoff_seconds: float,
    max_backoff_seconds: float,
    jitter_seconds: float,
    timeout_seconds: float,
    cache: SnapshotCache | None = None,
) -> ResilientEmployeeClient:
    session = requests.Session()
    session.headers.update({"Accept": "application/json"})
    retry_policy = RetryPolicyImpl(
        max_retries=max_retries,
        base_delay_seconds=retry_backoff_seconds,
        max_delay_seconds=max_backoff_seconds,
        jitter_seconds=jitter_seconds,
    )
    return ResilientEmployeeClient(
        session=session,
        base_url=base_url,
        cache=cache if cache is not None else EmployeeSnapshotCache(),
        retry_policy=retry_policy,
        timeout_seconds=timeout_seconds,
    )


def classify_status(status_code: int) -> UpstreamFailureKind:
    """Map an upstream HTTP error status onto the failure taxonomy."""
    if status_code == 429:
        return UpstreamFailureKind.RATE_LIMITED
    if status_code == 404:
        return UpstreamFailureKind.NOT_FOUND
    if 400 <= status_code < 500:
        return UpstreamFailureKind.MALFORMED
    return UpstreamFailureKind.UNEXPECTED


def _response_details(response: requests.Response) -> str:
    """Return a compact status/body summary for error reporting."""
    try:
        body = response.text
    except (UnicodeDecodeError, ValueError, requests.RequestException):
        body = "<unreadable>"
    body = " ".join(body.split())
    if len(body) > 300:
        body = body[:300] + "..."
    return f"status={response.status_code}, body={body}"


class ResilientEmployeeClient(EmployeeBackend):
    """Upstream employee client with rate-limit retries and a snapshot cache.

    Failure handling:
    - 429 responses are retried with exponential backoff; exhaustion surfaces RATE_LIMITED
    - Exhausted reads fall back to the cached collection when one exists
    - 404 resolves to "absent" for single lookups and NOT_FOUND elsewhere
    - Other 4xx are MALFORMED; 5xx, transport and decoding errors are UNEXPECTED
    - Mutations clear the cache before the first request is sent
    """

    def __init__(
        self,
        *,
        session: requests.Session,
        base_url: str,
        cache: SnapshotCache,
        retry_policy: RetryPolicy | None = None,
        timeout_seconds: float = 10.0,
        sleep: Callable[[float], None] = time.sleep,
        on_retry: Callable[[int], None] | None = None,
    ) -> None:
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        self.retry_policy = retry_policy or RetryPolicyImpl()
        self.timeout_seconds = timeout_seconds
        self._sleep = sleep
        self._on_retry = on_retry

    @override
    def list_all(self) -> EmployeeCollection:
        """Fetch every employee and refresh the cache.

        Raises:
            UpstreamFailure: Any failure, except an exhausted rate limit while
                the cache holds a snapshot.
        """
        try:
            response = self._send("GET", "")
        except UpstreamFailure as failure:
            snapshot = self._fallback_snapshot(failure)
            if snapshot is None:
                raise
            logger.info("Rate limited, returning cached response for %s.", self.base_url)
            return snapshot

        employees = self._decode(parse_employee_list_response, response)
        self.cache.write(employees)
        logger.info("Updated employee cache with %d employees.", len(employees))
        return employees

    @override
    def find_by_id(self, employee_id: str) -> EmployeeRecord | None:
        """Fetch one employee by id.

        Returns None when the upstream answers 404, or when an exhausted rate
        limit falls back to a cached snapshot that lacks the id. An empty id is
        absent without a request, since it would address the listing endpoint.
        """
        if not employee_id:
            return None
        path = f"/{quote(employee_id, safe='')}"
        try:
            response = self._send("GET", path)
        except UpstreamFailure as failure:
            if failure.kind is UpstreamFailureKind.NOT_FOUND:
                logger.debug("Employee id=%s not found upstream.", employee_id)
                return None
            snapshot = self._fallback_snapshot(failure)
            if snapshot is None:
                raise
            logger.info("Rate limited, checking cached employees for id=%s.", employee_id)
            return find_record_by_id(snapshot, employee_id)

        return self._decode(parse_employee_response, response)

    @override
    def create(self, new_employee: NewEmployee) -> EmployeeRecord:
        self.cache.clear()
        response = self._send("POST", "", body=dict(create_request_body(new_employee)))
        record = self._decode(parse_employee_response, response)
        logger.debug("POST request completed with response: %s.", record)
        return record

    @override
    def delete(self, name: str) -> bool:
        self.cache.clear()
        response = self._send("DELETE", "", body=dict(delete_request_body(name)))
        deleted = self._decode(parse_delete_response, response)
        logger.debug("DELETE request for name=%s completed with response: %s.", name, deleted)
        return deleted

    def _fallback_snapshot(self, failure: UpstreamFailure) -> EmployeeCollection | None:
        """Return the cached snapshot if ``failure`` permits serving it."""
        if failure.kind is not UpstreamFailureKind.RATE_LIMITED:
            return None
        return self.cache.read()

    def _send(self, method: str, path: str, *, body: JsonBody = None) -> requests.Response:
        url = f"{self.base_url}{path}"
        return retry_call(
            lambda: self._request_once(method, url, body),
            policy=self.retry_policy,
            sleep=self._sleep,
            on_retry=self._on_retry,
        )

    def _request_once(self, method: str, url: str, body: JsonBody) -> requests.Response:
        try:
            response = self.session.request(method, url, json=body, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            raise UpstreamFailure.unexpected(f"{method} {url} failed: {exc}", cause=exc) from exc

        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            kind = classify_status(response.status_code)
            if kind is UpstreamFailureKind.RATE_LIMITED:
                logger.debug("Rate limit response for %s %s.", method, url)
                message = f"{method} {url} was rate limited."
            else:
                message = f"{method} {url} failed: {_response_details(response)}"
            raise UpstreamFailure(kind, message, cause=exc) from exc
        return response

    @staticmethod
    def _decode[ResultT](
        parser: Callable[[bytes], ResultT], response: requests.Response
    ) -> ResultT:
        try:
            return parser(response.content)
        except IncomingDataError as exc:
            raise UpstreamFailure.unexpected(
                f"Unreadable response from employee service: {exc}", cause=exc
            ) from exc
