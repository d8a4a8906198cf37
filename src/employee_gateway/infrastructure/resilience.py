"""Resilience utilities for infrastructure.

Usage example:
    from employee_gateway.infrastructure.resilience import RetryPolicy, retry_call

    policy = RetryPolicy(max_retries=5, base_delay_seconds=1.0, max_delay_seconds=30.0)
    payload = retry_call(lambda: fetch_once(), policy=policy)
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import override

from ..exceptions import UpstreamFailure, UpstreamFailureKind
from ..observability import get_logger
from ..protocols import RetryPolicy as RetryPolicyProtocol

logger = get_logger("employee_gateway.infrastructure.resilience")


@dataclass(frozen=True)
class RetryPolicy(RetryPolicyProtocol):
    """Exponential backoff for rate-limited calls.

    ``max_retries`` counts retries after the first attempt. Only rate-limit
    failures are retryable.
    """

    max_retries: int = 5
    base_delay_seconds: float = 1.0
    max_delay_seconds: float = 30.0
    jitter_seconds: float = 0.0

    @override
    def is_retryable(self, failure: UpstreamFailure) -> bool:
        return failure.kind is UpstreamFailureKind.RATE_LIMITED

    @override
    def should_retry(self, failure: UpstreamFailure, attempt: int) -> bool:
        return self.is_retryable(failure) and attempt < self.max_retries

    @override
    def compute_backoff(self, attempt: int) -> float:
        """Compute the delay before retry ``attempt``, capped at ``max_delay_seconds``."""
        base = min(self.max_delay_seconds, self.base_delay_seconds * (2**attempt))
        if self.jitter_seconds > 0:
            base += random.uniform(0.0, self.jitter_seconds)
        return float(base)


def retry_call[ResultT](
    operation: Callable[[], ResultT],
    *,
    policy: RetryPolicyProtocol,
    sleep: Callable[[float], None] = time.sleep,
    on_retry: Callable[[int], None] | None = None,
) -> ResultT:
    """Run ``operation``, retrying rate-limited failures with backoff.

    Non-retryable failures propagate after the first attempt. When the retry
    budget runs out the last failure is re-raised as ``RATE_LIMITED``.

    Args:
        operation: A single upstream attempt; raises ``UpstreamFailure`` on failure.
        policy: Decides retryability and backoff.
        sleep: Blocking delay function (injected for tests).
        on_retry: Called with the 1-based retry number before each retry sleeps.

    Raises:
        UpstreamFailure: The non-retryable failure, or the exhausted rate limit.
    """
    attempt = 0
    while True:
        try:
            return operation()
        except UpstreamFailure as failure:
            if not policy.should_retry(failure, attempt):
                if not policy.is_retryable(failure):
                    raise
                logger.warning("Rate limit retries exhausted after %d retries.", attempt)
                raise UpstreamFailure.retries_exhausted(failure, attempt) from failure
            delay = policy.compute_backoff(attempt)
            attempt += 1
            logger.info("Retrying due to rate limiting [attempt=%d]...", attempt)
            if on_retry is not None:
                on_retry(attempt)
            sleep(delay)
