"""Retry and timeout policy for atomic ledger writes."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from budgetbook.domain.shared.exceptions import (
    ErrorCode,
    PostingTimeoutError,
    ValidationError,
    WriteConflictError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_RETRY_WAIT_SECONDS = 1.0


class PostingDeadline:
    """
    Point in time after which no new commit may start.

    Attempts call ``check()`` right before committing. A commit that has
    started always runs to completion, so a ``PostingTimeoutError`` is only
    ever raised while nothing has been written.
    """

    def __init__(self, timeout_seconds: Optional[float]):
        self.timeout_seconds = timeout_seconds
        self._expires_at = (
            None if timeout_seconds is None else time.monotonic() + timeout_seconds
        )

    def remaining(self) -> Optional[float]:
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - time.monotonic())

    @property
    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def check(self) -> None:
        if self.expired:
            raise PostingTimeoutError(self.timeout_seconds or 0.0)


@dataclass(frozen=True)
class PostingPolicy:
    """
    How hard the ledger tries before giving up on an atomic write.

    Attributes
    ----------
    max_attempts
        Total attempts (first try included) when a write conflict occurs
    retry_wait_seconds
        Base of the exponential back-off between attempts
    timeout_seconds
        Deadline for reaching a commit, retries included; None disables
    max_amount
        Largest amount a single transaction may carry; None disables
    """

    max_attempts: int = 3
    retry_wait_seconds: float = 0.05
    timeout_seconds: Optional[float] = 10.0
    max_amount: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            msg = "max_attempts must be at least 1"
            raise ValueError(msg)

    def check_amount(self, amount: Decimal, field: str = "amount") -> None:
        if self.max_amount is not None and amount > self.max_amount:
            msg = f"{field.capitalize()} exceeds the maximum of {self.max_amount}"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_AMOUNT,
                details={field: str(amount), "max_amount": str(self.max_amount)},
            )

    def retrying(self, deadline: Optional[PostingDeadline] = None) -> AsyncRetrying:
        """Retry controller that repeats only on write conflicts.

        With a ``deadline`` the back-off never sleeps past it.
        """
        backoff = wait_exponential(
            multiplier=self.retry_wait_seconds,
            max=MAX_RETRY_WAIT_SECONDS,
        )

        def wait(retry_state: RetryCallState) -> float:
            seconds = backoff(retry_state)
            remaining = deadline.remaining() if deadline else None
            return seconds if remaining is None else min(seconds, remaining)

        return AsyncRetrying(
            retry=retry_if_exception_type(WriteConflictError),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait,
            before_sleep=before_sleep_log(logger, logging.INFO),
            reraise=True,
        )

    async def run(self, operation: Callable[[PostingDeadline], Awaitable[T]]) -> T:
        """Run ``operation`` with conflict retries under the posting deadline.

        ``operation`` must open its own unit of work on every call and call
        ``deadline.check()`` right before it commits. The operation is never
        cancelled, so a commit in flight is not torn down halfway.

        Raises
        ------
        WriteConflictError
            If every attempt hit a conflicting concurrent write
        PostingTimeoutError
            If the deadline passed before an attempt reached its commit
        """
        deadline = PostingDeadline(self.timeout_seconds)
        async for attempt in self.retrying(deadline):
            with attempt:
                deadline.check()
                if attempt.retry_state.attempt_number > 1:
                    logger.debug(
                        "Retrying ledger write (attempt %d/%d)",
                        attempt.retry_state.attempt_number,
                        self.max_attempts,
                    )
                result = await operation(deadline)
        return result
