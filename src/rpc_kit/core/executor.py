# src/rpc_kit/core/executor.py

import logging
import os
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class ExecutorProvider(Protocol):
    """Supplies the executor used for asynchronous call bookkeeping."""

    def should_auto_close(self) -> bool:
        """True if the client owns the executor and must shut it down."""
        ...

    def get_executor(self) -> Executor: ...


@dataclass(frozen=True)
class FixedExecutorProvider:
    """Always returns the same pre-supplied executor.

    Never auto-closes. The owner of the executor shuts it down.
    """

    executor: Executor

    def should_auto_close(self) -> bool:
        return False

    def get_executor(self) -> Executor:
        return self.executor


def _default_thread_count() -> int:
    return max(4, os.cpu_count() or 1)


@dataclass(frozen=True)
class InstantiatingExecutorProvider:
    """Creates a new thread pool on every `get_executor` call.

    Nothing is created until a client asks for it.
    """

    executor_thread_count: int = _default_thread_count()
    thread_name_prefix: str = "rpc-kit"

    def __post_init__(self) -> None:
        if self.executor_thread_count <= 0:
            raise ValueError(
                f"executor_thread_count must be positive, got {self.executor_thread_count}"
            )

    def should_auto_close(self) -> bool:
        return True

    def get_executor(self) -> Executor:
        logger.debug(
            "Creating ThreadPoolExecutor with max_workers=%d, prefix=%s",
            self.executor_thread_count,
            self.thread_name_prefix,
        )
        return ThreadPoolExecutor(
            max_workers=self.executor_thread_count,
            thread_name_prefix=self.thread_name_prefix,
        )
