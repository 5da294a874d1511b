# src/rpc_kit/rpc/call_settings.py

from collections.abc import Iterable
from dataclasses import dataclass, field

from pydantic import BaseModel, Field


class RetrySettings(BaseModel):
    """Retry and timeout parameters for a single method.

    Zero values mean "not set". Enforcement belongs to the call layer.
    """

    total_timeout_ms: int = Field(default=0, ge=0)
    initial_retry_delay_ms: int = Field(default=0, ge=0)
    retry_delay_multiplier: float = Field(default=1.0, ge=1.0)
    max_retry_delay_ms: int = Field(default=0, ge=0)
    max_attempts: int = Field(default=0, ge=0)
    initial_rpc_timeout_ms: int = Field(default=0, ge=0)
    rpc_timeout_multiplier: float = Field(default=1.0, ge=1.0)
    max_rpc_timeout_ms: int = Field(default=0, ge=0)

    class Config:
        extra = "forbid"
        frozen = True


@dataclass(frozen=True)
class UnaryCallSettings:
    retryable_codes: frozenset[str] = frozenset()
    retry_settings: RetrySettings = field(default_factory=RetrySettings)

    def to_builder(self) -> "UnaryCallSettingsBuilder":
        return (
            UnaryCallSettingsBuilder()
            .set_retryable_codes(self.retryable_codes)
            .set_retry_settings(self.retry_settings)
        )


class UnaryCallSettingsBuilder:
    """Mutable staging for `UnaryCallSettings`. Not thread-safe."""

    def __init__(self) -> None:
        self._retryable_codes: frozenset[str] = frozenset()
        self._retry_settings = RetrySettings()

    @property
    def retryable_codes(self) -> frozenset[str]:
        return self._retryable_codes

    @property
    def retry_settings(self) -> RetrySettings:
        return self._retry_settings

    def set_retryable_codes(self, codes: Iterable[str]) -> "UnaryCallSettingsBuilder":
        self._retryable_codes = frozenset(codes)
        return self

    def set_retry_settings(
        self, retry_settings: RetrySettings
    ) -> "UnaryCallSettingsBuilder":
        self._retry_settings = retry_settings
        return self

    def set_simple_timeout_no_retries(
        self, timeout_ms: int
    ) -> "UnaryCallSettingsBuilder":
        """Single attempt bounded by `timeout_ms`. Clears retryable codes."""
        if timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {timeout_ms}")
        self._retryable_codes = frozenset()
        self._retry_settings = RetrySettings(
            total_timeout_ms=timeout_ms,
            initial_rpc_timeout_ms=timeout_ms,
            max_rpc_timeout_ms=timeout_ms,
            max_attempts=1,
        )
        return self

    def build(self) -> UnaryCallSettings:
        return UnaryCallSettings(
            retryable_codes=self._retryable_codes,
            retry_settings=self._retry_settings,
        )
