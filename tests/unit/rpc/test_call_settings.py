import pytest
from pydantic import ValidationError

from rpc_kit.rpc.call_settings import (
    RetrySettings,
    UnaryCallSettings,
    UnaryCallSettingsBuilder,
)


class TestRetrySettings:
    def test_defaults(self) -> None:
        settings = RetrySettings()
        assert settings.total_timeout_ms == 0
        assert settings.retry_delay_multiplier == 1.0

    def test_rejects_negative_durations(self) -> None:
        with pytest.raises(ValidationError):
            RetrySettings(total_timeout_ms=-1)

    def test_rejects_shrinking_multiplier(self) -> None:
        with pytest.raises(ValidationError):
            RetrySettings(retry_delay_multiplier=0.5)

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            RetrySettings(jitter=True)  # type: ignore[call-arg]

    def test_is_frozen(self) -> None:
        settings = RetrySettings()
        with pytest.raises(ValidationError):
            settings.max_attempts = 3  # type: ignore[misc]


class TestUnaryCallSettingsBuilder:
    def test_simple_timeout_no_retries(self) -> None:
        settings = (
            UnaryCallSettingsBuilder()
            .set_retryable_codes(["UNAVAILABLE"])
            .set_simple_timeout_no_retries(2000)
            .build()
        )

        assert settings.retryable_codes == frozenset()
        assert settings.retry_settings.total_timeout_ms == 2000
        assert settings.retry_settings.max_rpc_timeout_ms == 2000
        assert settings.retry_settings.max_attempts == 1

    def test_simple_timeout_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError, match="must be positive"):
            UnaryCallSettingsBuilder().set_simple_timeout_no_retries(0)

    def test_to_builder_round_trip(self) -> None:
        settings = UnaryCallSettings(
            retryable_codes=frozenset({"UNAVAILABLE", "DEADLINE_EXCEEDED"}),
            retry_settings=RetrySettings(max_attempts=5),
        )
        assert settings.to_builder().build() == settings
