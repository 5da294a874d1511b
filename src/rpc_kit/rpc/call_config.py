# src/rpc_kit/rpc/call_config.py

"""Declarative per-method retry defaults.

A service ships its retry defaults as YAML:

    retry_codes:
      idempotent: [DEADLINE_EXCEEDED, UNAVAILABLE]
      non_idempotent: []
    retry_params:
      default:
        initial_retry_delay_ms: 100
        retry_delay_multiplier: 1.3
        max_retry_delay_ms: 60000
        initial_rpc_timeout_ms: 20000
        max_rpc_timeout_ms: 20000
        total_timeout_ms: 600000
    methods:
      Echo:
        retry_codes_name: idempotent
        retry_params_name: default
"""

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import BaseModel

from .call_settings import RetrySettings, UnaryCallSettingsBuilder
from .client_settings import BaseClientSettingsBuilder

logger = logging.getLogger(__name__)


class MethodConfig(BaseModel):
    retry_codes_name: str
    retry_params_name: str

    class Config:
        extra = "forbid"


class CallConfig(BaseModel):
    retry_codes: dict[str, list[str]] = {}
    retry_params: dict[str, RetrySettings] = {}
    methods: dict[str, MethodConfig] = {}

    class Config:
        extra = "forbid"

    def retry_codes_for(self, method: str) -> frozenset[str]:
        name = self._method(method).retry_codes_name
        try:
            return frozenset(self.retry_codes[name])
        except KeyError:
            raise KeyError(f"Retry codes '{name}' not found (method '{method}')")

    def retry_settings_for(self, method: str) -> RetrySettings:
        name = self._method(method).retry_params_name
        try:
            return self.retry_params[name]
        except KeyError:
            raise KeyError(f"Retry params '{name}' not found (method '{method}')")

    def apply(self, builders: Mapping[str, UnaryCallSettingsBuilder]) -> None:
        """Push configured values into `builders`, keyed by method name.

        Stops at the first method that fails; earlier builders keep their
        new values.
        """
        # Mapping keys and values iterate in the same order.
        methods = iter(builders)

        def update(builder: UnaryCallSettingsBuilder) -> None:
            method = next(methods)
            codes = self.retry_codes_for(method)
            retry_settings = self.retry_settings_for(method)
            builder.set_retryable_codes(codes).set_retry_settings(retry_settings)
            logger.debug("Applied call config to method: %s", method)

        BaseClientSettingsBuilder.apply_to_all_unary_methods(builders.values(), update)

    def _method(self, method: str) -> MethodConfig:
        try:
            return self.methods[method]
        except KeyError:
            raise KeyError(f"Method '{method}' not found in call config")


def load_call_config(path: str | Path) -> CallConfig:
    logger.info("Loading call config from: %s", path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    config = CallConfig.model_validate(data)
    logger.info("Loaded call config for %d methods", len(config.methods))
    return config
