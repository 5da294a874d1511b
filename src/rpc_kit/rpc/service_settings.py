# src/rpc_kit/rpc/service_settings.py

"""Base classes for per-service settings.

A service's settings embed a `ClientSettings` and add their own fields,
typically one `UnaryCallSettings` per method:

    class EchoSettings(ServiceSettings):
        def __init__(self, client_settings, echo_settings):
            super().__init__(client_settings)
            self.echo_settings = echo_settings

    class EchoSettingsBuilder(ServiceSettingsBuilder[EchoSettings]):
        def _finalize(self):
            if self.transport_channel_provider is None:
                self.set_transport_channel_provider(default_channel_provider())

        def _create(self, client_settings):
            return EchoSettings(client_settings, self.echo.build())
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from .client_settings import BaseClientSettingsBuilder, ClientSettings, SettingsT

logger = logging.getLogger(__name__)


class ServiceSettings(ABC):
    """Settings for one service. Not modified after creation."""

    def __init__(self, client_settings: ClientSettings) -> None:
        self._client_settings = client_settings

    @property
    def client_settings(self) -> ClientSettings:
        return self._client_settings

    @abstractmethod
    def to_builder(self) -> "ServiceSettingsBuilder[Any]": ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._client_settings!r})"


class ServiceSettingsBuilder(BaseClientSettingsBuilder[SettingsT]):
    """Builder for per-service settings.

    `build()` runs `_finalize()`, requires a transport channel provider,
    then hands a `ClientSettings` snapshot to `_create()`.
    """

    def _finalize(self) -> None:
        """Fill in service defaults. May raise OSError."""

    @abstractmethod
    def _create(self, client_settings: ClientSettings) -> SettingsT: ...

    def build(self) -> SettingsT:
        self._finalize()
        if self._transport_channel_provider is None:
            raise ValueError(
                f"{type(self).__name__} has no transport channel provider; "
                "set one with set_transport_channel_provider()"
            )
        logger.debug(
            "Building %s: transport=%s, endpoint=%s",
            type(self).__name__,
            self._transport_channel_provider.transport_name,
            self._endpoint,
        )
        return self._create(self._client_settings())
