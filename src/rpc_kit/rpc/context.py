# src/rpc_kit/rpc/context.py

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import Executor
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from rpc_kit.core.clock import Clock

from .transport import TransportChannel

if TYPE_CHECKING:
    from .client_settings import ClientSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientContext:
    """Resolved, live state of a running client.

    Where settings hold providers, a context holds what they provided.
    """

    executor: Executor
    transport_channel: TransportChannel
    credentials: Any | None
    clock: Clock
    endpoint: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    internal_headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def create(cls, settings: ClientSettings) -> ClientContext:
        """Resolve every provider in `settings` into a live value.

        Each header provider is called exactly once. If the executor cannot
        be created, a channel owned by the provider is closed before the
        error propagates.

        Raises:
            ValueError: If no transport channel provider is configured.
            OSError: Propagated from providers (e.g. credential discovery).
        """
        transport_channel_provider = settings.transport_channel_provider
        if transport_channel_provider is None:
            raise ValueError(
                "Cannot create a ClientContext without a transport channel provider"
            )

        credentials = settings.credentials_provider.get_credentials()
        headers = MappingProxyType(dict(settings.header_provider.get_headers()))
        internal_headers = MappingProxyType(
            dict(settings._internal_header_provider.get_headers())
        )
        transport_channel = transport_channel_provider.get_transport_channel()
        try:
            executor = settings.executor_provider.get_executor()
        except Exception:
            if transport_channel_provider.should_auto_close():
                transport_channel.close()
            raise

        logger.debug(
            "Created ClientContext: transport=%s, endpoint=%s, headers=%d, internal_headers=%d",
            transport_channel.transport_name,
            settings.endpoint,
            len(headers),
            len(internal_headers),
        )

        return cls(
            executor=executor,
            transport_channel=transport_channel,
            credentials=credentials,
            clock=settings.clock,
            endpoint=settings.endpoint,
            headers=headers,
            internal_headers=internal_headers,
        )
