# src/rpc_kit/rpc/client_settings.py

"""Settings shared by every service client.

`ClientSettings` holds the cross-cutting configuration a generated client
needs regardless of which methods it calls: executor, credentials, headers,
transport channel, clock and endpoint. It is immutable and only ever
produced by a builder.

Builders start from one of three places:

- `ClientSettingsBuilder()`: library defaults (see `_defaults`).
- `ClientSettingsBuilder(context)`: the live state of a running client,
  frozen into fixed providers.
- `settings.to_builder()`: a verbatim copy of existing settings.

Example:
    >>> settings = (
    ...     ClientSettingsBuilder()
    ...     .set_endpoint("echo.example.com:443")
    ...     .set_transport_channel_provider(provider)
    ...     .build()
    ... )
    >>> tweaked = settings.to_builder().set_endpoint("localhost:7469").build()
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from rpc_kit.core.clock import Clock, NanoClock
from rpc_kit.core.credentials import (
    CredentialsProvider,
    FixedCredentialsProvider,
    NoCredentialsProvider,
)
from rpc_kit.core.executor import (
    ExecutorProvider,
    FixedExecutorProvider,
    InstantiatingExecutorProvider,
)

from .call_settings import UnaryCallSettingsBuilder
from .context import ClientContext
from .headers import FixedHeaderProvider, HeaderProvider, NoHeaderProvider
from .transport import FixedTransportChannelProvider, TransportChannelProvider

logger = logging.getLogger(__name__)

SettingsT = TypeVar("SettingsT")
BuilderT = TypeVar("BuilderT", bound="BaseClientSettingsBuilder")


@dataclass(frozen=True, repr=False)
class ClientSettings:
    """Immutable, finalized client configuration.

    Providers are held by reference and shared with every copy.
    `_internal_header_provider` is for library code only.
    """

    executor_provider: ExecutorProvider
    credentials_provider: CredentialsProvider
    header_provider: HeaderProvider
    _internal_header_provider: HeaderProvider
    transport_channel_provider: TransportChannelProvider | None
    clock: Clock
    endpoint: str | None

    def to_builder(self) -> "ClientSettingsBuilder":
        return ClientSettingsBuilder.from_settings(self)

    def __repr__(self) -> str:
        return _describe(
            type(self).__name__,
            executor_provider=self.executor_provider,
            transport_channel_provider=self.transport_channel_provider,
            credentials_provider=self.credentials_provider,
            header_provider=self.header_provider,
            internal_header_provider=self._internal_header_provider,
            clock=self.clock,
            endpoint=self.endpoint,
        )


def _describe(name: str, **fields: object) -> str:
    parts = ", ".join(f"{key}={value!r}" for key, value in fields.items())
    return f"{name}{{{parts}}}"


class BaseClientSettingsBuilder(ABC, Generic[SettingsT]):
    """Mutable staging for client settings.

    Not thread-safe: confine a builder to one thread while staging.
    `build()` does not consume the builder; every call yields an
    independent snapshot.

    Setters return `self` typed as the concrete builder, so chains keep
    subclass methods available.
    """

    def __init__(self, context: ClientContext | None = None) -> None:
        if context is None:
            self._defaults()
        else:
            self._freeze(context)

    def _defaults(self) -> None:
        logger.debug("Creating %s from defaults", type(self).__name__)
        self._executor_provider: ExecutorProvider = InstantiatingExecutorProvider()
        self._transport_channel_provider: TransportChannelProvider | None = None
        self._credentials_provider: CredentialsProvider = NoCredentialsProvider()
        self._header_provider: HeaderProvider = NoHeaderProvider()
        self._internal_header_provider: HeaderProvider = NoHeaderProvider()
        self._clock: Clock = NanoClock.default_clock()
        self._endpoint: str | None = None

    def _freeze(self, context: ClientContext) -> None:
        logger.debug(
            "Creating %s from context: endpoint=%s",
            type(self).__name__,
            context.endpoint,
        )
        self._executor_provider = FixedExecutorProvider(context.executor)
        self._transport_channel_provider = FixedTransportChannelProvider(
            context.transport_channel
        )
        self._credentials_provider = FixedCredentialsProvider(context.credentials)
        self._header_provider = FixedHeaderProvider(context.headers)
        self._internal_header_provider = FixedHeaderProvider(context.internal_headers)
        self._clock = context.clock
        self._endpoint = context.endpoint

    @classmethod
    def from_settings(cls: type[BuilderT], settings: ClientSettings) -> BuilderT:
        """Builder whose seven fields are copied verbatim from `settings`."""
        builder = cls()
        builder._copy_from(settings)
        return builder

    def _copy_from(self, settings: ClientSettings) -> None:
        logger.debug("Copying %s into %s", type(settings).__name__, type(self).__name__)
        self._executor_provider = settings.executor_provider
        self._transport_channel_provider = settings.transport_channel_provider
        self._credentials_provider = settings.credentials_provider
        self._header_provider = settings.header_provider
        self._internal_header_provider = settings._internal_header_provider
        self._clock = settings.clock
        self._endpoint = settings.endpoint

    def set_executor_provider(
        self: BuilderT, executor_provider: ExecutorProvider
    ) -> BuilderT:
        """Executor for asynchronous call logic such as retries and
        long-running operations. Also handed to the transport when it
        needs one and has no executor of its own.
        """
        self._executor_provider = executor_provider
        return self

    def set_credentials_provider(
        self: BuilderT, credentials_provider: CredentialsProvider
    ) -> BuilderT:
        """Raises ValueError on None. Use `NoCredentialsProvider` instead."""
        if credentials_provider is None:
            raise ValueError(
                "credentials_provider must not be None; use NoCredentialsProvider()"
            )
        self._credentials_provider = credentials_provider
        return self

    def set_header_provider(self: BuilderT, header_provider: HeaderProvider) -> BuilderT:
        """Custom static headers, read once when the client is constructed."""
        self._header_provider = header_provider
        return self

    def _set_internal_header_provider(
        self: BuilderT, internal_header_provider: HeaderProvider
    ) -> BuilderT:
        """Library-defined static headers. Not for end users."""
        self._internal_header_provider = internal_header_provider
        return self

    def set_transport_channel_provider(
        self: BuilderT, transport_channel_provider: TransportChannelProvider | None
    ) -> BuilderT:
        self._transport_channel_provider = transport_channel_provider
        return self

    def set_clock(self: BuilderT, clock: Clock) -> BuilderT:
        self._clock = clock
        return self

    def set_endpoint(self: BuilderT, endpoint: str | None) -> BuilderT:
        self._endpoint = endpoint
        return self

    @property
    def executor_provider(self) -> ExecutorProvider:
        return self._executor_provider

    @property
    def credentials_provider(self) -> CredentialsProvider:
        return self._credentials_provider

    @property
    def header_provider(self) -> HeaderProvider:
        return self._header_provider

    @property
    def transport_channel_provider(self) -> TransportChannelProvider | None:
        return self._transport_channel_provider

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def endpoint(self) -> str | None:
        return self._endpoint

    @staticmethod
    def apply_to_all_unary_methods(
        method_settings_builders: Iterable[UnaryCallSettingsBuilder],
        settings_updater: Callable[[UnaryCallSettingsBuilder], object],
    ) -> None:
        """Apply `settings_updater` to each builder, in order.

        The first exception propagates as is. Builders before it have been
        updated, builders after it are never touched.
        """
        for settings_builder in method_settings_builders:
            settings_updater(settings_builder)

    def _client_settings(self) -> ClientSettings:
        """Snapshot of the staged values, copied verbatim."""
        return ClientSettings(
            executor_provider=self._executor_provider,
            credentials_provider=self._credentials_provider,
            header_provider=self._header_provider,
            _internal_header_provider=self._internal_header_provider,
            transport_channel_provider=self._transport_channel_provider,
            clock=self._clock,
            endpoint=self._endpoint,
        )

    @abstractmethod
    def build(self) -> SettingsT:
        """Finalize the staged values.

        Raises:
            OSError: If finalization needs provider setup that fails.
        """
        ...

    def __repr__(self) -> str:
        return _describe(
            type(self).__name__,
            executor_provider=self._executor_provider,
            transport_channel_provider=self._transport_channel_provider,
            credentials_provider=self._credentials_provider,
            header_provider=self._header_provider,
            internal_header_provider=self._internal_header_provider,
            clock=self._clock,
            endpoint=self._endpoint,
        )


class ClientSettingsBuilder(BaseClientSettingsBuilder[ClientSettings]):
    """Builder for plain `ClientSettings`. No finalization, no validation."""

    def build(self) -> ClientSettings:
        return self._client_settings()
