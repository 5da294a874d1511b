# src/rpc_kit/rpc/__init__.py

"""Client settings layer for rpc-kit.

Assembles the cross-cutting settings every service client needs:
executor, credentials, headers, transport channel, clock and endpoint.

Design principles:
- Immutable settings, mutable builders
- No I/O: providers are resolved by the caller, not here
- No validation beyond preconditions; services add their own in build()

Example:
    >>> from rpc_kit.rpc import ClientSettingsBuilder
    >>>
    >>> settings = ClientSettingsBuilder().set_endpoint("localhost:7469").build()
    >>> copy = settings.to_builder().build()
    >>> assert copy == settings
"""

from .call_config import CallConfig, MethodConfig, load_call_config
from .call_settings import RetrySettings, UnaryCallSettings, UnaryCallSettingsBuilder
from .client_settings import (
    BaseClientSettingsBuilder,
    ClientSettings,
    ClientSettingsBuilder,
)
from .context import ClientContext
from .headers import FixedHeaderProvider, HeaderProvider, NoHeaderProvider
from .service_settings import ServiceSettings, ServiceSettingsBuilder
from .transport import (
    FixedTransportChannelProvider,
    TransportChannel,
    TransportChannelProvider,
)

__all__ = [
    # Settings
    "ClientSettings",
    "BaseClientSettingsBuilder",
    "ClientSettingsBuilder",
    "ServiceSettings",
    "ServiceSettingsBuilder",
    # Context
    "ClientContext",
    # Call settings
    "RetrySettings",
    "UnaryCallSettings",
    "UnaryCallSettingsBuilder",
    "CallConfig",
    "MethodConfig",
    "load_call_config",
    # Providers
    "HeaderProvider",
    "FixedHeaderProvider",
    "NoHeaderProvider",
    "TransportChannel",
    "TransportChannelProvider",
    "FixedTransportChannelProvider",
]
