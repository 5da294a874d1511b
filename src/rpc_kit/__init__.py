# Core providers
from .core import (
    Clock,
    CredentialsProvider,
    ExecutorProvider,
    FixedCredentialsProvider,
    FixedExecutorProvider,
    InstantiatingExecutorProvider,
    NanoClock,
    NoCredentialsProvider,
)

# Client settings
from .rpc import (
    BaseClientSettingsBuilder,
    CallConfig,
    ClientContext,
    ClientSettings,
    ClientSettingsBuilder,
    FixedHeaderProvider,
    FixedTransportChannelProvider,
    HeaderProvider,
    NoHeaderProvider,
    RetrySettings,
    ServiceSettings,
    ServiceSettingsBuilder,
    TransportChannel,
    TransportChannelProvider,
    UnaryCallSettings,
    UnaryCallSettingsBuilder,
    load_call_config,
)

__all__ = [
    # Core providers
    "Clock",
    "NanoClock",
    "CredentialsProvider",
    "FixedCredentialsProvider",
    "NoCredentialsProvider",
    "ExecutorProvider",
    "FixedExecutorProvider",
    "InstantiatingExecutorProvider",
    # Client settings
    "ClientSettings",
    "BaseClientSettingsBuilder",
    "ClientSettingsBuilder",
    "ServiceSettings",
    "ServiceSettingsBuilder",
    "ClientContext",
    # Call settings
    "RetrySettings",
    "UnaryCallSettings",
    "UnaryCallSettingsBuilder",
    "CallConfig",
    "load_call_config",
    # Headers and transport
    "HeaderProvider",
    "FixedHeaderProvider",
    "NoHeaderProvider",
    "TransportChannel",
    "TransportChannelProvider",
    "FixedTransportChannelProvider",
]
