# src/rpc_kit/rpc/transport.py

from dataclasses import dataclass
from typing import Protocol


class TransportChannel(Protocol):
    """A live connection to the service. Owned by whoever created it."""

    @property
    def transport_name(self) -> str: ...

    def close(self) -> None: ...


class TransportChannelProvider(Protocol):
    @property
    def transport_name(self) -> str: ...

    def should_auto_close(self) -> bool:
        """True if the client owns the channel and must close it."""
        ...

    def get_transport_channel(self) -> TransportChannel:
        """Return the channel to make calls with.

        Raises:
            OSError: If the channel cannot be established.
        """
        ...


@dataclass(frozen=True)
class FixedTransportChannelProvider:
    """Wraps an existing channel. Never closes it."""

    transport_channel: TransportChannel

    @property
    def transport_name(self) -> str:
        return self.transport_channel.transport_name

    def should_auto_close(self) -> bool:
        return False

    def get_transport_channel(self) -> TransportChannel:
        return self.transport_channel
