from unittest.mock import Mock

from rpc_kit.rpc.transport import FixedTransportChannelProvider


def test_fixed_wraps_channel() -> None:
    channel = Mock(transport_name="grpc")
    provider = FixedTransportChannelProvider(channel)

    assert provider.get_transport_channel() is channel
    assert provider.transport_name == "grpc"
    assert provider.should_auto_close() is False
    channel.close.assert_not_called()
