from collections.abc import Generator
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock

import pytest

from rpc_kit.core.clock import NanoClock
from rpc_kit.rpc.context import ClientContext


@pytest.fixture
def channel() -> Mock:
    return Mock(transport_name="grpc")


@pytest.fixture
def executor() -> Generator[ThreadPoolExecutor, None, None]:
    pool = ThreadPoolExecutor(max_workers=1)
    yield pool
    pool.shutdown()


@pytest.fixture
def context(channel: Mock, executor: ThreadPoolExecutor) -> ClientContext:
    return ClientContext(
        executor=executor,
        transport_channel=channel,
        credentials=Mock(name="credentials"),
        clock=NanoClock(),
        endpoint="echo.example.com:443",
        headers={"x-user": "alice"},
        internal_headers={"x-goog-api-client": "rpc-kit/0.1.0"},
    )
