from .clock import Clock, NanoClock
from .credentials import (
    CredentialsProvider,
    FixedCredentialsProvider,
    NoCredentialsProvider,
)
from .executor import (
    ExecutorProvider,
    FixedExecutorProvider,
    InstantiatingExecutorProvider,
)

__all__ = [
    "Clock",
    "NanoClock",
    "CredentialsProvider",
    "FixedCredentialsProvider",
    "NoCredentialsProvider",
    "ExecutorProvider",
    "FixedExecutorProvider",
    "InstantiatingExecutorProvider",
]
