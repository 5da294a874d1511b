# src/rpc_kit/core/credentials.py

from dataclasses import dataclass
from typing import Any, Protocol


class CredentialsProvider(Protocol):
    def get_credentials(self) -> Any | None:
        """Return the credentials to make calls with.

        Raises:
            OSError: If credentials cannot be discovered or loaded.
        """
        ...


class NoCredentialsProvider:
    """Explicit "no credentials". Calls are made unauthenticated."""

    def get_credentials(self) -> None:
        return None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoCredentialsProvider)

    def __hash__(self) -> int:
        return hash(NoCredentialsProvider)

    def __repr__(self) -> str:
        return "NoCredentialsProvider()"


@dataclass(frozen=True)
class FixedCredentialsProvider:
    credentials: Any

    def get_credentials(self) -> Any:
        return self.credentials
