# hcs2/network/__init__.py
"""
Narrow boundary to the ledger network.

Flows only talk to a ``LedgerGateway``; the Hiero SDK lives behind
``create_gateway`` so message shaping can be tested without a network.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from hcs2.config import Settings
from hcs2.core.types import GeneratedKeyPair, SubmitReceipt, TopicCreateRequest, TopicReceipt


class LedgerGateway(ABC):
    """Owns one network client. Use as a context manager; ``close()`` runs on every exit path."""

    @abstractmethod
    def parse_private_key(self, value: str) -> Any:
        """Return an SDK key object, or raise InvalidKeyError."""

    @abstractmethod
    def generate_key_pair(self) -> GeneratedKeyPair:
        pass

    @abstractmethod
    def create_topic(self, request: TopicCreateRequest) -> TopicReceipt:
        pass

    @abstractmethod
    def submit_message(
        self, topic_id: str, payload: bytes, submit_key: Optional[Any] = None
    ) -> SubmitReceipt:
        """Sign with ``submit_key`` when given, otherwise with the operator key."""

    @abstractmethod
    def close(self) -> None:
        pass

    def __enter__(self) -> "LedgerGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def create_gateway(settings: Settings) -> LedgerGateway:
    from .hiero import HieroGateway
    return HieroGateway(settings)


__all__ = ["LedgerGateway", "create_gateway"]
