# hcs2/core/types.py
from dataclasses import dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, Union

PROTOCOL = "hcs-2"
TOPIC_MEMO_VERSION = 1

OperationName = Literal["register", "delete", "update", "migrate"]
OPERATIONS: Tuple[str, ...] = ("register", "delete", "update", "migrate")


def build_topic_memo(ttl_seconds: int) -> str:
    """Topic memo in the form ``hcs-2:1:<ttl>``."""
    return f"{PROTOCOL}:{TOPIC_MEMO_VERSION}:{ttl_seconds}"


@dataclass(frozen=True)
class GeneratedKeyPair:
    """Fresh submit key created for a single topic-creation run. Never persisted."""
    private_key: str
    public_key: str
    handle: Any = field(default=None, repr=False, compare=False)   # SDK key object


@dataclass(frozen=True)
class TopicCreateRequest:
    ttl_seconds: int
    require_submit_key: bool = False
    generated_key_pair: Optional[GeneratedKeyPair] = None

    def __post_init__(self):
        if isinstance(self.ttl_seconds, bool) or not isinstance(self.ttl_seconds, int):
            raise ValueError("ttl_seconds must be an integer")
        if self.ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if self.require_submit_key != (self.generated_key_pair is not None):
            raise ValueError("generated_key_pair must be present iff require_submit_key is set")

    @property
    def memo(self) -> str:
        return build_topic_memo(self.ttl_seconds)


@dataclass(frozen=True)
class Register:
    topic_id: str
    metadata: Dict[str, str] = field(default_factory=dict)
    name: OperationName = field(default="register", init=False)


@dataclass(frozen=True)
class Delete:
    uid: str
    name: OperationName = field(default="delete", init=False)


@dataclass(frozen=True)
class Update:
    uid: str
    topic_id: str
    metadata: Dict[str, str] = field(default_factory=dict)
    name: OperationName = field(default="update", init=False)


@dataclass(frozen=True)
class Migrate:
    topic_id: str
    metadata: Dict[str, str] = field(default_factory=dict)
    name: OperationName = field(default="migrate", init=False)


Operation = Union[Register, Delete, Update, Migrate]


@dataclass(frozen=True)
class TopicReceipt:
    topic_id: str
    status: str = "SUCCESS"


@dataclass(frozen=True)
class SubmitReceipt:
    transaction_id: str
    status: str = "SUCCESS"
