# hcs2/core/builder.py
from typing import Any, Dict, Optional

from hcs2.core.types import (
    PROTOCOL,
    Delete,
    Migrate,
    Operation,
    Register,
    Update,
)
from hcs2.errors import UnsupportedOperationError


def operation_from_name(
    name: str,
    *,
    topic_id: Optional[str] = None,
    uid: Optional[str] = None,
    metadata: Optional[Dict[str, str]] = None,
) -> Operation:
    """Turn a selected operation name plus its collected fields into a variant."""
    metadata = dict(metadata or {})
    if name == "register":
        return Register(topic_id=_required(name, "topic_id", topic_id), metadata=metadata)
    if name == "delete":
        return Delete(uid=_required(name, "uid", uid))
    if name == "update":
        return Update(
            uid=_required(name, "uid", uid),
            topic_id=_required(name, "topic_id", topic_id),
            metadata=metadata,
        )
    if name == "migrate":
        return Migrate(topic_id=_required(name, "topic_id", topic_id), metadata=metadata)
    raise UnsupportedOperationError(name)


def build_message(operation: Operation, memo: str = "") -> Dict[str, Any]:
    """
    Assemble the HCS-2 message mapping for one operation.

    Fields present are fully determined by the operation. An empty memo and
    empty metadata are left out rather than written as "" / {}.
    """
    if not isinstance(operation, (Register, Delete, Update, Migrate)):
        raise UnsupportedOperationError(getattr(operation, "name", operation))

    message: Dict[str, Any] = {"p": PROTOCOL, "op": operation.name}
    if memo:
        message["m"] = memo

    if isinstance(operation, Register):
        message["t_id"] = operation.topic_id
        _attach_metadata(message, operation.metadata)
    elif isinstance(operation, Delete):
        message["uid"] = operation.uid
    elif isinstance(operation, Update):
        message["uid"] = operation.uid
        message["t_id"] = operation.topic_id
        _attach_metadata(message, operation.metadata)
    else:  # Migrate
        message["t_id"] = operation.topic_id
        _attach_metadata(message, operation.metadata)

    return message


def _attach_metadata(message: Dict[str, Any], metadata: Dict[str, str]) -> None:
    if metadata:
        message["metadata"] = dict(metadata)


def _required(op: str, field_name: str, value: Optional[str]) -> str:
    if value is None:
        raise ValueError(f"'{op}' requires {field_name}")
    return value
