# hcs2/flows/submit_message.py
"""Message submission: collect target topic, signer and operation, build the HCS-2 payload, submit it."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from rich.console import Console
from rich.markup import escape

from hcs2.core.builder import build_message, operation_from_name
from hcs2.core.canon import encode_message
from hcs2.core.metadata import collect_metadata
from hcs2.core.types import OPERATIONS, Operation, SubmitReceipt
from hcs2.core.validators import validate_memo, validate_topic_id, validate_uid
from hcs2.errors import InvalidKeyError, LedgerOperationError, UnsupportedOperationError
from hcs2.network import LedgerGateway
from hcs2.prompts import Prompter, Validator

logger = logging.getLogger(__name__)

OPERATION_CHOICES = tuple((name.capitalize(), name) for name in OPERATIONS)


@dataclass(frozen=True)
class Submission:
    topic_id: str
    message: Dict[str, Any]
    submit_key: Any = None      # SDK key object, or None for the operator key


def _key_validator(gateway: LedgerGateway) -> Validator:
    def check(value: str) -> Optional[str]:
        try:
            gateway.parse_private_key(value)
        except InvalidKeyError as e:
            return str(e)
        return None
    return check


def prompt_operation(prompter: Prompter, name: str) -> Operation:
    """Ask for the fields one operation needs. Unknown names are fatal."""
    if name == "register":
        topic_id = prompter.text(
            "Enter the Topic ID to register (e.g., 0.0.123456):", validate=validate_topic_id
        )
        return operation_from_name(name, topic_id=topic_id, metadata=collect_metadata(prompter))

    if name == "delete":
        uid = prompter.text(
            "Enter the UID (Sequence Number) of the message to delete:", validate=validate_uid
        )
        return operation_from_name(name, uid=uid)

    if name == "update":
        uid = prompter.text(
            "Enter the UID (Sequence Number) of the message to update:", validate=validate_uid
        )
        topic_id = prompter.text("Enter the new Topic ID to register:", validate=validate_topic_id)
        return operation_from_name(
            name, uid=uid, topic_id=topic_id, metadata=collect_metadata(prompter)
        )

    if name == "migrate":
        topic_id = prompter.text(
            "Enter the new Topic ID to migrate to (e.g., 0.0.654321):", validate=validate_topic_id
        )
        return operation_from_name(name, topic_id=topic_id, metadata=collect_metadata(prompter))

    raise UnsupportedOperationError(name)


def prompt_submission(prompter: Prompter, gateway: LedgerGateway) -> Submission:
    topic_id = prompter.text(
        "Enter the HCS-2 Topic ID (e.g., 0.0.123456):", validate=validate_topic_id
    )

    submit_key = None
    if prompter.confirm("Do you want to use a submit key?", default=False):
        key_string = prompter.text("Enter your Submit Private Key:", validate=_key_validator(gateway))
        submit_key = gateway.parse_private_key(key_string)

    name = prompter.select("Choose an operation to perform:", OPERATION_CHOICES)
    if name not in OPERATIONS:
        raise UnsupportedOperationError(name)

    memo = prompter.text(
        "Enter an optional memo (max 500 characters):", default="", validate=validate_memo
    )
    operation = prompt_operation(prompter, name)
    return Submission(topic_id=topic_id, message=build_message(operation, memo), submit_key=submit_key)


def submit(gateway: LedgerGateway, submission: Submission) -> SubmitReceipt:
    payload = encode_message(submission.message)
    logger.debug("Payload for %s: %s", submission.topic_id, payload)
    return gateway.submit_message(submission.topic_id, payload, submit_key=submission.submit_key)


def render_submitted(console: Console, receipt: SubmitReceipt) -> None:
    for line in (
        "",
        "=== HCS-2 Message Submitted Successfully ===",
        f"Transaction ID : {receipt.transaction_id}",
        f"Status         : {receipt.status}",
        "============================================",
    ):
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def run_submit_message(
    prompter: Prompter, gateway: LedgerGateway, console: Console
) -> Optional[SubmitReceipt]:
    """
    Full interactive flow. UnsupportedOperationError propagates (fatal);
    ledger failures are printed and the flow returns None.
    """
    submission = prompt_submission(prompter, gateway)
    try:
        receipt = submit(gateway, submission)
    except LedgerOperationError as e:
        console.print(f"[red]Error submitting message to HCS-2 topic: {escape(str(e))}[/]")
        return None

    render_submitted(console, receipt)
    return receipt
