# hcs2/flows/create_topic.py
"""Topic provisioning: ask for TTL and submit-key preference, create the topic, print the receipt."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from rich.console import Console
from rich.markup import escape

from hcs2.core.types import TopicCreateRequest, TopicReceipt
from hcs2.core.validators import validate_ttl
from hcs2.errors import LedgerOperationError
from hcs2.network import LedgerGateway
from hcs2.prompts import Prompter

logger = logging.getLogger(__name__)

DEFAULT_TTL = 86400


@dataclass(frozen=True)
class TopicCreated:
    request: TopicCreateRequest
    receipt: TopicReceipt


def prompt_topic_options(prompter: Prompter) -> Tuple[int, bool]:
    ttl = prompter.integer(
        "Enter the Time-to-live (TTL) in seconds:",
        default=DEFAULT_TTL,
        validate=validate_ttl,
    )
    use_submit_key = prompter.confirm("Do you want to use a submit key?", default=False)
    return ttl, use_submit_key


def build_request(gateway: LedgerGateway, ttl_seconds: int, use_submit_key: bool) -> TopicCreateRequest:
    """A new key pair is generated on every call when a submit key is wanted."""
    key_pair = gateway.generate_key_pair() if use_submit_key else None
    return TopicCreateRequest(
        ttl_seconds=ttl_seconds,
        require_submit_key=use_submit_key,
        generated_key_pair=key_pair,
    )


def create_topic(gateway: LedgerGateway, ttl_seconds: int, use_submit_key: bool) -> TopicCreated:
    request = build_request(gateway, ttl_seconds, use_submit_key)
    logger.debug("Topic memo: %s", request.memo)
    receipt = gateway.create_topic(request)
    return TopicCreated(request=request, receipt=receipt)


def render_topic_created(console: Console, result: TopicCreated) -> None:
    request = result.request
    lines = [
        "",
        "=== HCS-2 Non-Indexed Topic Created Successfully ===",
        f"Topic ID       : {result.receipt.topic_id}",
        f"TTL            : {request.ttl_seconds} seconds",
    ]
    if request.generated_key_pair is not None:
        lines.append(f"Submit Key     : {request.generated_key_pair.private_key}")
        lines.append(f"Submit Key Pub : {request.generated_key_pair.public_key}")
    else:
        lines.append("Submit Key     : Not used")
    lines.append("========================================")
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def run_create_topic(
    prompter: Prompter, gateway: LedgerGateway, console: Console
) -> Optional[TopicCreated]:
    """
    Full interactive flow. Ledger failures are printed and swallowed here
    (returns None); the caller still owns closing the gateway.
    """
    ttl, use_submit_key = prompt_topic_options(prompter)
    try:
        result = create_topic(gateway, ttl, use_submit_key)
    except LedgerOperationError as e:
        console.print(f"[red]Error creating HCS-2 topic: {escape(str(e))}[/]")
        return None

    render_topic_created(console, result)
    return result
