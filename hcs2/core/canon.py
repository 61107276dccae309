# hcs2/core/canon.py
from typing import Any, Dict

import jcs


def encode_message(message: Dict[str, Any]) -> bytes:
    """
    Serialize an HCS-2 message to the bytes submitted on-chain.
    RFC 8785 (JSON Canonicalization Scheme): sorted keys, no whitespace, UTF-8.
    """
    return jcs.canonicalize(message)

