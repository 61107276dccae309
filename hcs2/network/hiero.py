# hcs2/network/hiero.py
import logging
from typing import Any, Optional

from hiero_sdk_python import (
    AccountId,
    Client,
    Network,
    PrivateKey,
    ResponseCode,
    TopicCreateTransaction,
    TopicId,
    TopicMessageSubmitTransaction,
)

from hcs2.config import Settings
from hcs2.core.types import GeneratedKeyPair, SubmitReceipt, TopicCreateRequest, TopicReceipt
from hcs2.errors import ConfigurationError, InvalidKeyError, LedgerOperationError
from . import LedgerGateway

logger = logging.getLogger(__name__)

INVALID_KEY = "Please enter a valid Private Key string."


def _status_name(status: Any) -> str:
    try:
        return ResponseCode(status).name
    except ValueError:
        return str(status)


class HieroGateway(LedgerGateway):
    """LedgerGateway backed by the Hiero Python SDK (Hedera network)."""

    def __init__(self, settings: Settings):
        self.settings = settings
        try:
            self._operator_id = AccountId.from_string(settings.operator_id)
            self._operator_key = PrivateKey.from_string(settings.operator_private_key)
        except Exception as e:
            raise ConfigurationError(f"Invalid operator credentials: {e}") from e

        # Built on first use: constructing a Network may contact a mirror node
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        if self._client is None:
            logger.debug("Connecting to %s as %s", self.settings.network, self.settings.operator_id)
            client = Client(Network(network=self.settings.network))
            client.set_operator(self._operator_id, self._operator_key)
            self._client = client
        return self._client

    def parse_private_key(self, value: str) -> PrivateKey:
        try:
            return PrivateKey.from_string(value.strip())
        except Exception as e:
            raise InvalidKeyError(INVALID_KEY) from e

    def generate_key_pair(self) -> GeneratedKeyPair:
        key = PrivateKey.generate_ed25519()
        return GeneratedKeyPair(
            private_key=key.to_string_der(),
            public_key=key.public_key().to_string_der(),
            handle=key,
        )

    def create_topic(self, request: TopicCreateRequest) -> TopicReceipt:
        try:
            tx = TopicCreateTransaction().set_memo(request.memo)
            if request.generated_key_pair is not None:
                tx.set_submit_key(request.generated_key_pair.handle.public_key())

            tx.freeze_with(self.client)
            tx.sign(self._operator_key)
            logger.debug("Creating topic with memo %r", request.memo)
            receipt = tx.execute(self.client)
        except Exception as e:
            raise LedgerOperationError(str(e) or type(e).__name__) from e

        status = _status_name(receipt.status)
        if receipt.status != ResponseCode.SUCCESS:
            raise LedgerOperationError(f"Topic creation failed with status {status}", status=status)
        return TopicReceipt(topic_id=str(receipt.topic_id), status=status)

    def submit_message(
        self, topic_id: str, payload: bytes, submit_key: Optional[PrivateKey] = None
    ) -> SubmitReceipt:
        try:
            tx = (
                TopicMessageSubmitTransaction()
                .set_topic_id(TopicId.from_string(topic_id))
                .set_message(payload)
            )
            tx.freeze_with(self.client)

            if submit_key is not None:
                tx.sign(submit_key)
            else:
                # No submit key supplied: the operator key alone authorizes the message.
                logger.info("No submit key supplied; signing message with the operator key")
            # Operator is the fee payer in both cases.
            tx.sign(self._operator_key)

            logger.debug("Submitting %d bytes to topic %s", len(payload), topic_id)
            receipt = tx.execute(self.client)
        except Exception as e:
            raise LedgerOperationError(str(e) or type(e).__name__) from e

        status = _status_name(receipt.status)
        if receipt.status != ResponseCode.SUCCESS:
            raise LedgerOperationError(f"Message submission failed with status {status}", status=status)
        return SubmitReceipt(transaction_id=str(tx.transaction_id), status=status)

    def close(self) -> None:
        if self._client is not None:
            try:
                self._client.close()
            finally:
                self._client = None
