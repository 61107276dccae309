# tests/conftest.py
from typing import Any, List, Optional

import pytest

from hcs2.core.types import GeneratedKeyPair, SubmitReceipt, TopicCreateRequest, TopicReceipt
from hcs2.errors import InvalidKeyError
from hcs2.network import LedgerGateway
from hcs2.prompts import Prompter


class FakeKey:
    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, FakeKey) and other.value == self.value


class FakeGateway(LedgerGateway):
    """In-memory gateway: records calls, never touches a network."""

    def __init__(self, fail: Optional[Exception] = None):
        self.fail = fail
        self.close_calls = 0
        self.generated: List[GeneratedKeyPair] = []
        self.created: List[TopicCreateRequest] = []
        self.submitted: List[tuple] = []

    def parse_private_key(self, value: str) -> FakeKey:
        if not value.startswith("key-"):
            raise InvalidKeyError("Please enter a valid Private Key string.")
        return FakeKey(value)

    def generate_key_pair(self) -> GeneratedKeyPair:
        n = len(self.generated) + 1
        pair = GeneratedKeyPair(private_key=f"priv-{n}", public_key=f"pub-{n}", handle=FakeKey(f"key-{n}"))
        self.generated.append(pair)
        return pair

    def create_topic(self, request: TopicCreateRequest) -> TopicReceipt:
        if self.fail:
            raise self.fail
        self.created.append(request)
        return TopicReceipt(topic_id=f"0.0.{1000 + len(self.created)}")

    def submit_message(self, topic_id: str, payload: bytes, submit_key: Any = None) -> SubmitReceipt:
        if self.fail:
            raise self.fail
        self.submitted.append((topic_id, payload, submit_key))
        return SubmitReceipt(transaction_id=f"0.0.2@1700000000.{len(self.submitted):09d}")

    def close(self) -> None:
        self.close_calls += 1


class ScriptedPrompter(Prompter):
    """
    Replays canned answers in order. A rejected answer is recorded in
    ``errors`` and the next answer is used, like a re-asking prompt.
    """

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked: List[str] = []
        self.errors: List[str] = []

    def _next(self, message):
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for: {message}")
        return self.answers.pop(0)

    def _validated(self, message, default, validate):
        while True:
            answer = self._next(message)
            if answer == "" and default is not None:
                answer = default
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.errors.append(error)

    def text(self, message, *, default=None, validate=None):
        return self._validated(message, default, validate)

    def integer(self, message, *, default=None, validate=None):
        value = self._validated(message, None if default is None else str(default), validate)
        return int(value)

    def confirm(self, message, *, default=False):
        answer = self._next(message)
        return default if answer is None else bool(answer)

    def select(self, message, choices):
        return self._next(message)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def operator_env(monkeypatch, tmp_path):
    """Valid operator environment, run from an empty directory (no stray .env)."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("OPERATOR_ID", "0.0.2")
    monkeypatch.setenv("OPERATOR_PRIVATE_KEY", "302e020100300506032b657004220420" + "11" * 32)
    monkeypatch.setenv("HEDERA_NETWORK", "testnet")
