"""Correlation id sources for request envelopes."""

from __future__ import annotations

import secrets
import threading
from typing import Protocol

from vaultrpc.bitcoin.primitives import U32_MAX


class IdSource(Protocol):
    def next_id(self) -> int: ...


class SecureIdSource:
    """Uniform u32 ids from the operating system CSPRNG.

    Ids may double as anti-replay hints over an untrusted transport, so they
    must not be predictable. Stateless and safe to share between threads.
    """

    def next_id(self) -> int:
        return secrets.randbelow(U32_MAX + 1)


class SequentialIdSource:
    """Deterministic ids counting up from `start`, wrapping at 2**32."""

    def __init__(self, start: int = 0):
        if not 0 <= start <= U32_MAX:
            raise ValueError(f"start must be a u32, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next = (value + 1) & U32_MAX
            return value


DEFAULT_ID_SOURCE: IdSource = SecureIdSource()
