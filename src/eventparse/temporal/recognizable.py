"""Recognizer contract shared by every expression type.

A recognizer looks for one kind of expression in free text and reports one of
three outcomes:

- the recognized value,
- ``None`` when nothing applicable is in the text,
- a ``MalformedExpressionError`` when a pattern matched but the value it
  carries is unusable ("13/45", "25:00").

Recognizers keep no per-call state, so module-level instances are safe to
share between threads.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, List, Optional, Sequence, TypeVar

from eventparse.errors import MalformedExpressionError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PatternAttempt = Callable[[str], Optional[T]]


class Recognizer(ABC, Generic[T]):
    """Extracts an instance of ``T`` from a text fragment."""

    #: Human readable name used in diagnostics, e.g. "date".
    label: str = "expression"

    @abstractmethod
    def recognize(self, text: str) -> Optional[T]:
        """Return the recognized value, None, or raise MalformedExpressionError."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} label={self.label!r}>"


class PatternChain(Recognizer[T]):
    """Ordered, short-circuit list of pattern attempts.

    The first attempt that returns a value wins. A malformed attempt does not
    stop the chain: later attempts still get their chance, and the first
    malformed error is only raised when none of them matches.
    """

    def __init__(self, label: str, attempts: Sequence[PatternAttempt]):
        self.label = label
        self._attempts: List[PatternAttempt] = list(attempts)

    def recognize(self, text: str) -> Optional[T]:
        malformed: Optional[MalformedExpressionError] = None

        for attempt in self._attempts:
            try:
                value = attempt(text)
            except MalformedExpressionError as exc:
                logger.debug(f"{self.label}: {attempt.__name__} rejected {text!r}: {exc}")
                if malformed is None:
                    malformed = exc
                continue
            if value is not None:
                return value

        if malformed is not None:
            raise malformed
        return None
