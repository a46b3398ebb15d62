# page.py
"""
View handles for the analysis page.

The controller never talks to a widget toolkit directly. It reads and writes
the fields of a PageView, and a renderer (see frontend.py) draws whatever the
view currently holds.
"""
import math
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

import config

RING_RADIUS = 60
RING_CIRCUMFERENCE = 2 * math.pi * RING_RADIUS
# Offset of an empty ring, as the page stylesheet writes it
EMPTY_RING_OFFSET = round(RING_CIRCUMFERENCE, 2)


class UIState(str, Enum):
    IDLE = "Idle"
    LOADING = "Loading"
    SHOWING_RESULTS = "ShowingResults"
    SHOWING_ERROR = "ShowingError"


class MessageKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    ANALYSIS_FAILURE = "AnalysisFailure"


@dataclass
class Message:
    text: str
    kind: MessageKind
    expires_at: float

    def expired(self, now: Optional[float] = None) -> bool:
        return (time.time() if now is None else now) >= self.expires_at


def ring_offset_for(score: float) -> float:
    """Stroke offset of the score ring for a score out of 100."""
    return RING_CIRCUMFERENCE * (1 - score / 100)


@dataclass
class PageView:
    upload_visible: bool = True
    spinner_visible: bool = False
    results_visible: bool = False
    score_text: str = "0"
    ring_offset: float = EMPTY_RING_OFFSET
    suggestions: List[str] = field(default_factory=list)
    text_area: str = ""
    # Name of the selected file, None when the selector is empty
    file_selector: Optional[str] = None
    messages: List[Message] = field(default_factory=list)
    message_ttl: float = config.MESSAGE_TTL_SECONDS

    def show_message(self, text: str, kind: MessageKind, now: Optional[float] = None) -> Message:
        now = time.time() if now is None else now
        message = Message(text=text, kind=kind, expires_at=now + self.message_ttl)
        self.messages.append(message)
        return message

    def active_messages(self, now: Optional[float] = None) -> List[Message]:
        self.messages = [m for m in self.messages if not m.expired(now)]
        return list(self.messages)

    def dismiss(self, message: Message):
        self.messages = [m for m in self.messages if m is not message]

    @property
    def state(self) -> UIState:
        if self.spinner_visible:
            return UIState.LOADING
        if self.results_visible:
            return UIState.SHOWING_RESULTS
        if any(not m.expired() for m in self.messages):
            return UIState.SHOWING_ERROR
        return UIState.IDLE
