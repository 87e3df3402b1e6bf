"""Serializable slot-filling frames and the per-conversation session.

A session holds the stack of frames of the slot-filling flow in progress.
Each frame is one pending query: the action being completed, what it is
waiting for, and a proposed action switch while it awaits confirmation.
The remaining execution-context chain a frame is created with is
transient: it is consumed when the frame starts and never dumped.
"""

from dataclasses import dataclass

from pydantic import BaseModel, Field, PrivateAttr, SerializeAsAny

from actionbind.actions.base import Action
from actionbind.core.constants import FrameState
from actionbind.resolution.models import ExecutionContext, QueryValueResult


class SlotFillingFrame(BaseModel):
    """State of one slot-filling dialog on the stack."""

    intent: str
    action: SerializeAsAny[Action]
    service_name: str
    state: FrameState = FrameState.expand_chain
    overrun: QueryValueResult | None = None

    _chain: list[ExecutionContext] | None = PrivateAttr(default=None)

    @classmethod
    def from_chain(cls, service_name: str, chain: list[ExecutionContext]) -> "SlotFillingFrame":
        """Create a frame for the head of a chain, keeping the rest to expand.

        Raises:
            ValueError: If the chain is empty
        """
        if not chain:
            raise ValueError("Action chain cannot be empty")
        head, *rest = chain
        frame = cls(intent=head.intent, action=head.action, service_name=service_name)
        frame._chain = rest or None
        return frame

    def take_chain(self) -> list[ExecutionContext] | None:
        """Return the chain still to expand and forget it."""
        chain, self._chain = self._chain, None
        return chain


class DialogSession(BaseModel):
    """Slot-filling state of one conversation."""

    conversation_id: str
    frames: list[SlotFillingFrame] = Field(default_factory=list)

    @property
    def active(self) -> bool:
        """Whether a slot-filling flow is waiting for the next message."""
        return bool(self.frames)

    def reset(self) -> None:
        self.frames.clear()


# Steps returned by dialog transitions and interpreted by the stack driver


@dataclass(frozen=True)
class Suspend:
    """Wait for the next user message."""


@dataclass(frozen=True)
class CallChild:
    """Push a child frame and start it."""

    frame: SlotFillingFrame


@dataclass(frozen=True)
class Finish:
    """Pop the current frame, handing its result to the parent."""

    result: ExecutionContext


Step = Suspend | CallChild | Finish
