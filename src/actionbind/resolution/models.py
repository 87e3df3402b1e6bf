"""Resolution results passed between the resolver and the dialogs."""

from pydantic import BaseModel, SerializeAsAny

from actionbind.actions.base import Action


class ExecutionContext(BaseModel):
    """An intent paired with the action instance resolved for it.

    ``change_root`` signals that the action must restart at the top level
    instead of continuing inside the current contextual chain.
    """

    intent: str
    action: SerializeAsAny[Action]
    change_root: bool = False


class QueryValueResult(BaseModel):
    """Outcome of answering a prompted parameter from a user reply.

    Either the value was bound (``succeeded``), or the reply resolved to a
    different intent and action the user may want to switch to.
    """

    succeeded: bool = False
    new_intent: str | None = None
    new_action: SerializeAsAny[Action] | None = None

    @property
    def proposes_switch(self) -> bool:
        return bool(self.new_intent and self.new_intent.strip()) and self.new_action is not None
