"""Tests for ActionDialog resolution and dispatch"""

import pytest

from actionbind.core.errors import (
    ConfigError,
    HandlerNotFoundError,
    InvalidIntentHandlerError,
    NoWinningIntentError,
)
from actionbind.dialogs.action_dialog import ActionDialog
from actionbind.handlers.table import HandlerTable, intent_handler
from tests.factories import BookFlight, FindHotels
from tests.mocks import ScriptedNLUService


@pytest.mark.asyncio
async def test_valid_action_is_dispatched_directly(dialog, session, turn, dispatched):
    # Act
    await dialog.handle_message(turn, "book a flight from Boston to Paris", session)

    # Assert
    assert dispatched == ["Booked Boston -> Paris"]
    assert turn.messages == ["Booked Boston -> Paris"]
    assert not session.active


@pytest.mark.asyncio
async def test_query_text_is_stripped(dialog, nlu_service, session, turn):
    # Act
    await dialog.handle_message(turn, "  find hotels in Madrid  ", session)

    # Assert
    assert nlu_service.queries == ["find hotels in Madrid"]


@pytest.mark.asyncio
async def test_no_winning_intent_raises_without_dispatch(dialog, session, turn, dispatched):
    with pytest.raises(NoWinningIntentError):
        await dialog.handle_message(turn, "blah blah", session)

    assert dispatched == []
    assert turn.messages == []


@pytest.mark.asyncio
async def test_intent_without_action_calls_no_action_detected(
    action_registry, handlers, session, turn
):
    # Arrange
    service = ScriptedNLUService().add("tell me a joke", "Smalltalk")

    class Dialog(ActionDialog):
        async def no_action_detected(self, context, message):
            await context.post(f"Sorry, I cannot help with {message!r}")

    dialog = Dialog([service], action_registry, handlers=handlers)

    # Act
    await dialog.handle_message(turn, "tell me a joke", session)

    # Assert
    assert turn.messages == ["Sorry, I cannot help with 'tell me a joke'"]
    assert not session.active


@pytest.mark.asyncio
async def test_contextual_action_without_context_is_refused(dialog, session, turn, dispatched):
    # Act
    await dialog.handle_message(turn, "rate the hotel", session)

    # Assert
    assert turn.messages == [
        "Cannot start contextual action 'Rate the hotel' without a valid context."
    ]
    assert dispatched == []
    assert not session.active


@pytest.mark.asyncio
async def test_contextual_action_builds_parent_and_dispatches_root(
    dialog, session, turn, dispatched
):
    # Act
    await dialog.handle_message(turn, "change the location to Rome", session)

    # Assert
    assert turn.messages == ["Location changed to Rome", "Hotels in Rome"]
    assert dispatched == ["Hotels in Rome"]
    assert not session.active


@pytest.mark.asyncio
async def test_context_creation_hook_hydrates_parents(
    nlu_service, action_registry, handlers, session, turn
):
    # Arrange
    created = []

    def hydrate(parent, context):
        created.append((type(parent), context.conversation_id))

    dialog = ActionDialog(
        [nlu_service], action_registry, handlers=handlers, on_context_creation=hydrate
    )

    # Act
    await dialog.handle_message(turn, "change location", session)

    # Assert
    assert created == [(FindHotels, "test")]
    assert [frame.intent for frame in session.frames] == ["FindHotels", "ChangeHotelLocation"]


@pytest.mark.asyncio
async def test_action_resolved_hook_can_replace_action(
    nlu_service, action_registry, handlers, session, turn, dispatched
):
    # Arrange
    def prefill(context, action):
        if isinstance(action, BookFlight):
            return BookFlight(destination=action.destination, departure_city="Madrid")
        return None

    dialog = ActionDialog(
        [nlu_service], action_registry, handlers=handlers, on_action_resolved=prefill
    )

    # Act
    await dialog.handle_message(turn, "book a flight to Paris", session)

    # Assert
    assert dispatched == ["Booked Madrid -> Paris"]


@pytest.mark.asyncio
async def test_missing_handler_raises(nlu_service, action_registry, session, turn):
    # Arrange
    dialog = ActionDialog([nlu_service], action_registry, handlers=HandlerTable())

    # Act & Assert
    with pytest.raises(HandlerNotFoundError, match="No default intent handler found") as exc_info:
        await dialog.handle_message(turn, "book a flight from Boston to Paris", session)
    assert exc_info.value.context == {"intent": "BookFlight"}


@pytest.mark.asyncio
async def test_intent_handler_methods_take_precedence_over_default(
    nlu_service, action_registry, handlers, session, turn, dispatched
):
    # Arrange
    class TravelDialog(ActionDialog):
        @intent_handler("BookFlight")
        async def on_booked(self, context, result):
            await context.post(f"Confirmed: {result}")

    dialog = TravelDialog([nlu_service], action_registry, handlers=handlers)

    # Act
    await dialog.handle_message(turn, "book a flight from Boston to Paris", session)

    # Assert
    assert turn.messages == ["Confirmed: Booked Boston -> Paris"]
    assert dispatched == []


def test_invalid_handler_method_fails_at_construction(nlu_service, action_registry):
    class BrokenDialog(ActionDialog):
        @intent_handler("BookFlight")
        async def on_booked(self):
            pass

    with pytest.raises(InvalidIntentHandlerError):
        BrokenDialog([nlu_service], action_registry)


def test_service_names_must_be_unique(action_registry):
    with pytest.raises(ConfigError, match="unique"):
        ActionDialog([ScriptedNLUService("a"), ScriptedNLUService("a")], action_registry)


@pytest.mark.asyncio
async def test_follow_up_replies_go_to_winning_service(action_registry, handlers, session, turn):
    # Arrange
    weak = ScriptedNLUService("weak").add("book a flight to Paris", "BookFlight", 0.5)
    strong = ScriptedNLUService("strong").add(
        "book a flight to Paris", "BookFlight", 0.9, destination="Paris"
    )
    dialog = ActionDialog([weak, strong], action_registry, handlers=handlers)

    # Act
    await dialog.handle_message(turn, "book a flight to Paris", session)
    await dialog.handle_message(turn, "Boston", session)

    # Assert
    assert session.frames == []
    assert weak.queries == ["book a flight to Paris"]
    assert strong.queries == ["book a flight to Paris", "Boston"]
    assert turn.messages[-1] == "Booked Boston -> Paris"
