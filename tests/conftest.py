"""Shared fixtures for actionbind tests.

Uses ScriptedNLUService for deterministic, fast tests without LLM API calls.
"""

from typing import Any

import pytest

from actionbind.core.message_sink import BufferedMessageSink
from actionbind.dialogs.action_dialog import ActionDialog
from actionbind.dialogs.frames import DialogSession
from actionbind.handlers.table import HandlerTable
from actionbind.runtime.context import TurnContext
from actionbind.runtime.runtime import ConversationRuntime
from tests.factories import registry
from tests.mocks import ScriptedNLUService


@pytest.fixture
def action_registry():
    """Registry holding the test actions of tests.factories."""
    return registry


@pytest.fixture
def nlu_service() -> ScriptedNLUService:
    """Scripted service covering the travel utterances used across tests."""
    service = ScriptedNLUService()
    service.add("book a flight to Paris", "BookFlight", 0.95, destination="Paris")
    service.add(
        "book a flight from Boston to Paris",
        "BookFlight",
        0.95,
        destination="Paris",
        departureCity="Boston",
    )
    service.add("actually cancel my flight", "CancelFlight", 0.9)
    service.add("what's the weather", "GetWeather", 0.9)
    service.add("find hotels", "FindHotels", 0.9)
    service.add("find hotels in Madrid", "FindHotels", 0.9, location="Madrid")
    service.add("change location", "ChangeHotelLocation", 0.9)
    service.add("change the location to Rome", "ChangeHotelLocation", 0.9, location="Rome")
    service.add("change room type", "ChangeRoomType", 0.9)
    service.add("rate the hotel", "RateHotel", 0.9)
    service.add("change my seat", "ChangeSeat", 0.9)
    return service


@pytest.fixture
def dispatched() -> list[Any]:
    """Fulfillment results received by the default handler."""
    return []


@pytest.fixture
def handlers(dispatched) -> HandlerTable:
    table = HandlerTable()

    @table.handler("")
    async def record_result(context, message, result):
        dispatched.append(result)
        await context.post(str(result))

    return table


@pytest.fixture
def dialog(nlu_service, action_registry, handlers) -> ActionDialog:
    return ActionDialog([nlu_service], action_registry, handlers=handlers)


@pytest.fixture
def sink() -> BufferedMessageSink:
    return BufferedMessageSink()


@pytest.fixture
def runtime(dialog, sink) -> ConversationRuntime:
    return ConversationRuntime(dialog, sink)


@pytest.fixture
def session() -> DialogSession:
    return DialogSession(conversation_id="test")


@pytest.fixture
def turn(sink) -> TurnContext:
    """Single turn context; its ``messages`` collect everything posted."""
    return TurnContext(conversation_id="test", sink=sink)
