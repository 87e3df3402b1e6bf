"""Tests for ActionResolver"""

from actionbind.actions.registry import ActionRegistry
from actionbind.nlu.models import Entity, IntentCandidate
from actionbind.resolution.resolver import ActionResolver
from tests.factories import (
    BookFlight,
    CancelFlight,
    ChangeHotelLocation,
    ChangeRoomType,
    ChangeSeat,
    FindHotels,
    RateHotel,
)


def make_resolver(action_registry) -> ActionResolver:
    return ActionResolver(action_registry)


def test_resolve_binds_intent_and_query_entities(action_registry):
    # Arrange
    resolver = make_resolver(action_registry)
    intent = IntentCandidate(
        name="BookFlight", score=0.9, entities=[Entity(type="city", value="Paris")]
    )

    # Act
    resolved = resolver.resolve_action_from_intent(
        intent, [Entity(type="departureCity", value="Boston")]
    )

    # Assert
    assert resolved is not None
    name, action = resolved
    assert name == "BookFlight"
    assert isinstance(action, BookFlight)
    assert action.destination == "Paris"
    assert action.departure_city == "Boston"


def test_resolve_unbound_intent_returns_none(action_registry):
    resolver = make_resolver(action_registry)

    assert resolver.resolve_action_from_intent(IntentCandidate(name="Smalltalk")) is None


def test_bind_entities_takes_first_match_per_parameter():
    # Arrange
    action = BookFlight()
    entities = [
        Entity(type="city", value="Paris"),
        Entity(type="destination", value="Lisbon"),
    ]

    # Act
    bound = ActionResolver.bind_entities(action, entities)

    # Assert
    assert bound == ["destination"]
    assert action.destination == "Paris"


def test_bind_entities_skips_uncoercible_values():
    # Arrange
    action = RateHotel()

    # Act
    bound = ActionResolver.bind_entities(
        action, [Entity(type="number", value="many"), Entity(type="number", value="4")]
    )

    # Assert
    assert bound == ["rating"]
    assert action.rating == 4


def test_expand_non_contextual_action_is_single_entry(action_registry):
    # Act
    expansion = make_resolver(action_registry).expand_context_chain("CancelFlight", CancelFlight())

    # Assert
    assert [entry.intent for entry in expansion.chain] == ["CancelFlight"]
    assert not expansion.blocked


def test_expand_builds_ancestor_first_chain(action_registry):
    # Arrange
    action = ChangeRoomType()
    created = []

    # Act
    expansion = make_resolver(action_registry).expand_context_chain(
        "ChangeRoomType", action, created.append
    )

    # Assert
    assert [entry.intent for entry in expansion.chain] == [
        "FindHotels",
        "ChangeHotelLocation",
        "ChangeRoomType",
    ]
    root, middle, leaf = (entry.action for entry in expansion.chain)
    assert leaf is action
    assert leaf.context is middle
    assert middle.context is root
    assert [type(parent) for parent in created] == [ChangeHotelLocation, FindHotels]


def test_expand_stops_when_context_is_required(action_registry):
    # Act
    expansion = make_resolver(action_registry).expand_context_chain("RateHotel", RateHotel())

    # Assert
    assert expansion.blocked
    assert expansion.blocked_by.friendly_name == "Rate the hotel"


def test_is_valid_contextual_action_links_matching_context():
    # Arrange
    current = FindHotels()
    new = ChangeHotelLocation()

    # Act
    valid, contextual = ActionResolver.is_valid_contextual_action(new, current)

    # Assert
    assert (valid, contextual) == (True, True)
    assert new.context is current


def test_is_valid_contextual_action_rejects_other_contexts():
    assert ActionResolver.is_valid_contextual_action(ChangeSeat(), FindHotels()) == (False, True)
    assert ActionResolver.is_valid_contextual_action(CancelFlight(), FindHotels()) == (
        False,
        False,
    )


def test_update_rehosts_sibling_into_shared_context():
    # Arrange
    parent = FindHotels()
    current = ChangeHotelLocation()
    current.context = parent
    new = RateHotel()

    # Act
    valid, contextual = ActionResolver.update_if_valid_contextual_action(new, current)

    # Assert
    assert (valid, contextual) == (True, True)
    assert new.context is parent


def test_update_rejects_sibling_with_other_context_type():
    # Arrange
    current = ChangeHotelLocation()
    current.context = FindHotels()

    # Act & Assert
    assert ActionResolver.update_if_valid_contextual_action(ChangeSeat(), current) == (
        False,
        True,
    )


def test_update_accepts_non_contextual_action():
    assert ActionResolver.update_if_valid_contextual_action(CancelFlight(), BookFlight()) == (
        True,
        False,
    )


def test_resolver_keeps_given_empty_registry():
    # Arrange
    registry = ActionRegistry()

    # Act
    resolver = ActionResolver(registry)

    # Assert
    assert resolver.registry is registry
    intent = IntentCandidate(name="BookFlight", score=0.9)
    assert resolver.resolve_action_from_intent(intent) is None


def test_get_action_descriptor_returns_bound_descriptor():
    descriptor = ActionResolver.get_action_descriptor(ChangeHotelLocation())

    assert descriptor.friendly_name == ChangeHotelLocation.descriptor().friendly_name
    assert descriptor.context_type is FindHotels
