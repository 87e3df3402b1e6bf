"""Test actions bound into a dedicated registry.

Context chains:
    FindHotels <- ChangeHotelLocation <- ChangeRoomType
    FindHotels <- RateHotel (cannot start without a context)
    BookFlight <- ChangeSeat
"""

from actionbind.actions.base import Action, ContextualAction, Param
from actionbind.actions.registry import ActionRegistry, action_binding

registry = ActionRegistry()


@action_binding("BookFlight", friendly_name="Book a flight", registry=registry)
class BookFlight(Action):
    destination: str | None = Param(
        "Where do you want to fly to?", entity=["destination", "city"], validator="city_name"
    )
    departure_city: str | None = Param(
        "Which city are you flying from?",
        entity="departureCity",
        validator="city_name",
        error_message="Please give a valid departure city.",
    )

    async def fulfill(self) -> str:
        return f"Booked {self.departure_city} -> {self.destination}"


@action_binding("CancelFlight", friendly_name="Cancel a flight", registry=registry)
class CancelFlight(Action):
    booking_reference: str | None = Param(
        "What is your booking reference?", entity="bookingReference"
    )

    async def fulfill(self) -> str:
        return f"Cancelled {self.booking_reference}"


@action_binding(
    "GetWeather",
    friendly_name="Get the weather",
    confirm_on_switching_context=False,
    registry=registry,
)
class GetWeather(Action):
    city: str | None = Param("Weather in which city?")

    async def fulfill(self) -> str:
        return f"Sunny in {self.city}"


@action_binding("FindHotels", friendly_name="Find hotels", registry=registry)
class FindHotels(Action):
    location: str | None = Param("In which city are you looking for a hotel?", entity="location")

    async def fulfill(self) -> str:
        return f"Hotels in {self.location}"


@action_binding(
    "ChangeHotelLocation",
    friendly_name="Change hotel location",
    context=FindHotels,
    registry=registry,
)
class ChangeHotelLocation(ContextualAction):
    location: str | None = Param("Which city should I search instead?", entity="location")

    async def fulfill(self) -> str:
        self.context.location = self.location
        return f"Location changed to {self.location}"


@action_binding(
    "ChangeRoomType",
    friendly_name="Change room type",
    context=ChangeHotelLocation,
    registry=registry,
)
class ChangeRoomType(ContextualAction):
    room_type: str | None = Param("Which room type?", entity="roomType")

    async def fulfill(self) -> str:
        return f"Room type {self.room_type}"


@action_binding(
    "RateHotel",
    friendly_name="Rate the hotel",
    context=FindHotels,
    can_start_with_no_context=False,
    registry=registry,
)
class RateHotel(ContextualAction):
    rating: int | None = Param("How many stars?", entity="number", validator="positive_integer")

    async def fulfill(self) -> str:
        return f"Rated {self.rating} stars"


@action_binding("ChangeSeat", friendly_name="Change seat", context=BookFlight, registry=registry)
class ChangeSeat(ContextualAction):
    seat: str | None = Param("Which seat?", entity="seat")

    async def fulfill(self) -> str:
        return f"Seat {self.seat}"
