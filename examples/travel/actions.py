"""Actions for the travel booking example"""

import logging
import uuid
from datetime import date

from actionbind import Action, ContextualAction, Param, action_binding

logger = logging.getLogger(__name__)


@action_binding(
    "BookFlight",
    friendly_name="Book a flight",
    description="Book a one-way flight between two cities",
)
class BookFlight(Action):
    destination: str | None = Param(
        "Where do you want to fly to?",
        entity=["destination", "city"],
        validator="city_name",
        error_message="That does not look like a city. Where do you want to fly to?",
    )
    departure_city: str | None = Param(
        "Which city are you flying from?",
        entity="departureCity",
        validator="city_name",
        error_message="That does not look like a city. Which city are you flying from?",
    )
    departure_date: date | None = Param(
        "When do you want to travel?",
        required=False,
        entity="datetime",
        validator="future_date",
    )

    async def fulfill(self) -> str:
        reference = uuid.uuid4().hex[:6].upper()
        logger.info(f"Booking flight {self.departure_city} -> {self.destination} ({reference})")
        when = f" on {self.departure_date.isoformat()}" if self.departure_date else ""
        return (
            f"Your flight from {self.departure_city} to {self.destination}{when} is booked. "
            f"Booking reference: {reference}"
        )


@action_binding(
    "CancelFlight",
    friendly_name="Cancel a flight",
    description="Cancel an existing flight booking",
)
class CancelFlight(Action):
    booking_reference: str | None = Param(
        "What is your booking reference?",
        entity="bookingReference",
        validator="booking_reference",
        error_message="Booking references have six letters or digits. What is yours?",
    )

    async def fulfill(self) -> str:
        logger.info(f"Cancelling booking {self.booking_reference}")
        return f"Booking {self.booking_reference.upper()} has been cancelled."


@action_binding(
    "FindHotels",
    friendly_name="Find hotels",
    description="Search hotels in a city",
)
class FindHotels(Action):
    location: str | None = Param(
        "In which city are you looking for a hotel?",
        entity=["location", "city"],
        validator="city_name",
    )
    nights: int | None = Param(
        "How many nights?",
        required=False,
        entity="number",
        validator="positive_integer",
    )

    async def fulfill(self) -> str:
        nights = f" for {self.nights} nights" if self.nights else ""
        return f"Here are the best hotels in {self.location}{nights}."


@action_binding(
    "ChangeHotelLocation",
    friendly_name="Change hotel location",
    description="Change the city of the current hotel search",
    context=FindHotels,
    can_start_with_no_context=False,
)
class ChangeHotelLocation(ContextualAction):
    location: str | None = Param(
        "Which city should I search instead?",
        entity=["location", "city"],
        validator="city_name",
    )

    async def fulfill(self) -> str:
        self.context.location = self.location
        return f"Searching in {self.location} instead."
