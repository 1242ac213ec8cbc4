"""Demo trip used to seed the in-memory session."""

from datetime import date

from tripmate.app.models import (
    Category,
    Expense,
    FlightDetails,
    ItineraryItem,
    Location,
    MetroCity,
    MetroDetails,
    Traveler,
    TripData,
)


def demo_trip() -> TripData:
    """Three travelers, one planned day and two shared expenses."""
    return TripData(
        title="Taiwan Adventure 2024",
        start_date=date(2024, 10, 10),
        duration_days=5,
        budget=50000,
        travelers=[
            Traveler(id="1", name="Alice"),
            Traveler(id="2", name="Bob"),
            Traveler(id="3", name="Charlie"),
        ],
        items=[
            ItineraryItem(
                id="101",
                day_index=1,
                start_time="09:00",
                end_time="10:00",
                title="Arrival at TPE",
                category=Category.TRANSPORT,
                transport_details=FlightDetails(identifier="BR123", terminal="2", gate="C5"),
                location=Location(name="Taoyuan International Airport"),
                cost=0,
            ),
            ItineraryItem(
                id="102",
                day_index=1,
                start_time="10:30",
                end_time="11:15",
                title="Airport MRT to Taipei Main",
                category=Category.TRANSPORT,
                transport_details=MetroDetails(
                    metro_city=MetroCity.TAOYUAN, metro_line_color="purple"
                ),
                location=Location(name="Taipei Main Station"),
                cost=150,
            ),
            ItineraryItem(
                id="103",
                day_index=1,
                start_time="12:00",
                end_time="13:00",
                title="Lunch at Din Tai Fung",
                description="Famous Xiao Long Bao",
                category=Category.FOOD,
                location=Location(name="Din Tai Fung Xinyi"),
                cost=1500,
            ),
            ItineraryItem(
                id="104",
                day_index=1,
                start_time="14:00",
                title="Check-in Hotel",
                category=Category.ACCOMMODATION,
                location=Location(name="W Hotel Taipei"),
                booking_link="https://www.marriott.com",
                cost=8000,
            ),
        ],
        expenses=[
            Expense(
                id="e1",
                amount=1500,
                currency="TWD",
                category="Food",
                payer_id="1",
                split_between=("1", "2", "3"),
                description="Lunch at DTF",
                date=date(2024, 10, 10),
            ),
            Expense(
                id="e2",
                amount=300,
                currency="TWD",
                category="Transport",
                payer_id="2",
                split_between=("1", "2", "3"),
                description="Taxi to Hotel",
                date=date(2024, 10, 10),
            ),
        ],
    )
