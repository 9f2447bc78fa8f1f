"""Sample trips for onboarding new users and for tests.

Every builder is a pure function of ``today``: fixed ids, fixed structure and
dates relative to ``today``. The only random value anywhere in this module is
the rating drawn by ``create_mock_poi``.
"""

import random
from datetime import datetime, time, timedelta
from decimal import Decimal

from tripsync.models import (
    Accommodation,
    AccommodationType,
    Coordinate,
    CoordinatePair,
    DocumentType,
    ForexSnapshot,
    Money,
    OpeningHours,
    POICategory,
    PointOfInterest,
    RegionPriority,
    TransportationMethod,
    TransportMode,
    Trip,
    TripDocument,
    TripRegion,
)
from tripsync.models.common import new_id
from tripsync.models.currency import default_currency_for

# AUD per one unit of the keyed currency, as captured for the sample data
SAMPLE_RATES = {
    "VND": Decimal("0.000041"),
    "JPY": Decimal("0.0102"),
    "EUR": Decimal("1.65"),
    "SGD": Decimal("1.17"),
}


def _days(start: datetime, n: int) -> datetime:
    return start + timedelta(days=n)


def _money(amount: str, currency: str) -> Money:
    """Money converted into AUD at the sample rate (unconverted if unquoted)."""
    if currency == "AUD":
        return Money(amount=Decimal(amount), currency=currency, exchange_rate=Decimal(1))
    return Money(amount=Decimal(amount), currency=currency, exchange_rate=SAMPLE_RATES.get(currency))


def _sample_snapshot(today: datetime) -> ForexSnapshot:
    return ForexSnapshot(base_currency="AUD", rates=SAMPLE_RATES, last_updated=today)


def create_mock_trips(today: datetime | None = None) -> list[Trip]:
    """All five sample trips, built against the same ``today``."""
    today = today or datetime.now()
    return [
        create_vietnam_trip(today),
        create_japan_trip(today),
        create_europe_trip(today),
        create_domestic_trip(today),
        create_business_trip(today),
    ]


def create_vietnam_trip(today: datetime | None = None) -> Trip:
    """Vietnam trip: Ho Chi Minh City then Hanoi, with a domestic flight."""
    today = today or datetime.now()
    start = _days(today, 30)
    end = _days(start, 44)

    ben_thanh = PointOfInterest(
        id="ben_thanh_market",
        name="Ben Thanh Market",
        category=POICategory.market,
        coordinates=Coordinate(latitude=10.7720, longitude=106.6980),
        address="Lê Lợi, Phường Phạm Ngũ Lão, Quận 1, TP.HCM",
        estimated_duration_seconds=7200,
        entry_cost=Money(amount=Decimal(0), currency="VND"),
        estimated_spending=_money("500000", "VND"),
        description="Famous traditional market with local food, souvenirs, and handicrafts",
        rating=4.2,
        opening_hours=[
            OpeningHours(day_of_week=day, open_time=time(6, 0), close_time=time(18, 0))
            for day in range(1, 8)
        ],
    )
    war_museum = PointOfInterest(
        id="war_remnants_museum",
        name="War Remnants Museum",
        category=POICategory.museum,
        coordinates=Coordinate(latitude=10.7797, longitude=106.6914),
        address="28 Võ Văn Tần, Phường 6, Quận 3, TP.HCM",
        estimated_duration_seconds=5400,
        entry_cost=_money("40000", "VND"),
        description="Comprehensive museum documenting the Vietnam War",
        rating=4.5,
    )
    hcmc_hotel = Accommodation(
        id="hcmc_hotel",
        name="Hotel Continental Saigon",
        type=AccommodationType.hotel,
        address="132-134 Đồng Khởi, Bến Nghé, Quận 1, TP.HCM",
        coordinates=Coordinate(latitude=10.7770, longitude=106.7026),
        check_in_date=start,
        check_out_date=_days(start, 7),
        total_cost=_money("1400000", "VND"),
        rating=4.3,
        amenities=["WiFi", "Air Conditioning", "Restaurant", "Pool", "Gym"],
    )
    hcmc = TripRegion(
        id="hcmc_region",
        name="Ho Chi Minh City",
        country="Vietnam",
        arrival_date=start,
        departure_date=_days(start, 7),
        coordinates=Coordinate(latitude=10.8231, longitude=106.6297),
        timezone="Asia/Ho_Chi_Minh",
        budget_allocation=Decimal(1500),
        daily_budget_suggestion=Decimal(200),
        points_of_interest=[ben_thanh, war_museum],
        accommodations=[hcmc_hotel],
    )

    flight_departure = _days(start, 8)
    hcmc_to_hanoi = TransportationMethod(
        id="hcmc_hanoi_flight",
        mode=TransportMode.flight,
        from_location="Ho Chi Minh City",
        to_location="Hanoi",
        departure_time=flight_departure,
        arrival_time=flight_departure + timedelta(hours=2),
        cost=_money("2500000", "VND"),
        booking_reference="VN1234",
        coordinates=CoordinatePair(
            origin=Coordinate(latitude=10.8184, longitude=106.6521),  # SGN
            destination=Coordinate(latitude=21.2187, longitude=105.8068),  # HAN
        ),
    )
    old_quarter = PointOfInterest(
        id="hanoi_old_quarter",
        name="Hanoi Old Quarter",
        category=POICategory.cultural,
        coordinates=Coordinate(latitude=21.0333, longitude=105.8500),
        estimated_duration_seconds=14400,
        description="Historic neighborhood with narrow streets, traditional shops, and street food",
        rating=4.6,
        incoming_transport_id=hcmc_to_hanoi.id,
    )
    hanoi = TripRegion(
        id="hanoi_region",
        name="Hanoi",
        country="Vietnam",
        arrival_date=_days(start, 8),
        departure_date=_days(start, 14),
        coordinates=Coordinate(latitude=21.0285, longitude=105.8542),
        timezone="Asia/Ho_Chi_Minh",
        budget_allocation=Decimal(2000),
        points_of_interest=[old_quarter],
    )

    vietnam = TripRegion(
        id="vietnam_country",
        name="Vietnam",
        country="Vietnam",
        arrival_date=start,
        departure_date=end,
        coordinates=Coordinate(latitude=14.0583, longitude=108.2772),
        timezone="Asia/Ho_Chi_Minh",
        local_currency="VND",
        budget_allocation=Decimal(3500),
        sub_regions=[hcmc, hanoi],
        transportation_methods=[hcmc_to_hanoi],
        priority=RegionPriority.high,
    )

    return Trip(
        id="vietnam_trip_001",
        title="Vietnam Adventure",
        start_date=start,
        end_date=end,
        created_date=today,
        last_modified=today,
        home_country="Australia",
        target_countries=["Vietnam"],
        is_international=True,
        base_currency="AUD",
        total_budget=Decimal(3500),
        forex_snapshot=_sample_snapshot(today),
        primary_transport_mode=TransportMode.flight,
        has_flight_details=True,
        regions=[vietnam],
        documents=[
            TripDocument(
                id="vietnam_flight",
                title="Sydney to HCMC Flight",
                type=DocumentType.flight,
                upload_date=today,
                associated_region_id="vietnam_country",
                notes="Jetstar flight JQ124, Gate 23",
            ),
            TripDocument(
                id="passport_copy",
                title="Passport Copy",
                type=DocumentType.passport,
                upload_date=today,
            ),
        ],
        tags=["adventure", "culture", "food", "backpacking"],
    )


def create_japan_trip(today: datetime | None = None) -> Trip:
    """Ten-week Japan trip: Tokyo then Kyoto by shinkansen."""
    today = today or datetime.now()
    start = _days(today, 60)
    end = _days(start, 70)

    sensoji = PointOfInterest(
        id="sensoji_temple",
        name="Sensoji Temple",
        category=POICategory.religious,
        coordinates=Coordinate(latitude=35.7148, longitude=139.7967),
        estimated_duration_seconds=5400,
        entry_cost=Money(amount=Decimal(0), currency="JPY"),
        description="Ancient Buddhist temple in Asakusa district",
        rating=4.7,
    )
    tokyo = TripRegion(
        id="tokyo_region",
        name="Tokyo",
        country="Japan",
        arrival_date=start,
        departure_date=_days(start, 6),
        coordinates=Coordinate(latitude=35.6762, longitude=139.6503),
        timezone="Asia/Tokyo",
        budget_allocation=Decimal(3000),
        points_of_interest=[sensoji],
        accommodations=[
            Accommodation(
                id="tokyo_hotel",
                name="Hotel Gracery Shinjuku",
                address="1-19-1 Kabukicho, Shinjuku City, Tokyo",
                coordinates=Coordinate(latitude=35.6947, longitude=139.7017),
                check_in_date=start,
                check_out_date=_days(start, 6),
                total_cost=_money("96000", "JPY"),
                rating=4.4,
                amenities=["WiFi", "Restaurant"],
            )
        ],
    )

    shinkansen_departure = _days(start, 6) + timedelta(hours=10)
    shinkansen = TransportationMethod(
        id="tokyo_kyoto_shinkansen",
        mode=TransportMode.train,
        from_location="Tokyo",
        to_location="Kyoto",
        departure_time=shinkansen_departure,
        arrival_time=shinkansen_departure + timedelta(hours=2, minutes=15),
        cost=_money("14170", "JPY"),
        notes="Nozomi, reserved seat",
        coordinates=CoordinatePair(
            origin=Coordinate(latitude=35.6812, longitude=139.7671),
            destination=Coordinate(latitude=34.9858, longitude=135.7588),
        ),
    )
    fushimi_inari = PointOfInterest(
        id="fushimi_inari_taisha",
        name="Fushimi Inari Taisha",
        category=POICategory.religious,
        coordinates=Coordinate(latitude=34.9671, longitude=135.7727),
        estimated_duration_seconds=10800,
        entry_cost=Money(amount=Decimal(0), currency="JPY"),
        description="Shinto shrine famous for its thousands of vermilion torii gates",
        rating=4.8,
        incoming_transport_id=shinkansen.id,
    )
    kyoto = TripRegion(
        id="kyoto_region",
        name="Kyoto",
        country="Japan",
        arrival_date=_days(start, 6),
        departure_date=_days(start, 12),
        coordinates=Coordinate(latitude=35.0116, longitude=135.7681),
        timezone="Asia/Tokyo",
        budget_allocation=Decimal(1500),
        points_of_interest=[fushimi_inari],
        accommodations=[
            Accommodation(
                id="kyoto_ryokan",
                name="Gion Hatanaka",
                type=AccommodationType.guesthouse,
                coordinates=Coordinate(latitude=35.0037, longitude=135.7788),
                check_in_date=_days(start, 6),
                check_out_date=_days(start, 12),
                total_cost=_money("150000", "JPY"),
                rating=4.6,
                amenities=["Onsen", "Breakfast"],
            )
        ],
    )

    japan = TripRegion(
        id="japan_country",
        name="Japan",
        country="Japan",
        arrival_date=start,
        departure_date=end,
        coordinates=Coordinate(latitude=36.2048, longitude=138.2529),
        timezone="Asia/Tokyo",
        local_currency="JPY",
        budget_allocation=Decimal(5000),
        sub_regions=[tokyo, kyoto],
        transportation_methods=[shinkansen],
    )

    return Trip(
        id="japan_trip_001",
        title="Japan Cultural Experience",
        start_date=start,
        end_date=end,
        created_date=today,
        last_modified=today,
        home_country="Australia",
        target_countries=["Japan"],
        is_international=True,
        base_currency="AUD",
        total_budget=Decimal(5000),
        forex_snapshot=_sample_snapshot(today),
        primary_transport_mode=TransportMode.flight,
        regions=[japan],
        tags=["culture", "temples", "food", "technology"],
    )


def _europe_country(
    country_id: str,
    country: str,
    country_coordinates: Coordinate,
    city: PointOfInterest,
    city_name: str,
    city_coordinates: Coordinate,
    stay: Accommodation,
    timezone: str,
    arrival: datetime,
    departure: datetime,
) -> TripRegion:
    city_region = TripRegion(
        id=f"{city_name.lower()}_region",
        name=city_name,
        country=country,
        arrival_date=arrival,
        departure_date=departure,
        coordinates=city_coordinates,
        timezone=timezone,
        budget_allocation=Decimal(1500),
        points_of_interest=[city],
        accommodations=[stay],
    )
    return TripRegion(
        id=country_id,
        name=country,
        country=country,
        arrival_date=arrival,
        departure_date=departure,
        coordinates=country_coordinates,
        budget_allocation=Decimal(500),
        sub_regions=[city_region],
    )


def create_europe_trip(today: datetime | None = None) -> Trip:
    """Four-country backpacking trip linked by rail and one flight."""
    today = today or datetime.now()
    start = _days(today, 90)
    end = _days(start, 118)

    legs = [
        ("paris_rome_train", TransportMode.train, "Paris", "Rome", 30, "89"),
        ("rome_berlin_flight", TransportMode.flight, "Rome", "Berlin", 60, "120"),
        ("berlin_amsterdam_train", TransportMode.train, "Berlin", "Amsterdam", 90, "60"),
    ]
    transport = {
        leg_id: TransportationMethod(
            id=leg_id,
            mode=mode,
            from_location=origin,
            to_location=destination,
            departure_time=_days(start, day) + timedelta(hours=9),
            arrival_time=_days(start, day) + timedelta(hours=17),
            cost=_money(price, "EUR"),
        )
        for leg_id, mode, origin, destination, day, price in legs
    }

    france = _europe_country(
        "france_country",
        "France",
        Coordinate(latitude=46.2276, longitude=2.2137),
        PointOfInterest(
            id="louvre_museum",
            name="Louvre Museum",
            category=POICategory.museum,
            coordinates=Coordinate(latitude=48.8606, longitude=2.3376),
            estimated_duration_seconds=14400,
            entry_cost=_money("22", "EUR"),
            booking_required=True,
            rating=4.7,
        ),
        "Paris",
        Coordinate(latitude=48.8566, longitude=2.3522),
        Accommodation(
            id="paris_hostel",
            name="Generator Paris",
            type=AccommodationType.hostel,
            check_in_date=start,
            check_out_date=_days(start, 30),
            total_cost=_money("1050", "EUR"),
        ),
        "Europe/Paris",
        start,
        _days(start, 30),
    )
    italy = _europe_country(
        "italy_country",
        "Italy",
        Coordinate(latitude=41.8719, longitude=12.5674),
        PointOfInterest(
            id="colosseum",
            name="Colosseum",
            category=POICategory.attraction,
            coordinates=Coordinate(latitude=41.8902, longitude=12.4922),
            estimated_duration_seconds=10800,
            entry_cost=_money("18", "EUR"),
            rating=4.8,
            incoming_transport_id="paris_rome_train",
        ),
        "Rome",
        Coordinate(latitude=41.9028, longitude=12.4964),
        Accommodation(
            id="rome_apartment",
            name="Trastevere Apartment",
            type=AccommodationType.airbnb,
            check_in_date=_days(start, 30),
            check_out_date=_days(start, 60),
            total_cost=_money("1500", "EUR"),
        ),
        "Europe/Rome",
        _days(start, 30),
        _days(start, 60),
    )
    germany = _europe_country(
        "germany_country",
        "Germany",
        Coordinate(latitude=51.1657, longitude=10.4515),
        PointOfInterest(
            id="brandenburg_gate",
            name="Brandenburg Gate",
            category=POICategory.attraction,
            coordinates=Coordinate(latitude=52.5163, longitude=13.3777),
            estimated_duration_seconds=1800,
            rating=4.7,
            incoming_transport_id="rome_berlin_flight",
        ),
        "Berlin",
        Coordinate(latitude=52.5200, longitude=13.4050),
        Accommodation(
            id="berlin_hostel",
            name="Circus Hostel",
            type=AccommodationType.hostel,
            check_in_date=_days(start, 60),
            check_out_date=_days(start, 90),
            total_cost=_money("900", "EUR"),
        ),
        "Europe/Berlin",
        _days(start, 60),
        _days(start, 90),
    )
    netherlands = _europe_country(
        "netherlands_country",
        "Netherlands",
        Coordinate(latitude=52.1326, longitude=5.2913),
        PointOfInterest(
            id="rijksmuseum",
            name="Rijksmuseum",
            category=POICategory.museum,
            coordinates=Coordinate(latitude=52.3600, longitude=4.8852),
            estimated_duration_seconds=10800,
            entry_cost=_money("22.50", "EUR"),
            rating=4.8,
            incoming_transport_id="berlin_amsterdam_train",
        ),
        "Amsterdam",
        Coordinate(latitude=52.3676, longitude=4.9041),
        Accommodation(
            id="amsterdam_hotel",
            name="Hotel V Nesplein",
            check_in_date=_days(start, 90),
            check_out_date=end,
            total_cost=_money("2800", "EUR"),
        ),
        "Europe/Amsterdam",
        _days(start, 90),
        end,
    )
    france.transportation_methods.append(transport["paris_rome_train"])
    italy.transportation_methods.append(transport["rome_berlin_flight"])
    germany.transportation_methods.append(transport["berlin_amsterdam_train"])

    return Trip(
        id="europe_trip_001",
        title="European Backpacking Adventure",
        start_date=start,
        end_date=end,
        created_date=today,
        last_modified=today,
        home_country="Australia",
        target_countries=["France", "Italy", "Germany", "Netherlands"],
        is_international=True,
        total_budget=Decimal(8000),
        forex_snapshot=_sample_snapshot(today),
        primary_transport_mode=TransportMode.mixed,
        regions=[france, italy, germany, netherlands],
        tags=["backpacking", "culture", "art", "history"],
    )


def create_domestic_trip(today: datetime | None = None) -> Trip:
    """Victoria road trip: Melbourne districts plus a Great Ocean Road drive."""
    today = today or datetime.now()
    start = _days(today, 14)
    end = _days(start, 21)

    cbd = TripRegion(
        id="melbourne_cbd",
        name="Melbourne CBD",
        country="Australia",
        arrival_date=start,
        departure_date=_days(start, 7),
        coordinates=Coordinate(latitude=-37.8136, longitude=144.9631),
        timezone="Australia/Melbourne",
        budget_allocation=Decimal(400),
        points_of_interest=[
            PointOfInterest(
                id="hosier_lane",
                name="Hosier Lane",
                category=POICategory.attraction,
                coordinates=Coordinate(latitude=-37.8165, longitude=144.9691),
                estimated_duration_seconds=1800,
                entry_cost=_money("0", "AUD"),
                rating=4.4,
            ),
            PointOfInterest(
                id="queen_victoria_market",
                name="Queen Victoria Market",
                category=POICategory.market,
                coordinates=Coordinate(latitude=-37.8076, longitude=144.9568),
                estimated_duration_seconds=7200,
                estimated_spending=_money("60", "AUD"),
                rating=4.5,
            ),
        ],
        accommodations=[
            Accommodation(
                id="melbourne_apartment",
                name="Collins Street Apartment",
                type=AccommodationType.apartment,
                check_in_date=start,
                check_out_date=_days(start, 14),
                total_cost=_money("1400", "AUD"),
            )
        ],
    )
    fitzroy = TripRegion(
        id="fitzroy_district",
        name="Fitzroy",
        country="Australia",
        arrival_date=_days(start, 7),
        departure_date=_days(start, 14),
        coordinates=Coordinate(latitude=-37.7983, longitude=144.9784),
        timezone="Australia/Melbourne",
        budget_allocation=Decimal(200),
        points_of_interest=[
            PointOfInterest(
                id="brunswick_street_cafes",
                name="Brunswick Street Cafes",
                category=POICategory.cafe,
                coordinates=Coordinate(latitude=-37.7990, longitude=144.9780),
                estimated_spending=_money("40", "AUD"),
                rating=4.3,
            )
        ],
    )
    melbourne = TripRegion(
        id="melbourne_region",
        name="Melbourne",
        country="Australia",
        arrival_date=start,
        departure_date=_days(start, 14),
        coordinates=Coordinate(latitude=-37.8136, longitude=144.9631),
        timezone="Australia/Melbourne",
        budget_allocation=Decimal(200),
        sub_regions=[cbd, fitzroy],
    )

    drive_departure = _days(start, 14) + timedelta(hours=8)
    drive = TransportationMethod(
        id="melbourne_great_ocean_road_drive",
        mode=TransportMode.car,
        from_location="Melbourne",
        to_location="Port Campbell",
        departure_time=drive_departure,
        arrival_time=drive_departure + timedelta(hours=4),
        cost=_money("85", "AUD"),
        notes="Fuel and tolls",
    )
    great_ocean_road = TripRegion(
        id="great_ocean_road_region",
        name="Great Ocean Road",
        country="Australia",
        arrival_date=_days(start, 14),
        departure_date=end,
        coordinates=Coordinate(latitude=-38.6805, longitude=143.3915),
        timezone="Australia/Melbourne",
        budget_allocation=Decimal(300),
        points_of_interest=[
            PointOfInterest(
                id="twelve_apostles",
                name="Twelve Apostles",
                category=POICategory.viewpoint,
                coordinates=Coordinate(latitude=-38.6621, longitude=143.1051),
                estimated_duration_seconds=5400,
                rating=4.8,
                incoming_transport_id=drive.id,
            )
        ],
        accommodations=[
            Accommodation(
                id="port_campbell_motel",
                name="Port Campbell Motor Inn",
                type=AccommodationType.other,
                check_in_date=_days(start, 14),
                check_out_date=end,
                total_cost=_money("700", "AUD"),
            )
        ],
    )

    victoria = TripRegion(
        id="victoria_state",
        name="Victoria",
        country="Australia",
        arrival_date=start,
        departure_date=end,
        timezone="Australia/Melbourne",
        budget_allocation=Decimal(100),
        sub_regions=[melbourne, great_ocean_road],
        transportation_methods=[drive],
    )

    return Trip(
        id="melbourne_trip_001",
        title="Melbourne Weekend Getaway",
        start_date=start,
        end_date=end,
        created_date=today,
        last_modified=today,
        home_country="Australia",
        target_countries=["Australia"],
        is_international=False,
        total_budget=Decimal(1200),
        forex_snapshot=_sample_snapshot(today),
        primary_transport_mode=TransportMode.car,
        has_flight_details=False,
        regions=[victoria],
        tags=["domestic", "city", "food", "coffee"],
    )


def create_business_trip(today: datetime | None = None) -> Trip:
    """Singapore conference week: Marina Bay venue plus an evening on Sentosa."""
    today = today or datetime.now()
    start = _days(today, 7)
    end = _days(start, 10)

    expo = PointOfInterest(
        id="sands_expo",
        name="Sands Expo and Convention Centre",
        category=POICategory.other,
        coordinates=Coordinate(latitude=1.2834, longitude=103.8607),
        planned_visit_date=_days(start, 1) + timedelta(hours=9),
        estimated_duration_seconds=28800,
        entry_cost=_money("950", "SGD"),
        booking_required=True,
        description="Conference venue",
    )
    marina_bay = TripRegion(
        id="marina_bay_region",
        name="Marina Bay",
        country="Singapore",
        arrival_date=start,
        departure_date=end,
        coordinates=Coordinate(latitude=1.2820, longitude=103.8585),
        timezone="Asia/Singapore",
        budget_allocation=Decimal(2000),
        points_of_interest=[
            expo,
            PointOfInterest(
                id="gardens_by_the_bay",
                name="Gardens by the Bay",
                category=POICategory.park,
                coordinates=Coordinate(latitude=1.2816, longitude=103.8636),
                estimated_duration_seconds=5400,
                entry_cost=_money("32", "SGD"),
                rating=4.7,
            ),
        ],
        accommodations=[
            Accommodation(
                id="marina_bay_hotel",
                name="Pan Pacific Singapore",
                coordinates=Coordinate(latitude=1.2914, longitude=103.8593),
                check_in_date=start,
                check_out_date=end,
                total_cost=_money("2100", "SGD"),
                amenities=["WiFi", "Business Centre", "Pool"],
            )
        ],
    )

    taxi_departure = _days(start, 3) + timedelta(hours=18)
    taxi = TransportationMethod(
        id="marina_sentosa_taxi",
        mode=TransportMode.taxi,
        from_location="Marina Bay",
        to_location="Sentosa",
        departure_time=taxi_departure,
        arrival_time=taxi_departure + timedelta(minutes=20),
        cost=_money("25", "SGD"),
    )
    sentosa = TripRegion(
        id="sentosa_region",
        name="Sentosa",
        country="Singapore",
        arrival_date=_days(start, 3),
        departure_date=_days(start, 3),
        coordinates=Coordinate(latitude=1.2494, longitude=103.8303),
        timezone="Asia/Singapore",
        budget_allocation=Decimal(150),
        priority=RegionPriority.low,
        points_of_interest=[
            PointOfInterest(
                id="siloso_beach",
                name="Siloso Beach",
                category=POICategory.beach,
                coordinates=Coordinate(latitude=1.2530, longitude=103.8120),
                rating=4.2,
                incoming_transport_id=taxi.id,
            )
        ],
    )

    singapore = TripRegion(
        id="singapore_country",
        name="Singapore",
        country="Singapore",
        arrival_date=start,
        departure_date=end,
        timezone="Asia/Singapore",
        budget_allocation=Decimal(350),
        sub_regions=[marina_bay, sentosa],
        transportation_methods=[taxi],
    )

    return Trip(
        id="business_trip_001",
        title="Singapore Business Conference",
        start_date=start,
        end_date=end,
        created_date=today,
        last_modified=today,
        home_country="Australia",
        target_countries=["Singapore"],
        is_international=True,
        total_budget=Decimal(2500),
        forex_snapshot=_sample_snapshot(today),
        primary_transport_mode=TransportMode.flight,
        has_flight_details=True,
        regions=[singapore],
        documents=[
            TripDocument(
                id="conference_pass",
                title="Conference Pass",
                type=DocumentType.ticket,
                upload_date=today,
                associated_poi_id=expo.id,
            )
        ],
        tags=["business", "conference", "networking"],
    )


def create_mock_region(
    name: str, country: str, coordinates: Coordinate, today: datetime | None = None
) -> TripRegion:
    """Three-day region with a 500 budget and the country's default currency."""
    today = today or datetime.now()
    return TripRegion(
        id=new_id(),
        name=name,
        country=country,
        arrival_date=today,
        departure_date=_days(today, 3),
        coordinates=coordinates,
        local_currency=default_currency_for(country),
        budget_allocation=Decimal(500),
        priority=RegionPriority.medium,
    )


def create_mock_poi(
    name: str,
    category: POICategory,
    coordinates: Coordinate,
    rng: random.Random | None = None,
    poi_id: str | None = None,
) -> PointOfInterest:
    """One-hour POI with a random rating in [3.5, 5.0].

    Pass a seeded ``random.Random`` to make the rating reproducible.
    """
    rng = rng or random.Random()
    return PointOfInterest(
        id=poi_id or new_id(),
        name=name,
        category=category,
        coordinates=coordinates,
        estimated_duration_seconds=3600,
        rating=rng.uniform(3.5, 5.0),
        description=f"A wonderful place to visit with great {category.value} experience",
    )
