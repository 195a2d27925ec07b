from datetime import date, datetime

from wander_routes.models.domain import (
    Activity,
    Coordinates,
    Location,
    OperatingHours,
    TransportMode,
    TransportPreferences,
)
from wander_routes.services.routing.builder import build_route, opening_time

MONDAY = date(2024, 6, 3)
PREFS = TransportPreferences(preferred_modes=(TransportMode.WALKING, TransportMode.TRANSIT))


def _activity(activity_id: str, lon: float, duration: int = 60, hours: tuple[OperatingHours, ...] = ()) -> Activity:
    return Activity(
        id=activity_id,
        name=activity_id.title(),
        category="sightseeing",
        location=Location(Coordinates(0.0, lon), name=activity_id),
        duration=duration,
        operating_hours=hours,
    )


def test_first_activity_starts_at_day_start_without_travel():
    route = build_route([_activity("a", 0.0), _activity("b", 0.01)], MONDAY, "09:00", PREFS)

    first, second = route.stops
    assert first.arrival_time == datetime(2024, 6, 3, 9, 0)
    assert first.departure_time == datetime(2024, 6, 3, 10, 0)
    assert first.order == 0
    assert len(route.travel_segments) == 1

    segment = route.travel_segments[0]
    assert segment.id == "travel_1"
    assert (segment.from_activity_id, segment.to_activity_id) == ("a", "b")
    assert segment.mode == TransportMode.WALKING
    assert second.arrival_time == segment.arrival_time == datetime(2024, 6, 3, 10, 14)


def test_totals_add_up():
    activities = [_activity("a", 0.0, 60), _activity("b", 0.01, 30), _activity("c", 0.02, 45)]
    route = build_route(activities, MONDAY, "09:00", PREFS)

    assert route.activity_time == 135
    assert route.total_travel_time == sum(segment.duration for segment in route.travel_segments)
    assert route.total_duration == route.total_travel_time + route.total_wait_time + route.activity_time
    assert route.end_time == route.stops[-1].departure_time
    assert route.total_distance > 2000
    assert not route.is_optimized


def test_start_location_adds_leading_leg():
    hotel = Location(Coordinates(0.0, -0.01), name="Hotel")
    route = build_route([_activity("a", 0.0), _activity("b", 0.01)], MONDAY, "09:00", PREFS, start_location=hotel)

    first_leg = route.travel_segments[0]
    assert first_leg.id == "travel_0"
    assert first_leg.from_activity_id == "start"
    assert route.stops[0].arrival_time == datetime(2024, 6, 3, 9, 14)


def test_end_leg_counts_travel_but_not_end_time():
    activities = [_activity("a", 0.0), _activity("b", 0.01)]
    hotel = Location(Coordinates(0.0, 0.02), name="Hotel")

    without_end = build_route(activities, MONDAY, "09:00", PREFS)
    with_end = build_route(activities, MONDAY, "09:00", PREFS, end_location=hotel)

    last_leg = with_end.travel_segments[-1]
    assert last_leg.id == "travel_end"
    assert (last_leg.from_activity_id, last_leg.to_activity_id) == ("b", "end")
    assert with_end.total_travel_time == without_end.total_travel_time + last_leg.duration
    assert with_end.end_time == without_end.end_time


def test_empty_day_with_both_anchors_has_single_leg():
    start = Location(Coordinates(0.0, 0.0), name="Hotel")
    end = Location(Coordinates(0.0, 0.01), name="Station")
    route = build_route([], MONDAY, "09:00", PREFS, start, end)

    assert route.stops == ()
    assert len(route.travel_segments) == 1
    assert route.travel_segments[0].from_activity_id == "start"
    assert route.travel_segments[0].to_activity_id == "end"
    assert route.end_time == datetime(2024, 6, 3, 9, 0)


def test_waits_for_opening_time():
    # Monday is day 1 when Sunday is 0
    museum_hours = (OperatingHours(day_of_week=1, open="11:00", close="17:00"),)
    activities = [_activity("a", 0.0), _activity("museum", 0.01, 90, museum_hours)]

    route = build_route(activities, MONDAY, "09:00", PREFS)
    first, museum = route.stops

    assert first.wait_time == 0
    assert first.arrival_time == datetime(2024, 6, 3, 9, 0)
    assert museum.wait_time == 46
    assert museum.arrival_time == datetime(2024, 6, 3, 11, 0)
    assert museum.departure_time == datetime(2024, 6, 3, 12, 30)
    assert route.total_wait_time == 46


def test_hours_for_other_days_or_closed_days_do_not_wait():
    other_day = (OperatingHours(day_of_week=2, open="11:00", close="17:00"),)
    closed = (OperatingHours(day_of_week=1, open="11:00", close="17:00", is_closed=True),)

    for hours in (other_day, closed):
        route = build_route([_activity("a", 0.0), _activity("b", 0.01, hours=hours)], MONDAY, "09:00", PREFS)
        assert route.stops[1].wait_time == 0
        assert route.stops[1].arrival_time == datetime(2024, 6, 3, 10, 14)


def test_opening_time_uses_sunday_first_weekdays():
    hours = (OperatingHours(day_of_week=0, open="10:30", close="18:00"),)
    sunday = datetime(2024, 6, 2, 8, 0)

    assert opening_time(hours, sunday) == datetime(2024, 6, 2, 10, 30)
    assert opening_time(hours, datetime(2024, 6, 3, 8, 0)) is None


def test_building_twice_gives_identical_routes():
    activities = [_activity("a", 0.0), _activity("b", 0.03), _activity("c", 0.01)]

    assert build_route(activities, MONDAY, "09:00", PREFS) == build_route(activities, "2024-06-03", "09:00", PREFS)


def test_stop_lookup_by_activity():
    route = build_route([_activity("a", 0.0), _activity("b", 0.01)], MONDAY, "09:00", PREFS)

    assert route.stop_for("b").id == "stop_b"
    assert route.stop_for("zzz") is None
    assert [activity.id for activity in route.activity_order] == ["a", "b"]
