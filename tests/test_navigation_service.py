"""Routing behaviour of NavigationService on the seed network."""

import itertools

import pytest

from citynav.domain.errors import (
    DuplicateEdgeError,
    NoRouteFoundError,
    RouteCostOverflowError,
    UnknownEdgeError,
    UnknownLocationError,
)
from citynav.domain.models import NoPath, RouteResult, TrafficStatus
from citynav.graph.weights import effective_weight

SEED_EDGES = [(0, 1), (0, 2), (1, 4), (2, 3), (3, 4), (0, 3)]

ALL_PAIRS = list(itertools.permutations(range(5), 2))


def path_cost(service, path):
    """Sum the effective weights along a path using the store's roads."""
    total = 0.0
    for a, b in zip(path, path[1:]):
        road = service.network.get_road(a, b)
        assert road is not None, f"no road between {a} and {b}"
        weight = effective_weight(road.base_cost, road.status)
        assert weight is not None, f"route uses blocked road {a}-{b}"
        total += weight
    return total


class TestSeedScenarios:
    def test_hub_to_south_station(self, service):
        route = service.find_route(0, 4)

        assert route.path == (0, 2, 3, 4)
        assert route.total_cost == pytest.approx(25.0)
        assert route.labels == ("Central_Hub", "West_End", "East_Gate", "South_Station")

    def test_airport_to_east_gate_takes_cheapest_detour(self, service):
        route = service.find_route(1, 3)

        assert route.path == (1, 0, 2, 3)
        assert route.total_cost == pytest.approx(30.0)

    def test_heavy_west_road_prefers_direct_link(self, service):
        service.update_status(0, 2, TrafficStatus.HEAVY)

        route = service.find_route(0, 3)

        assert route.path == (0, 3)
        assert route.total_cost == pytest.approx(20.0)

    def test_blocked_west_east_road(self, service):
        service.update_status(2, 3, TrafficStatus.BLOCKED)

        route = service.find_route(0, 4)

        assert route.path == (0, 3, 4)
        assert route.total_cost == pytest.approx(30.0)

    def test_hub_cut_off(self, service):
        for other in (1, 2, 3):
            service.update_status(0, other, TrafficStatus.BLOCKED)

        outcome = service.find_route(0, 4)

        assert outcome == NoPath(source=0, target=4)
        assert outcome.is_empty

    def test_moderate_west_road_still_loses_to_direct_link(self, service):
        service.update_status(0, 2, TrafficStatus.MODERATE)

        route = service.find_route(0, 3)

        assert route.path == (0, 3)
        assert route.total_cost == pytest.approx(20.0)


class TestRouteEdgeCases:
    @pytest.mark.parametrize("location_id", range(5))
    def test_route_to_self(self, service, location_id):
        route = service.find_route(location_id, location_id)

        assert route.path == (location_id,)
        assert route.total_cost == 0.0

    def test_route_to_self_ignores_blocked_roads(self, service):
        for road in service.enumerate_edges():
            service.update_status(road.a, road.b, TrafficStatus.BLOCKED)

        assert service.find_route(2, 2).path == (2,)

    @pytest.mark.parametrize("source, target", [(0, 9), (9, 0), (9, 9)])
    def test_unknown_location(self, service, source, target):
        with pytest.raises(UnknownLocationError):
            service.find_route(source, target)

    def test_isolated_location_is_unreachable(self, service):
        service.add_location(5, "Lighthouse")

        assert isinstance(service.find_route(0, 5), NoPath)

    def test_find_route_or_raise(self, service):
        service.update_status(1, 4, TrafficStatus.BLOCKED)
        service.update_status(3, 4, TrafficStatus.BLOCKED)

        with pytest.raises(NoRouteFoundError) as exc_info:
            service.find_route_or_raise(0, 4)

        assert (exc_info.value.source, exc_info.value.target) == (0, 4)
        assert service.find_route_or_raise(0, 1).path == (0, 1)

    def test_huge_heavy_road_is_still_routable(self, service):
        service.add_location(5, "Far_Point")
        service.add_road(4, 5, 1e307)
        service.update_status(4, 5, TrafficStatus.HEAVY)

        route = service.find_route(4, 5)

        assert route.path == (4, 5)
        assert route.total_cost == pytest.approx(3.5e307)

    def test_overflowing_route_cost_raises(self, service):
        for location_id in (5, 6):
            service.add_location(location_id, f"Far_{location_id}")
        service.add_road(4, 5, 5e307)
        service.add_road(5, 6, 5e307)
        service.update_status(4, 5, TrafficStatus.HEAVY)
        service.update_status(5, 6, TrafficStatus.HEAVY)

        with pytest.raises(RouteCostOverflowError):
            service.find_route(4, 6)

    def test_new_road_is_used_immediately(self, service):
        service.add_location(5, "Stadium")
        service.add_road(0, 5, 1.0)
        service.add_road(5, 4, 1.0)

        route = service.find_route(0, 4)

        assert route.path == (0, 5, 4)
        assert route.labels[1] == "Stadium"


class TestRouteProperties:
    @pytest.mark.parametrize("source, target", ALL_PAIRS)
    def test_reported_cost_matches_path(self, service, source, target):
        service.update_status(0, 2, TrafficStatus.MODERATE)
        service.update_status(1, 4, TrafficStatus.HEAVY)

        route = service.find_route(source, target)

        assert isinstance(route, RouteResult)
        assert route.path[0] == source and route.path[-1] == target
        assert path_cost(service, route.path) == pytest.approx(route.total_cost)

    def test_every_path_through_blocked_road_gives_no_path(self, service):
        # South_Station is only reachable through 1-4 and 3-4
        service.update_status(1, 4, TrafficStatus.BLOCKED)
        service.update_status(3, 4, TrafficStatus.BLOCKED)

        for source in range(4):
            assert isinstance(service.find_route(source, 4), NoPath)

    @pytest.mark.parametrize("a, b", SEED_EDGES)
    def test_cost_is_monotone_in_status(self, service, a, b):
        for source, target in ALL_PAIRS:
            previous = 0.0
            for status in TrafficStatus:
                service.update_status(a, b, status)
                outcome = service.find_route(source, target)
                cost = float("inf") if isinstance(outcome, NoPath) else outcome.total_cost
                assert cost >= previous - 1e-9
                previous = cost
            service.update_status(a, b, TrafficStatus.CLEAR)

    def test_restoring_status_restores_routes(self, service):
        before = [service.find_route(s, t) for s, t in ALL_PAIRS]

        service.update_status(2, 3, TrafficStatus.BLOCKED)
        service.update_status(2, 3, TrafficStatus.BLOCKED)
        service.update_status(2, 3, TrafficStatus.CLEAR)

        assert [service.find_route(s, t) for s, t in ALL_PAIRS] == before


class TestMutationsThroughService:
    def test_failed_mutations_leave_network_unchanged(self, service):
        edges = service.enumerate_edges()

        with pytest.raises(DuplicateEdgeError):
            service.add_road(3, 2, 1.0)
        with pytest.raises(UnknownEdgeError):
            service.update_status(1, 3, TrafficStatus.HEAVY)
        with pytest.raises(UnknownLocationError):
            service.add_road(0, 99, 1.0)

        assert service.enumerate_edges() == edges

    def test_read_operations(self, service):
        assert service.lookup_label(3) == "East_Gate"
        assert [loc.label for loc in service.list_locations()][0] == "Central_Hub"
        assert {other for other, _, _ in service.neighbors(4)} == {1, 3}
        assert len(service.enumerate_edges()) == 6
