# smartload/tests/test_dp.py
from datetime import date

import pytest

from smartload.constraints import default_checker, strict_checker
from smartload.dp import DPOptimizer, TooManyOrdersError, MAX_DP_ORDERS
from smartload.models import Truck
from smartload.tests.factories import make_order


def test_scenario_a_selects_both_orders(truck, scenario_a_orders):
    res = DPOptimizer().optimize(truck, scenario_a_orders)
    assert sorted(res.order_ids) == ["O1", "O2"]
    assert res.total_payout == 430000
    assert res.total_weight == 30000
    assert res.total_volume == 2100


def test_scenario_b_oversized_order_yields_empty(truck):
    res = DPOptimizer().optimize(truck, [make_order("big", 999999, weight=50000, volume=10)])
    assert res.selected_orders == []
    assert (res.total_payout, res.total_weight, res.total_volume) == (0, 0, 0)


def test_scenario_c_hazmat_never_mixed(truck):
    orders = [
        make_order("haz", 100000, 1000, 10, is_hazmat=True),
        make_order("plain", 150000, 1000, 10),
    ]
    res = DPOptimizer().optimize(truck, orders)
    assert res.order_ids == ["plain"]
    assert res.total_payout == 150000


def test_empty_input(truck):
    res = DPOptimizer().optimize(truck, [])
    assert res.selected_orders == []
    assert res.total_payout == 0


def test_no_two_orders_compatible_picks_best_single(truck):
    orders = [
        make_order("a", 100, 10, destination="A"),
        make_order("b", 300, 10, destination="B"),
        make_order("c", 200, 10, destination="C"),
    ]
    res = DPOptimizer().optimize(truck, orders)
    assert res.order_ids == ["b"]


def test_capacity_binds_and_best_subset_is_not_full_set():
    truck = Truck(id="t", max_weight=10, max_volume=100)
    orders = [
        make_order("a", 60, 5),
        make_order("b", 50, 4),
        make_order("c", 45, 3),
        make_order("d", 10, 6),
    ]
    # a+b = 110 (9), a+c = 105 (8), b+c = 95 (7), b+d = 60 (10)
    res = DPOptimizer().optimize(truck, orders)
    assert sorted(res.order_ids) == ["a", "b"]
    assert res.total_payout == 110
    assert res.total_weight == 9


def test_volume_constraint_also_binds():
    truck = Truck(id="t", max_weight=1000, max_volume=10)
    orders = [
        make_order("a", 100, 1, volume=8),
        make_order("b", 70, 1, volume=5),
        make_order("c", 60, 1, volume=5),
    ]
    res = DPOptimizer().optimize(truck, orders)
    assert sorted(res.order_ids) == ["b", "c"]
    assert res.total_volume == 10


def test_ties_go_to_lowest_mask(truck):
    # equal payout, mutually incompatible -> the lower index wins
    orders = [
        make_order("first", 500, 10, destination="A"),
        make_order("second", 500, 10, destination="B"),
    ]
    res = DPOptimizer().optimize(truck, orders)
    assert res.order_ids == ["first"]


def test_deterministic_across_repeated_calls(truck, scenario_a_orders):
    opt = DPOptimizer()
    orders = scenario_a_orders + [
        make_order("O3", 90000, 20000, 900),
        make_order("O4", 120000, 15000, 1000, is_hazmat=True),
    ]
    first = opt.optimize(truck, orders)
    for _ in range(3):
        again = opt.optimize(truck, orders)
        assert again.order_ids == first.order_ids
        assert again.total_payout == first.total_payout
        assert again.total_weight == first.total_weight


def test_incompatibility_masks():
    orders = [
        make_order("a", 1, 1),
        make_order("b", 1, 1, is_hazmat=True),
        make_order("c", 1, 1),
    ]
    masks = DPOptimizer().incompatibility_masks(orders)
    assert masks == [0b010, 0b101, 0b010]


def test_extract_orders_decodes_mask():
    orders = [make_order(str(i), 1, 1) for i in range(4)]
    assert [o.id for o in DPOptimizer.extract_orders(0b1010, orders)] == ["1", "3"]


def test_strict_checker_respected():
    truck = Truck(id="t", max_weight=100, max_volume=100)
    orders = [
        make_order("a", 100, 10, pickup=date(2025, 1, 1), delivery=date(2025, 1, 9)),
        make_order("b", 100, 10, pickup=date(2025, 1, 5), delivery=date(2025, 1, 9)),
    ]
    assert len(DPOptimizer(default_checker()).optimize(truck, orders).selected_orders) == 2
    assert len(DPOptimizer(strict_checker()).optimize(truck, orders).selected_orders) == 1


def test_too_many_orders_is_a_contract_breach(truck):
    orders = [make_order(str(i), 100, 1) for i in range(MAX_DP_ORDERS + 1)]
    with pytest.raises(TooManyOrdersError):
        DPOptimizer().optimize(truck, orders)


def test_bound_counts_orders_after_feasibility_filter(truck):
    orders = [make_order(str(i), 100, 1) for i in range(4)]
    orders += [make_order(f"big{i}", 100, 50000) for i in range(3)]
    res = DPOptimizer(max_orders=4).optimize(truck, orders)
    assert len(res.selected_orders) == 4


def test_solves_at_the_order_bound():
    truck = Truck(id="t", max_weight=1_000_000, max_volume=100_000)
    orders = [make_order(f"o{i}", 1000 + i, 10, volume=10) for i in range(MAX_DP_ORDERS)]
    res = DPOptimizer().optimize(truck, orders)
    assert len(res.selected_orders) == MAX_DP_ORDERS
    assert res.total_payout == sum(1000 + i for i in range(MAX_DP_ORDERS))
    assert (res.total_weight, res.total_volume) == (220, 220)


def test_bound_instance_with_two_routes_matches_per_route_optimum():
    # routes never mix, so the answer is the better of the two single-route optima
    truck = Truck(id="t", max_weight=120, max_volume=1000)
    orders = [
        make_order(f"{dest}{i}", 37 * i % 23 + 5 + (3 if dest == "B" else 0), 7 + (5 * i) % 17,
                   destination=dest)
        for i in range(MAX_DP_ORDERS // 2)
        for dest in ("A", "B")
    ]
    assert len(orders) == MAX_DP_ORDERS
    opt = DPOptimizer()
    res = opt.optimize(truck, orders)

    per_route = [
        opt.optimize(truck, [o for o in orders if o.destination == dest]).total_payout
        for dest in ("A", "B")
    ]
    assert res.total_payout == max(per_route)
    assert len({o.destination for o in res.selected_orders}) == 1
    assert res.total_weight <= truck.max_weight
