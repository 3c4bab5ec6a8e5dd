import pytest

from ventpath import (
    BudgetExhaustedError,
    ErrorKind,
    InvalidInputError,
    SearchConfig,
    UnreachableError,
    find_shortest_path,
)


def test_expansion_budget_stops_search(open_grid):
    r = find_shortest_path((0, 0), (4, 4), open_grid(5, 5), SearchConfig(max_expansions=3))
    assert r.error is ErrorKind.BUDGET_EXHAUSTED
    assert r.metrics["expanded"] == 3
    assert r.path == ()


def test_zero_budget_still_resolves_trivial_path(open_grid):
    r = find_shortest_path((2, 2), (2, 2), open_grid(5, 5), SearchConfig(max_expansions=0))
    assert r.ok
    assert r.path == ((2, 2),)


def test_generous_budget_gives_unbudgeted_result(open_grid):
    g = open_grid(5, 5)
    baseline = find_shortest_path((0, 0), (4, 4), g)
    budgeted = find_shortest_path((0, 0), (4, 4), g, SearchConfig(max_expansions=10_000))
    assert budgeted == baseline


def test_cancel_callback(open_grid):
    calls = []

    def cancel():
        calls.append(1)
        return len(calls) > 2

    r = find_shortest_path((0, 0), (4, 4), open_grid(5, 5), should_cancel=cancel)
    assert r.error is ErrorKind.BUDGET_EXHAUSTED
    assert len(calls) == 3


def test_metrics_can_be_disabled(open_grid):
    r = find_shortest_path((0, 0), (2, 2), open_grid(3, 3), SearchConfig(enable_metrics=False))
    assert r.ok
    assert r.metrics == {}


def test_metrics_counts(open_grid):
    r = find_shortest_path((0, 0), (2, 2), open_grid(3, 3))
    m = r.metrics
    assert m["pushes"] == m["grid_relaxations"] + m["vent_relaxations"] + 1
    assert m["pops"] >= m["expanded"] + 1
    assert m["runtime_ms"] >= 0


@pytest.mark.parametrize(
    "start,goal,exc",
    [((9, 9), (0, 0), InvalidInputError), ((0, 0), (1, 1), None)],
)
def test_raise_for_error(open_grid, start, goal, exc):
    r = find_shortest_path(start, goal, open_grid(3, 3))
    if exc is None:
        assert r.raise_for_error() is r
    else:
        with pytest.raises(exc) as info:
            r.raise_for_error()
        assert info.value.kind is r.error
        assert info.value.start == start


def test_unreachable_raises_typed_error():
    from ventpath import GridMap

    g = GridMap(3, 1)
    g.enclose((2, 0))
    r = find_shortest_path((0, 0), (2, 0), g)
    assert not r
    with pytest.raises(UnreachableError):
        r.raise_for_error()
    with pytest.raises(BudgetExhaustedError):
        find_shortest_path((0, 0), (1, 0), g, SearchConfig(max_expansions=0)).raise_for_error()
