import math

from ventpath import ErrorKind, GridMap
from ventpath.services import legal_moves, next_step, plan_route


def test_plan_route_logs_success(capsys):
    r = plan_route(GridMap(3, 3), (0, 0), (2, 2))
    assert r.ok
    out = capsys.readouterr().out
    assert "event=route_planned" in out
    assert "steps=4" in out
    assert "start=0,0" in out and "goal=2,2" in out


def test_plan_route_logs_failure_reason(capsys):
    g = GridMap(3, 3)
    g.enclose((2, 2))
    r = plan_route(g, (0, 0), (2, 2))
    assert r.error is ErrorKind.UNREACHABLE
    out = capsys.readouterr().out
    assert "level=info" in out and "event=route_failed" in out and "reason=unreachable" in out

    plan_route(g, (0, 0), (7, 7))
    out = capsys.readouterr().out
    assert "level=warn" in out and "reason=invalid_input" in out


def test_next_step_follows_route():
    g = GridMap(3, 3)
    assert next_step(g, (0, 0), (2, 2)) == (1, 0)
    g.set_wall_between((0, 0), (1, 0), math.inf)
    assert next_step(g, (0, 0), (2, 2)) == (0, 1)


def test_next_step_none_cases():
    g = GridMap(3, 3)
    assert next_step(g, (1, 1), (1, 1)) is None
    g.enclose((2, 2))
    assert next_step(g, (0, 0), (2, 2)) is None
    assert next_step(g, (0, 0), (5, 5)) is None


def test_next_step_through_vent():
    g = GridMap(8, 1)
    g.add_vent((0, 0), 1.0)
    g.add_vent((7, 0), 1.0)
    g.link_vents((0, 0), (7, 0))
    assert next_step(g, (0, 0), (7, 0)) == (7, 0)


def test_legal_moves_lists_open_steps_and_vents():
    g = GridMap(4, 4)
    g.set_wall_between((1, 1), (2, 1), math.inf)
    g.add_vent((1, 1), 3.0)
    g.add_vent((3, 3), 3.0)
    g.link_vents((1, 1), (3, 3))
    moves = legal_moves(g, (1, 1))
    assert moves == [(0, 1), (1, 2), (1, 0), (3, 3)]


def test_legal_moves_at_edge_and_outside():
    g = GridMap(2, 2)
    assert legal_moves(g, (0, 0)) == [(1, 0), (0, 1)]
    assert legal_moves(g, (5, 5)) == []


def _walled_vent_pair():
    g = GridMap(2, 1)
    g.set_wall_between((0, 0), (1, 0), math.inf)
    g.add_vent((0, 0), 1.0)
    g.add_vent((1, 0), 1.0)
    g.link_vents((0, 0), (1, 0))
    return g


def test_next_step_teleports_to_adjacent_vent_behind_wall(capsys):
    g = _walled_vent_pair()
    assert plan_route(g, (0, 0), (1, 0)).path == ((0, 0), (1, 0))
    capsys.readouterr()
    assert next_step(g, (0, 0), (1, 0)) == (1, 0)
    captured = capsys.readouterr()
    assert "route_step_blocked" not in captured.err


def test_legal_moves_keeps_adjacent_vent_partner_behind_wall():
    g = _walled_vent_pair()
    assert legal_moves(g, (0, 0)) == [(1, 0)]
    assert legal_moves(g, (1, 0)) == [(0, 0)]


def test_legal_moves_skips_partners_of_closed_vent():
    g = GridMap(4, 1)
    g.add_vent((0, 0), math.inf)
    g.add_vent((3, 0), 1.0)
    g.link_vents((0, 0), (3, 0))
    assert legal_moves(g, (0, 0)) == [(1, 0)]
    assert legal_moves(g, (3, 0)) == [(2, 0), (0, 0)]


def test_fractional_position_logs_invalid_input(capsys):
    r = plan_route(GridMap(3, 3), (0.5, 0), (2, 2))
    assert r.error is ErrorKind.INVALID_INPUT
    out = capsys.readouterr().out
    assert "level=warn" in out and "start=0.5,0" in out
