from .navigation import legal_moves, next_step, plan_route  # noqa: F401

__all__ = ["plan_route", "next_step", "legal_moves"]
