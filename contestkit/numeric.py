"""Numerical answers: clock angles, bisection roots and tiered bills."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable

_EPS = 1e-9

# (units in the tier, price per unit); the last tier has no upper bound.
_TIERS: tuple[tuple[int | None, int], ...] = ((100, 2), (9900, 3), (990000, 5), (None, 7))


def clock_angle(hour: float, minute: float) -> float:
    """Smaller angle in degrees between the hour and minute hands."""
    hour_angle = hour * 30 + (minute / 60) * 30
    minute_angle = minute * 6
    angle = abs(hour_angle - minute_angle)
    if angle > 180:
        angle = 360 - angle
    return angle


def _npv(flows: list[float], rate: float) -> float:
    factor = 1.0 / (1.0 + rate)
    discount = 1.0
    total = flows[0]
    for flow in flows[1:]:
        discount *= factor
        total += flow * discount
    return total


def internal_rate_of_return(cash_flows: Iterable[float]) -> float | None:
    """Rate above -0.99 at which the cash flows have zero net present value.

    The first flow is at time 0. Returns ``None`` when bisection finds no root.
    """
    flows = [float(flow) for flow in cash_flows]
    if not flows:
        raise ValueError("at least one cash flow is needed")
    low, high = -0.99, sys.float_info.max
    raised = lowered = False
    while low <= high + _EPS:
        mid = (low + high) / 2.0
        if mid in (low, high):
            return mid if raised and lowered else None
        npv = _npv(flows, mid)
        if abs(npv) <= _EPS:
            return None if abs(mid + 1.0) <= _EPS else mid
        if npv > _EPS:
            low, raised = mid, True
        else:
            high, lowered = mid, True
    return None


def solve_equation(p: float, q: float, r: float, s: float, t: float, u: float) -> float | None:
    """Root in [0, 1] of p·e^-x + q·sin x + r·cos x + s·tan x + t·x² + u.

    The left side is taken to decrease over the interval. Returns ``None``
    when bisection finds no root.
    """

    def equation(x: float) -> float:
        return (
            p * math.exp(-x)
            + q * math.sin(x)
            + r * math.cos(x)
            + s * math.tan(x)
            + t * x * x
            + u
        )

    left, right = 0.0, 1.0
    while right > left:
        mid = (left + right) / 2
        if mid in (left, right):
            return None
        value = equation(mid)
        if value > _EPS:
            left = mid
        elif value < -_EPS:
            right = mid
        else:
            return mid
    return None


def consumption_price(consumption: int) -> int:
    """Price of ``consumption`` units under the tiered tariff."""
    if consumption < 0:
        raise ValueError("consumption must not be negative")
    price = 0
    remaining = consumption
    for size, rate in _TIERS:
        units = max(0, remaining) if size is None else min(max(0, remaining), size)
        price += units * rate
        if size is not None:
            remaining -= size
    return price


def _consumption(price: int) -> int:
    units = 0
    remaining = price
    for size, rate in _TIERS:
        bought = max(0, remaining) // rate
        if size is not None:
            bought = min(bought, size)
            remaining -= rate * size
        units += bought
    return units


def neighbour_bill(total: int, difference: int) -> int:
    """What the smaller consumer pays when two share a bill.

    ``total`` is the price of their joint consumption and ``difference``
    how much more the larger consumer would pay alone than the smaller.
    Returns 0 when no split matches.
    """
    if total < 0 or difference < 0:
        raise ValueError("total and difference must not be negative")
    consumption = _consumption(total)
    begin, end = 0, consumption
    while begin < end:
        mine = (begin + end) // 2
        delta = consumption_price(consumption - mine) - consumption_price(mine)
        if delta > difference:
            if mine == begin:
                break
            begin = mine
        elif delta < difference:
            end = mine
        else:
            return consumption_price(mine)
    return 0