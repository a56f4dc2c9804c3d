"""Binary search over a monotonic function of BigInt."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bigcalc.arithmetic import add, halve, subtract
from bigcalc.bigint import ONE, ZERO, BigInt, compare
from bigcalc.validators import validate_non_negative

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


def solve(
    f: Callable[[BigInt], BigInt], target: BigInt, high: BigInt | None = None
) -> BigInt:
    """
    Find the greatest x in [1, target] with f(x) <= target.

    f must be non-decreasing. An exact hit f(x) == target returns at once.
    When even f(1) exceeds the target there is no positive answer and
    ZERO is returned.

    Args:
        f: Non-decreasing function to invert
        target: Value to search for, at least zero
        high: Optional tighter upper end for the interval. Any bound at or
            above the answer gives the same result.

    Returns:
        The floor solution, or ZERO

    Raises:
        InvalidOperandError: If target is negative
    """
    validate_non_negative(target, "Search target must be non-negative")

    if compare(f(ONE), target) > 0:
        return ZERO

    low = ONE
    if high is None or compare(high, target) > 0:
        high = target

    best = ONE
    probes = 0
    while compare(low, high) <= 0:
        probes += 1
        mid = halve(add(low, high))
        order = compare(f(mid), target)
        if order == 0:
            best = mid
            break
        if order < 0:
            best = mid
            low = add(mid, ONE)
        else:
            high = subtract(mid, ONE)

    logger.debug("solve settled on %s after %d probes", best, probes)
    return best
