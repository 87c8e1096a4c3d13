"""Fibonacci and tribonacci numbers computed several ways."""

import math

__all__ = [
    "fib_recursive",
    "fib_golden_ratio",
    "fib_iterative",
    "fib_memoized",
    "tribonacci",
]


def fib_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion (exponential time)."""
    if n <= 1:
        return n
    return fib_recursive(n - 1) + fib_recursive(n - 2)


def fib_golden_ratio(n: int) -> int:
    """Return the n-th Fibonacci number from Binet's formula, rounded.

    Floating-point precision limits the result to roughly n <= 70.
    """
    root5 = math.sqrt(5)
    phi = (1 + root5) / 2
    value = phi**n / root5
    # Round half away from zero.
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def fib_iterative(n: int) -> int:
    """Return the n-th Fibonacci number in linear time and constant space."""
    if n <= 1:
        return n
    prev2, prev1 = 0, 1
    for _ in range(2, n + 1):
        prev2, prev1 = prev1, prev2 + prev1
    return prev1


def fib_memoized(n: int) -> int:
    """Return the n-th Fibonacci number by recursion with a memo table."""
    if n <= 1:
        return n
    memo: dict[int, int] = {}

    def _fib(k: int) -> int:
        if k <= 1:
            return k
        if k not in memo:
            memo[k] = _fib(k - 1) + _fib(k - 2)
        return memo[k]

    return _fib(n)


def tribonacci(n: int) -> int:
    """Return the n-th tribonacci number, with T(0)=0 and T(1)=T(2)=1."""
    if n == 0:
        return 0
    if n <= 2:
        return 1
    prev3, prev2, prev1 = 0, 1, 1
    for _ in range(3, n + 1):
        prev3, prev2, prev1 = prev2, prev1, prev3 + prev2 + prev1
    return prev1