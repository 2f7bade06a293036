from typing import Tuple


def smallest_prime_factor(n: int) -> int:
    """
    Find the smallest factor of `n` that is at least 2, by trial division.

    Args:
        n (int): Number to factor, at least 2.

    Returns:
        int: The smallest prime factor, or `n` itself when it is prime.
    """
    if n < 2:
        raise ValueError(f"smallest_prime_factor is defined for n >= 2, got {n}.")
    factor = 2
    while factor * factor <= n:
        if n % factor == 0:
            return factor
        factor += 1
    return n


def grid_shape(num_tubes: int) -> Tuple[int, int]:
    """Rows and columns for laying out `num_tubes` tubes."""
    if num_tubes < 2:
        return 1, max(num_tubes, 1)
    rows = smallest_prime_factor(num_tubes)
    return rows, num_tubes // rows
