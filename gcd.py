from typing import Tuple


def ext_gcd(m: int, n: int) -> Tuple[int, int, int]:
    """
    Extended Euclid (Knuth, TAOCP Vol 1, Algorithm E).
    Returns (a, b, d) such that
        a*m + b*n == d == gcd(m, n),   d >= 0
    Works for arbitrary signed inputs; ext_gcd(0, 0) == (0, 0, 0).
    """
    if n == 0:
        if m < 0:
            return -1, 0, -m
        return (1 if m else 0), 0, m
    a0, a = 1, 0
    b0, b = 0, 1
    c, d = m, n
    while True:
        q, r = divmod(c, d)
        if r == 0:
            break
        c, d = d, r
        a0, a = a, a0 - q * a
        b0, b = b, b0 - q * b
    if d < 0:
        return -a, -b, -d
    return a, b, d


def gcd(m: int, n: int) -> int:
    _, _, d = ext_gcd(m, n)
    return d
