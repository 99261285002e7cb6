import pytest

from overflow import INT64_MAX
from rational import Rat64

# distinct primes with P_M*P_N > 2^32 (forces the wide path) and
# P_K*P_M*P_N < 2^63, for all K, M, N
P1 = 92821
P2 = 92831
P3 = 92849
P4 = 92857


@pytest.fixture(scope="session")
def primes():
    """Provide the four wide-path primes."""
    return P1, P2, P3, P4


@pytest.fixture(scope="session")
def samples():
    """Provide valid values spanning the narrow and wide paths."""
    R = Rat64.new
    return [
        Rat64(),
        R(1, 1),
        R(-1, 1),
        R(1, 2),
        R(-1, 3),
        R(76, 7),
        R(-2, 3),
        R(P1, P2 * P3),
        R(-P2, P1 * P3),
        R(P1 * P2, P4),
        R(2**40, 3**20),
        R(-(3**20), 2**40),
        R(INT64_MAX, 1),
        R(1, INT64_MAX),
        R(-INT64_MAX, INT64_MAX - 1),
        R(INT64_MAX - 1, INT64_MAX),
    ]
