import math
import random

from rsa_sim.reports.prime_search_dashboard import (
    collect_prime_searches,
    expected_attempts,
    make_prime_search_dashboard,
)


def test_expected_attempts_follows_prime_number_theorem():
    assert math.isclose(expected_attempts(256), 256 * math.log(2) / 2)


def test_collect_prime_searches_shapes():
    runs = collect_prime_searches((16, 24), samples=3, rng=random.Random(4))
    assert sorted(runs) == [16, 24]
    for bits, searches in runs.items():
        assert len(searches) == 3
        assert all(s.prime.bit_length() == bits for s in searches)


def test_dashboard_written(tmp_path):
    target = tmp_path / "nested" / "prime_search.png"
    out = make_prime_search_dashboard(target, bit_lengths=(16, 32), samples=3, rng=random.Random(7))
    assert out == target
    assert target.exists() and target.stat().st_size > 0
