import random

import pytest

from rsa_sim import events
from rsa_sim.errors import InvalidInput, KeyGenerationFailed
from rsa_sim.keygen import MIN_KEY_BITS, Keypair, generate_keypair, verify_keypair
from rsa_sim.primes import PrimeSearch


def _found(prime):
    return PrimeSearch(prime=prime, bits=prime.bit_length(), attempts=1, elapsed=0.0)


def _recorder():
    seen = []

    def observer(event, details):
        seen.append((event, dict(details)))

    return seen, observer


def test_generate_512_bit_keypair():
    seen, observer = _recorder()
    key = generate_keypair(512, rng=random.Random(512), observer=observer)

    assert key.e == 65537
    assert 510 <= key.bit_length <= 512

    names = [event for event, _ in seen]
    assert names == [events.PRIME_FOUND, events.PRIME_FOUND, events.KEY_ASSEMBLED]
    p = seen[0][1]["value"]
    q = seen[1][1]["value"]
    assembled = seen[2][1]
    assert p != q
    for _, details in seen[:2]:
        assert details["attempts"] >= 1
        assert details["bits"] == 256
        assert details["value"].bit_length() == 256
    assert p * q == key.n == assembled["n"]
    phi = (p - 1) * (q - 1)
    assert assembled["phi"] == phi
    assert (key.e * key.d) % phi == 1
    assert 0 <= key.d < phi


def test_generated_key_passes_library_consistency_check():
    key = generate_keypair(512, rng=random.Random(7))
    verify_keypair(key)


def test_verify_keypair_rejects_wrong_private_exponent():
    key = generate_keypair(512, rng=random.Random(8))
    with pytest.raises(InvalidInput):
        verify_keypair(Keypair(n=key.n, e=key.e, d=key.d + 2))


def test_public_and_private_views():
    key = generate_keypair(64, rng=random.Random(1))
    assert key.public.n == key.private.n == key.n
    assert key.public.e == key.e
    assert key.private.d == key.d


def test_smallest_key_still_exceeds_one_byte():
    rng = random.Random(10)
    for _ in range(20):
        key = generate_keypair(MIN_KEY_BITS, rng=rng)
        assert key.n > 255


@pytest.mark.parametrize("bits", [0, 2, 8, MIN_KEY_BITS - 1])
def test_too_small_modulus_fails_fast(bits):
    with pytest.raises(InvalidInput):
        generate_keypair(bits)


@pytest.mark.parametrize("e", [0, 1, 2, 65536])
def test_invalid_public_exponent(e):
    with pytest.raises(InvalidInput):
        generate_keypair(64, e)


def test_equal_primes_exhaust_retry_budget(monkeypatch):
    monkeypatch.setattr("rsa_sim.keygen.search_prime", lambda bits, rounds, rng=None: _found(1009))
    with pytest.raises(KeyGenerationFailed):
        generate_keypair(20, max_attempts=3)


def test_non_coprime_exponent_exhausts_retry_budget(monkeypatch):
    # phi = (7 - 1) * (13 - 1) = 72 is always divisible by e = 3.
    primes = iter([7, 13] * 10)
    monkeypatch.setattr("rsa_sim.keygen.search_prime", lambda bits, rounds, rng=None: _found(next(primes)))
    with pytest.raises(KeyGenerationFailed):
        generate_keypair(MIN_KEY_BITS, 3, max_attempts=4)


def test_custom_exponent():
    key = generate_keypair(128, 3, rng=random.Random(3))
    assert key.e == 3
    m = 42
    assert pow(pow(m, key.e, key.n), key.d, key.n) == m
