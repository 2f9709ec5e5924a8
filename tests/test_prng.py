"""Uniform source tests: state layout, stepping and seeding."""

import pytest

from rand_ext import Erand48, SeedingFailed, seed_state
from rand_ext.prng import MASK48, MULTIPLIER, ADDEND


def test_seed_splits_low_48_bits_into_words():
    state = Erand48(0x123456789ABC)
    assert state.words == (0x9ABC, 0x5678, 0x1234)


def test_entropy_above_48_bits_is_discarded():
    assert Erand48(0xFFFF_0000_0000_0001).state == 1


def test_all_zero_seed_is_rejected():
    with pytest.raises(SeedingFailed):
        Erand48(0)
    with pytest.raises(SeedingFailed):
        Erand48(1 << 48)


def test_reseed_replaces_state():
    state = Erand48(7)
    state.next()
    state.seed(7)
    assert state == Erand48(7)


def test_step_follows_lcg_recurrence():
    state = Erand48(1)
    assert state.next_u48() == 0x5DEECE678

    expected = (0x5DEECE678 * MULTIPLIER + ADDEND) & MASK48
    assert state.next() == expected / 2**48


def test_draws_stay_in_half_open_unit_interval():
    state = Erand48(0xC0FFEE)
    draws = [state.next() for _ in range(20_000)]

    assert all(0.0 <= draw < 1.0 for draw in draws)
    assert 0.48 < sum(draws) / len(draws) < 0.52


def test_same_seed_same_sequence():
    first = Erand48(0xDEADBEEF)
    second = Erand48(0xDEADBEEF)
    assert [first.next() for _ in range(10)] == [second.next() for _ in range(10)]


def test_seed_state_reads_eight_little_endian_bytes():
    state = seed_state(lambda size: bytes(range(size)))
    assert state.state == 0x050403020100


def test_seed_state_failure_is_fatal():
    def broken(size):
        raise OSError("no entropy available")

    with pytest.raises(SeedingFailed) as excinfo:
        seed_state(broken)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_seed_state_short_read_is_fatal():
    with pytest.raises(SeedingFailed):
        seed_state(lambda size: b"\x01\x02")


def test_seed_state_zero_entropy_is_fatal():
    with pytest.raises(SeedingFailed):
        seed_state(lambda size: bytes(size))


def test_fresh_states_do_not_share_sequence():
    first = seed_state()
    second = seed_state()

    assert first is not second
    assert first.state != second.state

    before = second.state
    for _ in range(5):
        first.next()
    assert second.state == before

    assert [first.next() for _ in range(8)] != [second.next() for _ in range(8)]
