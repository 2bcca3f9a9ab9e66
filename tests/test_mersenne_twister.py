#!/usr/bin/env python3
"""
MT19937 tests - golden vectors, numpy cross-checks, twist boundary.

numpy's MT19937 uses the same init_genrand seeding for legacy integer
seeds, so RandomState(seed) gives an independent reference table and stream.
"""

import numpy as np
import pytest

from prng_core import FloatMode, GeneratorState, MersenneTwister


def numpy_reference(seed, n):
    """First n raw outputs of numpy's MT19937 seeded with init_genrand(seed)."""
    key = np.random.RandomState(seed).get_state()[1]
    bitgen = np.random.MT19937()
    bitgen.state = {"bit_generator": "MT19937", "state": {"key": key, "pos": 624}}
    return [int(v) for v in bitgen.random_raw(n)]


def draw(generator, n):
    return [generator.get_int() for _ in range(n)]


class TestGoldenVectors:
    """Published MT19937 reference outputs."""

    def test_seed_1_first_outputs(self):
        """init_genrand(1) starts 1791095845, 4282876139."""
        mt = MersenneTwister.from_seed(1)
        assert mt.get_int() == 1791095845
        assert mt.get_int() == 4282876139

    def test_default_seed_first_output(self):
        """The reference default seed 5489 starts with 3499211612."""
        assert MersenneTwister.from_seed(5489).get_int() == 3499211612

    def test_default_seed_10000th_output(self):
        """The 10000th draw from seed 5489 is 4123659995."""
        mt = MersenneTwister.from_seed(5489)
        for _ in range(9999):
            mt.get_int()
        assert mt.get_int() == 4123659995


class TestNumpyCrossCheck:
    """Seeded tables and output streams agree with numpy."""

    @pytest.mark.parametrize("seed", [0, 1, 12345, 0xFFFFFFFF])
    def test_seeded_table_matches(self, seed):
        """Seeding reproduces init_genrand word for word."""
        mt = MersenneTwister.from_seed(seed)
        expected = np.random.RandomState(seed).get_state()[1]
        assert mt.table.dtype == np.uint32
        assert np.array_equal(mt.table, expected)
        assert mt.cur == 624

    @pytest.mark.parametrize("seed", [1, 42, 0xDEADBEEF])
    def test_stream_matches_across_twists(self, seed):
        """2000 draws cover four twists."""
        mt = MersenneTwister.from_seed(seed)
        assert draw(mt, 2000) == numpy_reference(seed, 2000)


class TestTwistBoundary:
    """The table is regenerated exactly every 624 draws."""

    def test_first_draw_twists(self):
        """A fresh instance twists before its first read."""
        mt = MersenneTwister.from_seed(3)
        seeded = mt.table.copy()
        mt.get_int()
        assert mt.cur == 1
        assert not np.array_equal(mt.table, seeded)

    def test_625th_draw_twists(self):
        """624 draws consume the table, the 625th regenerates it."""
        mt = MersenneTwister.from_seed(7)
        reference = numpy_reference(7, 625)

        first_block = draw(mt, 624)
        assert first_block == reference[:624]
        assert mt.cur == 624

        before = mt.table.copy()
        assert mt.get_int() == reference[624]
        assert mt.cur == 1
        assert not np.array_equal(mt.table, before)


class TestDeterminism:
    """Same seed, same stream."""

    def test_same_seed_same_outputs(self):
        """Two instances with one seed agree at every step, floats included."""
        a = MersenneTwister.from_seed(2024)
        b = MersenneTwister.from_seed(2024)
        for _ in range(300):
            assert a.get_int() == b.get_int()
            assert a.get_float() == b.get_float()
            assert a.get_double() == b.get_double()

    def test_different_seeds_differ(self):
        """Neighbouring seeds produce different streams."""
        assert draw(MersenneTwister.from_seed(10), 10) != draw(MersenneTwister.from_seed(11), 10)

    def test_seed_is_masked_to_32_bits(self):
        """Seeds wider than 32 bits keep only their low word."""
        assert draw(MersenneTwister.from_seed(2**32 + 1), 5) == draw(MersenneTwister.from_seed(1), 5)


class TestSnapshots:
    """copy(), get_state() and from_state()."""

    def test_copy_is_independent(self):
        """A copy continues the same stream without sharing the table."""
        mt = MersenneTwister.from_seed(99)
        draw(mt, 100)
        clone = mt.copy()

        assert draw(clone, 700) == draw(mt, 700)
        clone.get_int()
        assert clone.cur != mt.cur
        assert clone.table is not mt.table

    def test_state_round_trip(self):
        """Restoring a dumped state resumes the stream exactly."""
        mt = MersenneTwister.from_seed(5)
        draw(mt, 623)
        state = GeneratorState.model_validate_json(mt.get_state().model_dump_json())

        restored = MersenneTwister.from_state(state)
        assert restored.cur == 623
        assert draw(restored, 50) == draw(mt, 50)

    def test_from_state_keeps_float_mode(self):
        """The restored instance uses the float mode it is given."""
        state = MersenneTwister.from_seed(5).get_state()
        restored = MersenneTwister.from_state(state, float_mode=FloatMode.COMPAT)
        assert restored.float_mode is FloatMode.COMPAT

    def test_from_state_rejects_other_algorithm(self):
        """A CMWC snapshot cannot be loaded into MT19937."""
        state = GeneratorState(algorithm="cmwc4096", table=[0] * 4096, cursor=0, carry=0)
        with pytest.raises(ValueError):
            MersenneTwister.from_state(state)

    def test_repr_shows_cursor_only(self):
        """repr never dumps the 624-word table."""
        assert repr(MersenneTwister.from_seed(1)) == "MersenneTwister(cur=624, float_mode=precise)"


class TestTemper:
    """Tempering transform in isolation."""

    def test_zero_tempers_to_zero(self):
        assert MersenneTwister.temper(0) == 0

    def test_output_stays_32_bit(self):
        for word in (1, 0x80000000, 0xFFFFFFFF, 0x12345678):
            assert 0 <= MersenneTwister.temper(word) <= 0xFFFFFFFF
