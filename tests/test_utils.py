"""
Bit-reversal and size helpers: utils.py
"""
import logging
import random

import pytest

from lagrange_srs.errors import InvalidParameters, SizeError
from lagrange_srs.utils import (
    BYTE_SWAP_TABLE,
    bit_reverse,
    bit_reverse_permutation,
    is_power_of_two,
    log2_exact,
    setup_basic_logger,
)


def _reference_reverse(i, log_n):
    if log_n == 0:
        return 0
    return int(format(i, f'0{log_n}b')[::-1], 2)


class TestByteSwapTable:
    def test_length(self):
        assert len(BYTE_SWAP_TABLE) == 256

    def test_known_entries(self):
        assert BYTE_SWAP_TABLE[0] == 0
        assert BYTE_SWAP_TABLE[1] == 128
        assert BYTE_SWAP_TABLE[2] == 64
        assert BYTE_SWAP_TABLE[3] == 192
        assert BYTE_SWAP_TABLE[255] == 255

    def test_table_is_involution(self):
        for b in range(256):
            assert BYTE_SWAP_TABLE[BYTE_SWAP_TABLE[b]] == b


class TestBitReverse:
    def test_known_vector(self):
        assert [bit_reverse(i, 3) for i in range(8)] == [0, 4, 2, 6, 1, 5, 3, 7]

    @pytest.mark.parametrize("log_n", range(1, 13))
    def test_involution_exhaustive(self, log_n):
        for i in range(1 << log_n):
            m = bit_reverse(i, log_n)
            assert m == _reference_reverse(i, log_n)
            assert bit_reverse(m, log_n) == i

    @pytest.mark.parametrize("log_n", range(13, 21))
    def test_involution_sampled(self, log_n):
        rng = random.Random(log_n)
        samples = [0, (1 << log_n) - 1] + [rng.randrange(1 << log_n) for _ in range(2000)]
        for i in samples:
            m = bit_reverse(i, log_n)
            assert m == _reference_reverse(i, log_n)
            assert bit_reverse(m, log_n) == i

    @pytest.mark.parametrize("log_n", [8, 16, 24, 63, 64])
    def test_byte_boundaries(self, log_n):
        rng = random.Random(log_n)
        for _ in range(100):
            i = rng.randrange(1 << log_n)
            assert bit_reverse(i, log_n) == _reference_reverse(i, log_n)

    def test_log_zero(self):
        assert bit_reverse(0, 0) == 0

    def test_negative_index(self):
        with pytest.raises(InvalidParameters):
            bit_reverse(-1, 3)

    def test_index_wider_than_native(self):
        with pytest.raises(InvalidParameters):
            bit_reverse(1 << 64, 64)

    @pytest.mark.parametrize("log_n", [-1, 65])
    def test_log_n_out_of_range(self, log_n):
        with pytest.raises(InvalidParameters):
            bit_reverse(0, log_n)


class TestPermutation:
    def test_permutation(self):
        assert bit_reverse_permutation(list("abcdefgh")) == list("aecgbfdh")

    def test_permutation_is_involution(self):
        items = list(range(64))
        assert bit_reverse_permutation(bit_reverse_permutation(items)) == items

    def test_permutation_rejects_bad_length(self):
        with pytest.raises(SizeError):
            bit_reverse_permutation([1, 2, 3])


class TestSizeHelpers:
    @pytest.mark.parametrize("n", [1, 2, 4, 1024, 1 << 40])
    def test_powers_of_two(self, n):
        assert is_power_of_two(n)
        assert 1 << log2_exact(n) == n

    @pytest.mark.parametrize("n", [0, 3, 5, 6, 7, 9, -4])
    def test_not_powers_of_two(self, n):
        assert not is_power_of_two(n)
        with pytest.raises(SizeError):
            log2_exact(n)


class TestLogger:
    def test_single_handler(self):
        log = setup_basic_logger("lagrange_srs.test", level=logging.DEBUG)
        again = setup_basic_logger("lagrange_srs.test", level=logging.DEBUG)
        assert log is again
        assert len(log.handlers) == 1
        assert log.level == logging.DEBUG
