"""
Tests for SRS -> Lagrange basis interpolation.

Covers:
- size validation (SizeError) and the length-1 fixed point
- commitment equivalence: commit(IFFT(v), SRS) == commit_evaluations(v, Lagrange SRS)
- Lagrange points equal L_i(tau)·G1 for the known test tau
- agreement with a naive group DFT on arbitrary points
- determinism and the exact 1/n normalization
- input handling (infinity, off-curve, plain bn128 points)
"""

import random

import pytest
from py_ecc import bn128 as plain_bn128

from lagrange_srs import srs_to_lagrange, SRS
from lagrange_srs.config import Config
from lagrange_srs.domain import EvaluationDomain, evaluate_all_lagrange_coefficients
from lagrange_srs.errors import InvalidParameters, SizeError
from lagrange_srs.field import FQ, FR, G1, CURVE_ORDER, ec_add, ec_mul
from lagrange_srs.kzg import commit, commit_evaluations, linear_combination
from lagrange_srs.polynomial import ifft
from lagrange_srs.srs import derive_tau


def _random_evals(n, seed):
    rng = random.Random(seed)
    return [FR(rng.randrange(CURVE_ORDER)) for _ in range(n)]


def _naive_group_idft(points):
    """out_j = (1/n) · Σ_i ω^{-ij} · P_i"""
    n = len(points)
    domain = EvaluationDomain(n)
    result = []
    for j in range(n):
        acc = None
        for i, point in enumerate(points):
            acc = ec_add(acc, ec_mul(point, domain.group_gen_inv ** (i * j)))
        result.append(ec_mul(acc, domain.size_inv))
    return result


# ─────────────────────────────────────────────────────────────────────
# 크기 검증
# ─────────────────────────────────────────────────────────────────────

class TestSizeValidation:
    @pytest.mark.parametrize("length", [0, 3, 5, 6, 7, 9])
    def test_rejects_non_power_of_two(self, length):
        points = [ec_mul(G1, k + 1) for k in range(length)]
        with pytest.raises(SizeError):
            srs_to_lagrange(points)

    def test_srs_method_rejects_odd_size(self):
        srs = SRS.generate(max_degree=4, seed=7)
        with pytest.raises(SizeError):
            srs.to_lagrange()

    def test_fixed_point(self):
        P = ec_mul(G1, 123456789)
        assert srs_to_lagrange([P]) == [P]

    def test_fixed_point_generator(self):
        assert srs_to_lagrange([G1]) == [G1]


# ─────────────────────────────────────────────────────────────────────
# 정당성
# ─────────────────────────────────────────────────────────────────────

class TestCommitmentEquivalence:
    @pytest.mark.parametrize("log_n", [5, 6, 7, 8, 9])
    def test_commitments_match(self, srs_cache, log_n):
        n = 1 << log_n
        srs = srs_cache.srs(log_n)
        lagrange = srs_cache.lagrange(log_n)
        domain = EvaluationDomain(n)

        evals = _random_evals(n, seed=log_n)
        coeffs = ifft(evals, domain.group_gen)

        coeff_commitment = commit(coeffs, srs.g1_powers)
        lagrange_commitment = commit_evaluations(evals, lagrange)
        assert coeff_commitment == lagrange_commitment

    def test_length_preserved(self, srs_cache):
        assert len(srs_cache.lagrange(5)) == 32


class TestKnownTau:
    @pytest.mark.parametrize("log_n", [1, 2, 3, 4])
    def test_points_are_lagrange_evaluations(self, srs_cache, log_n):
        domain = EvaluationDomain(1 << log_n)
        tau = derive_tau(srs_cache.seed + log_n)
        expected = [
            ec_mul(G1, coeff)
            for coeff in evaluate_all_lagrange_coefficients(domain, tau)
        ]
        assert srs_cache.lagrange(log_n) == expected


class TestNaiveAgreement:
    @pytest.mark.parametrize("n", [2, 4, 8])
    def test_arbitrary_points(self, n):
        rng = random.Random(n)
        points = [ec_mul(G1, rng.randrange(1, CURVE_ORDER)) for _ in range(n)]
        assert srs_to_lagrange(points) == _naive_group_idft(points)


class TestDeterminism:
    def test_repeated_calls(self, srs_cache):
        srs = srs_cache.srs(4)
        assert srs_to_lagrange(srs.g1_powers) == srs_to_lagrange(srs.g1_powers)

    def test_input_not_mutated(self, srs_cache):
        srs = srs_cache.srs(3)
        before = list(srs.g1_powers)
        srs_to_lagrange(srs.g1_powers)
        assert srs.g1_powers == before


class TestNormalization:
    def _commitments(self, srs_cache, log_n, lagrange):
        n = 1 << log_n
        domain = EvaluationDomain(n)
        evals = _random_evals(n, seed=99)
        coeffs = ifft(evals, domain.group_gen)
        return commit(coeffs, srs_cache.srs(log_n).g1_powers), commit_evaluations(evals, lagrange)

    def test_missing_rescale_fails(self, srs_cache):
        n = 32
        unscaled = [ec_mul(p, n) for p in srs_cache.lagrange(5)]
        expected, actual = self._commitments(srs_cache, 5, unscaled)
        assert expected != actual

    def test_double_rescale_fails(self, srs_cache):
        n_inv = FR(1) / FR(32)
        twice = [ec_mul(p, n_inv) for p in srs_cache.lagrange(5)]
        expected, actual = self._commitments(srs_cache, 5, twice)
        assert expected != actual

    def test_single_rescale_matches(self, srs_cache):
        expected, actual = self._commitments(srs_cache, 5, srs_cache.lagrange(5))
        assert expected == actual


# ─────────────────────────────────────────────────────────────────────
# 입력 처리
# ─────────────────────────────────────────────────────────────────────

class TestInputHandling:
    def test_rejects_point_at_infinity(self):
        with pytest.raises(InvalidParameters):
            srs_to_lagrange([G1, None])

    def test_off_curve_ignored_by_default(self):
        # 검사가 꺼져 있으면 좌표만 보고 계산한다
        result = srs_to_lagrange([(FQ(1), FQ(3))], config=Config(check_on_curve=False))
        assert result == [(FQ(1), FQ(3))]

    def test_off_curve_rejected_when_enabled(self):
        with pytest.raises(InvalidParameters):
            srs_to_lagrange([G1, (FQ(1), FQ(3))], config=Config(check_on_curve=True))

    def test_accepts_plain_bn128_points(self):
        plain = [
            plain_bn128.multiply(plain_bn128.G1, k)
            for k in (1, 2, 3, 4)
        ]
        optimized = [ec_mul(G1, k) for k in (1, 2, 3, 4)]
        assert srs_to_lagrange(plain) == srs_to_lagrange(optimized)


class TestKZG:
    def test_commit_degree_overflow(self, srs_small):
        with pytest.raises(ValueError):
            commit([FR(1)] * 9, srs_small.g1_powers)

    def test_commit_evaluations_length_mismatch(self, srs_cache):
        with pytest.raises(ValueError):
            commit_evaluations([FR(1)] * 3, srs_cache.lagrange(2))

    def test_linear_combination(self):
        points = [ec_mul(G1, 2), ec_mul(G1, 5)]
        assert linear_combination(points, [FR(3), FR(4)]) == ec_mul(G1, 26)

    def test_constant_polynomial(self, srs_cache):
        # 모든 평가값이 c 이면 커밋먼트는 c·G1
        lagrange = srs_cache.lagrange(3)
        assert commit_evaluations([FR(7)] * 8, lagrange) == ec_mul(G1, 7)
