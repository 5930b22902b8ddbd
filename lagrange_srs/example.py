"""
Lagrange 기저 SRS 데모
======================

실행:
    python -m lagrange_srs.example

흐름:
    1. SRS 생성 (trusted setup, 테스트용 seed)
    2. Lagrange 기저로 변환
    3. 임의의 평가값 v 에 대해
       commit(IFFT(v), SRS) == commit_evaluations(v, Lagrange SRS) 확인
"""

import random

from lagrange_srs.config import config
from lagrange_srs.domain import EvaluationDomain
from lagrange_srs.field import FR, CURVE_ORDER
from lagrange_srs.kzg import commit, commit_evaluations
from lagrange_srs.polynomial import ifft
from lagrange_srs.srs import SRS
from lagrange_srs.utils import setup_basic_logger


def main(log_n=4, seed=12345):
    log = setup_basic_logger("lagrange_srs", level=config.level)
    n = 1 << log_n

    print("=" * 60)
    print("  Lagrange-basis SRS Demo")
    print(f"  도메인 크기 n = {n}")
    print("=" * 60)

    # ── 1. SRS 생성 ──
    print("\n[1] SRS 생성 (trusted setup)...")
    srs = SRS.generate(max_degree=n - 1, seed=seed)
    print(f"    G1 powers 수: {len(srs.g1_powers)}")

    # ── 2. Lagrange 기저 변환 ──
    print("\n[2] Lagrange 기저로 변환...")
    lagrange = srs.to_lagrange()
    domain = EvaluationDomain(n)
    print(f"    단위근 ω: FR({int(domain.group_gen)})")

    # ── 3. 커밋먼트 비교 ──
    print("\n[3] 커밋먼트 비교...")
    rng = random.Random(seed)
    evals = [FR(rng.randrange(CURVE_ORDER)) for _ in range(n)]
    coeffs = ifft(evals, domain.group_gen)

    coeff_commitment = commit(coeffs, srs.g1_powers)
    lagrange_commitment = commit_evaluations(evals, lagrange)
    ok = coeff_commitment == lagrange_commitment
    log.info("coefficient commitment x=%d", int(coeff_commitment[0]))
    print(f"    결과: {'일치 ✓' if ok else '불일치 ✗'}")

    print("\n" + "=" * 60)
    return ok


if __name__ == "__main__":
    main()
