"""
KZG 커밋먼트: 계수 형태와 평가값 형태
=====================================

다항식 p(x)의 커밋먼트는 C = p(τ)·G1 이다. τ를 모르는 상태에서 두 가지로
계산할 수 있다.

  - 계수 형태: C = Σ cᵢ · [τⁱ]·G1              (거듭제곱 기저 SRS)
  - 평가값 형태: C = Σ p(ωⁱ) · [L_i(τ)]·G1     (Lagrange 기저 SRS)

두 결과는 같은 곡선 점이어야 한다. 평가값 형태는 Prover가
IFFT로 계수를 복원하지 않고 바로 커밋할 수 있게 해준다.

사용 예시:
    >>> C1 = commit(coeffs, srs.g1_powers)
    >>> C2 = commit_evaluations(fft(coeffs, omega), srs.to_lagrange())
    >>> C1 == C2  # True
"""

from py_ecc import optimized_bn128 as bn128

from lagrange_srs.field import CURVE_ORDER, to_affine, to_projective


def linear_combination(points, scalars):
    """Σ scalarᵢ · pointᵢ 를 계산한다 (아핀 결과, 항등원은 None).

    사영 좌표로 누적하고 마지막에 한 번만 정규화한다.
    """
    result = bn128.Z1
    for point, scalar in zip(points, scalars):
        s = int(scalar) % CURVE_ORDER
        if s == 0 or point is None:
            continue
        result = bn128.add(result, bn128.multiply(to_projective(point), s))
    return to_affine(result)


def commit(coeffs, srs_points):
    """계수 [c₀, c₁, ...]를 거듭제곱 기저 SRS로 커밋한다.

    Raises:
        ValueError: 계수 개수가 SRS 길이를 초과할 때
    """
    if len(coeffs) > len(srs_points):
        raise ValueError(
            f"다항식 계수 {len(coeffs)}개가 SRS 길이 {len(srs_points)}를 초과합니다"
        )
    return linear_combination(srs_points, coeffs)


def commit_evaluations(evals, lagrange_points):
    """도메인 위의 평가값 [p(1), p(ω), ...]를 Lagrange 기저 SRS로 커밋한다.

    Raises:
        ValueError: 평가값 개수가 도메인 크기와 다를 때
    """
    if len(evals) != len(lagrange_points):
        raise ValueError(
            f"평가값 {len(evals)}개가 도메인 크기 {len(lagrange_points)}와 다릅니다"
        )
    return linear_combination(lagrange_points, evals)
