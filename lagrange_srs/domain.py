"""
평가 도메인 (Radix-2 Evaluation Domain)
========================================

스칼라 필드 FR의 곱셈군에서 위수가 2의 거듭제곱인 순환 부분군
H = {1, ω, ω², ..., ω^(n-1)}을 표현한다.

**보간에서의 역할**:
  Lagrange 기저 SRS의 i번째 점은 ω^i에 대응하는 Lagrange 기저 다항식
  L_i(x)를 τ에서 평가한 값에 G를 곱한 것이다.

      L_i(τ)·G = (1/n) · Σ_j ω^(-ij) · [τ^j]·G

  즉, 역 단위근 ω^{-1}로 점들을 "역 FFT"한 뒤 1/n로 나누면 된다.

사용 예시:
    >>> domain = EvaluationDomain(8)
    >>> domain.group_gen ** 8 == FR(1)  # True
"""

from lagrange_srs.errors import SizeError
from lagrange_srs.field import FR, TWO_ADICITY, get_root_of_unity


class EvaluationDomain:
    """크기 n = 2^k 인 곱셈 부분군.

    속성:
        size: 도메인 크기 n
        log_size: log2(n)
        group_gen: n차 원시 단위근 ω
        group_gen_inv: ω^{-1}
        size_as_field_element: FR(n)

    Raises:
        SizeError: n이 2의 거듭제곱이 아니거나 FR에 그런 부분군이 없을 때
    """

    def __init__(self, size):
        if size < 1 or (size & (size - 1)) != 0:
            raise SizeError(f"domain size {size} is not a power of two")
        log_size = size.bit_length() - 1
        if log_size > TWO_ADICITY:
            raise SizeError(
                f"no evaluation domain of size 2^{log_size} in the scalar field "
                f"(two-adicity {TWO_ADICITY})"
            )

        self.size = size
        self.log_size = log_size
        self.group_gen = get_root_of_unity(size)
        self.group_gen_inv = FR(1) / self.group_gen
        self.size_as_field_element = FR(size)

    @property
    def size_inv(self):
        """1/n. 필드에서 n ≠ 0 이므로 항상 존재한다."""
        return FR(1) / self.size_as_field_element

    def element(self, i):
        """도메인의 i번째 원소 ω^i."""
        return self.group_gen ** (i % self.size)

    def elements(self):
        """[1, ω, ω², ..., ω^(n-1)]"""
        result = []
        current = FR(1)
        for _ in range(self.size):
            result.append(current)
            current = current * self.group_gen
        return result

    def __len__(self):
        return self.size

    def __repr__(self):
        return f"EvaluationDomain(size={self.size})"


def vanishing_poly_eval(n, zeta):
    """소거 다항식 Z_H(ζ) = ζ^n - 1 을 평가한다."""
    return zeta ** n - FR(1)


def lagrange_basis_eval(i, n, omega, zeta):
    """i번째 Lagrange 기저 다항식 L_i(ζ)를 평가한다.

    공식:
        L_i(ζ) = (ω^i / n) · (ζ^n - 1) / (ζ - ω^i)

    성질: L_i(ω^j) = δ_{ij} (크로네커 델타)

    Args:
        i: 기저 인덱스 (0 ≤ i < n)
        n: 도메인 크기
        omega: n차 원시 단위근
        zeta: 평가 점

    Returns:
        FR: L_i(ζ)
    """
    if not isinstance(zeta, FR):
        zeta = FR(zeta)

    omega_i = omega ** i
    denominator = zeta - omega_i
    if denominator == FR(0):
        return FR(1)

    # ζ가 다른 도메인 점이면 Z_H(ζ) = 0 이므로 결과도 0
    n_inv = FR(1) / FR(n)
    return n_inv * vanishing_poly_eval(n, zeta) * omega_i / denominator


def evaluate_all_lagrange_coefficients(domain, tau):
    """[L_0(τ), L_1(τ), ..., L_{n-1}(τ)]를 한 번에 계산한다.

    τ를 아는 경우(테스트용) Lagrange 기저 SRS의 기댓값을 만드는 데 쓴다.
    """
    return [
        lagrange_basis_eval(i, domain.size, domain.group_gen, tau)
        for i in range(domain.size)
    ]
