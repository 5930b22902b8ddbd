"""
스칼라 FFT / IFFT
=================

유한체 FR 위의 다항식을 평가 표현 ↔ 계수 표현으로 변환한다.
  - FFT: 계수 → n개의 단위근에서의 평가값
  - IFFT: 평가값 → 계수 (보간)

Lagrange 기저 SRS의 정당성은 다음 등식으로 확인한다:

    Σ cᵢ · [τⁱ]·G  ==  Σ vᵢ · [L_i(τ)]·G      (c = IFFT(v))

이 모듈은 그 검사의 스칼라 측(IFFT)을 제공한다.

사용 예시:
    >>> omega = get_root_of_unity(4)
    >>> evals = fft([FR(1), FR(2), FR(3), FR(0)], omega)
    >>> ifft(evals, omega)  # [FR(1), FR(2), FR(3), FR(0)]
"""

from lagrange_srs.field import FR


def evaluate(coeffs, point):
    """다항식 c₀ + c₁x + ... 를 주어진 점에서 평가한다 (Horner's method)."""
    if not isinstance(point, FR):
        point = FR(point)
    result = FR(0)
    for coeff in reversed(coeffs):
        result = result * point + coeff
    return result


def fft(coeffs, omega):
    """Fast Fourier Transform (NTT): 계수 → 평가값.

    재귀적 Cooley-Tukey radix-2 알고리즘.

    알고리즘:
        1. n=1이면 계수를 그대로 반환
        2. 짝수/홀수 인덱스로 분리
        3. 재귀 호출: FFT(even, ω²), FFT(odd, ω²)
        4. 버터플라이 결합: y[k] = even[k] + ω^k · odd[k]
                           y[k+n/2] = even[k] - ω^k · odd[k]

    Args:
        coeffs: [c₀, c₁, ..., c_{n-1}] (길이는 2의 거듭제곱)
        omega: n차 원시 단위근

    Returns:
        list[FR]: [p(1), p(ω), ..., p(ω^{n-1})]
    """
    n = len(coeffs)
    if n == 1:
        return [coeffs[0] if isinstance(coeffs[0], FR) else FR(coeffs[0])]

    even = [coeffs[i] for i in range(0, n, 2)]
    odd = [coeffs[i] for i in range(1, n, 2)]

    omega_sq = omega * omega
    even_vals = fft(even, omega_sq)
    odd_vals = fft(odd, omega_sq)

    result = [FR(0)] * n
    omega_k = FR(1)
    half = n // 2
    for k in range(half):
        t = omega_k * odd_vals[k]
        result[k] = even_vals[k] + t
        result[k + half] = even_vals[k] - t
        omega_k = omega_k * omega

    return result


def ifft(evals, omega):
    """Inverse FFT (INTT): 평가값 → 계수.

    F^{-1} = (1/n) · F(ω^{-1}): 역 단위근으로 FFT를 수행한 후 n으로 나눈다.

    Args:
        evals: [p(1), p(ω), ..., p(ω^{n-1})]
        omega: n차 원시 단위근

    Returns:
        list[FR]: [c₀, c₁, ..., c_{n-1}]
    """
    n = len(evals)
    omega_inv = FR(1) / omega
    coeffs = fft(evals, omega_inv)

    n_inv = FR(1) / FR(n)
    return [c * n_inv for c in coeffs]
