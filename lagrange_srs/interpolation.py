"""
SRS → Lagrange 기저 변환
========================

거듭제곱(monomial) 기저의 SRS

    [1]·G, [τ]·G, [τ²]·G, ..., [τ^(n-1)]·G

를 크기 n 인 표준 평가 도메인 H = {1, ω, ..., ω^(n-1)} 위의
Lagrange 기저 SRS

    [L_0(τ)]·G, [L_1(τ)]·G, ..., [L_{n-1}(τ)]·G

로 바꾼다. 이렇게 하면 Prover는 계수 대신 평가값으로 바로 커밋할 수 있다.

    Σ cᵢ · [τⁱ]·G  ==  Σ vᵢ · [L_i(τ)]·G      (v = FFT(c))

**흐름**:
  1. 길이 검증 (2의 거듭제곱, 길이 1이면 그대로 반환)
  2. 비트 반전 순서의 작업 복사본
  3. 평가 도메인 구성
  4. log2(n) 번의 버터플라이 라운드 (ω^{-1} 의 거듭제곱 사용)
  5. 1/n 로 재조정(rescale)

사용 예시:
    >>> srs = SRS.generate(max_degree=7, seed=42)
    >>> lagrange = srs_to_lagrange(srs.g1_powers)
"""

import logging

from lagrange_srs.butterfly import fft_round
from lagrange_srs.config import config as default_config
from lagrange_srs.domain import EvaluationDomain
from lagrange_srs.errors import FieldError, InvalidParameters, SizeError
from lagrange_srs.field import FR, as_affine, ec_mul, is_on_curve
from lagrange_srs.utils import bit_reverse_permutation, is_power_of_two

logger = logging.getLogger(__name__)


def _prepare_points(points, check_on_curve):
    """입력 점을 FQ 좌표의 아핀 튜플로 바꾸고 무한원점을 거부한다."""
    prepared = []
    for i, point in enumerate(points):
        if point is None:
            raise InvalidParameters(f"SRS point {i} is the point at infinity")
        point = as_affine(point)
        if check_on_curve and not is_on_curve(point):
            raise InvalidParameters(f"SRS point {i} is not on the curve")
        prepared.append(point)
    return prepared


def srs_to_lagrange(points, config=None):
    """거듭제곱 기저 SRS를 Lagrange 기저 SRS로 변환한다.

    Args:
        points: τ의 오름차순 거듭제곱 순서의 아핀 G1 점 리스트.
                길이는 0이 아닌 2의 거듭제곱이어야 한다.
        config: Config 인스턴스 (None이면 전역 설정)

    Returns:
        list: 같은 길이의 아핀 점 리스트. i번째 점은 ω^i 의
              Lagrange 기저 다항식에 대응한다.

    Raises:
        SizeError: 길이가 2의 거듭제곱이 아니거나 해당 도메인이 없을 때
        FieldError: 배치 역원 또는 도메인 크기의 역원 계산 실패
        InvalidParameters: 무한원점 입력, 또는 곡선 위에 없는 점 (검사 활성화 시)
    """
    config = config or default_config

    point_size = len(points)
    if not is_power_of_two(point_size):
        raise SizeError(f"the provided SRS size {point_size} was not a power of two")
    log_point_size = point_size.bit_length() - 1

    prepared = _prepare_points(points, config.check_on_curve)
    if point_size == 1:
        return prepared

    # 자연 순서의 출력을 위해 비트 반전 순서로 배치
    ordered_points = bit_reverse_permutation(prepared)
    xs = [point[0] for point in ordered_points]
    ys = [point[1] for point in ordered_points]

    domain = EvaluationDomain(point_size)
    gen = domain.group_gen_inv
    logger.debug("interpolating SRS of size %d over %r", point_size, domain)

    for i in range(1, log_point_size + 1):
        # i번째 라운드는 (point_size >> i) 제곱한 단위근을 사용
        prim_root = gen ** (point_size >> i)
        logger.debug("round %d/%d: block size %d", i, log_point_size, 1 << i)
        fft_round(xs, ys, prim_root, i, is_first_round=(i == 1))

    if domain.size_as_field_element == FR(0):
        raise FieldError("Could not invert domain size")
    domain_size_inv = domain.size_inv

    result = [ec_mul((x, y), domain_size_inv) for x, y in zip(xs, ys)]
    logger.debug("interpolation of %d points finished", point_size)
    return result
