"""
기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
==================================================

SRS 보간 전체에서 사용되는 기본 대수적 도구를 정의한다.

**스칼라 필드 FR**:
  bn128 타원곡선의 스칼라 필드. 단위근, 도메인 크기의 역원 등
  지수/배수로 쓰이는 값은 모두 FR 원소이다.
  - 위수(order) r ≈ 2^254, 소수체(prime field)
  - r - 1 = 2^28 × m (m은 홀수) → 최대 2^28차 단위근을 지원

**베이스 필드 FQ**:
  곡선 점의 좌표 (x, y)가 속하는 필드. 버터플라이 라운드의
  배치 역원(batch inversion) 누적자도 FQ 원소이다.

**점 표현**:
  - 아핀(affine) 점: (x, y) 튜플. 보간의 입력과 출력 형식이다.
  - 사영(projective) 점: (X, Y, Z) 튜플. 스칼라 곱셈에만 사용하고
    곧바로 아핀 형식으로 정규화한다.
  - 무한원점: 아핀 형식에서는 None으로 표현한다.

사용 예시:
    >>> from lagrange_srs.field import FR, G1, ec_mul
    >>> P = ec_mul(G1, FR(5))  # 5·G1 (아핀)
"""

from py_ecc.fields import bn128_FQ
from py_ecc.fields import optimized_bn128_FQ as FQ
from py_ecc import optimized_bn128 as bn128


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드 FR
# ─────────────────────────────────────────────────────────────────────

class FR(bn128_FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    예시:
        >>> x = FR(3)
        >>> x ** 2          # FR(9)
        >>> FR(1) / FR(3)   # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = bn128.curve_order

# 베이스 필드 크기
FIELD_MODULUS = FQ.field_modulus

# FR*의 2-adicity: r - 1 = 2^28 × m
TWO_ADICITY = 28

# FR*의 생성자
MULTIPLICATIVE_GENERATOR = 5


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산 (G1, 아핀 형식)
# ─────────────────────────────────────────────────────────────────────

# 곡선 방정식 y² = x³ + b 의 b
CURVE_B = bn128.b

# G1 생성자 (아핀)
G1 = (FQ(1), FQ(2))

# 무한원점
Z1 = None


def to_projective(point):
    """아핀 점 (x, y)를 사영 점 (x, y, 1)로 변환한다."""
    if point is None:
        return bn128.Z1
    return (point[0], point[1], FQ.one())


def to_affine(point):
    """사영 점 (X, Y, Z)를 아핀 점 (X/Z, Y/Z)로 정규화한다. 무한원점은 None."""
    if bn128.is_inf(point):
        return None
    return bn128.normalize(point)


def as_affine(point):
    """임의의 아핀 점 표현을 FQ 좌표 튜플로 바꾼다.

    py_ecc.bn128 (비최적화) 모듈의 점도 좌표를 int로 거쳐 받아들인다.
    """
    if point is None:
        return None
    return (FQ(int(point[0])), FQ(int(point[1])))


def is_on_curve(point):
    """아핀 점이 y² = x³ + 3 위에 있는지 확인한다. 무한원점은 True."""
    if point is None:
        return True
    return bn128.is_on_curve(to_projective(point), CURVE_B)


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: 아핀 G1 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (아핀, 결과가 무한원점이면 None)
    """
    if point is None:
        return None
    return to_affine(bn128.multiply(to_projective(point), int(scalar) % CURVE_ORDER))


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2 (아핀)."""
    return to_affine(bn128.add(to_projective(p1), to_projective(p2)))


def ec_neg(point):
    """타원곡선 점의 역원: -point (y좌표 반전)."""
    if point is None:
        return None
    return (point[0], -point[1])


# ─────────────────────────────────────────────────────────────────────
# 단위근 (Roots of Unity)
# ─────────────────────────────────────────────────────────────────────

def get_root_of_unity(n):
    """n차 원시 단위근 ω를 반환한다.

    생성자 g = FR(5)를 사용하여 ω = g^((r-1)/n)으로 계산한다.
    ω^n = g^(r-1) = 1 (페르마 소정리).

    Args:
        n: 단위근의 차수 (2의 거듭제곱, ≤ 2^28)

    Returns:
        FR: n차 원시 단위근

    Raises:
        ValueError: n이 2의 거듭제곱이 아니거나 2^28을 초과할 때
    """
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > (1 << TWO_ADICITY):
        raise ValueError(f"n은 2^{TWO_ADICITY} 이하여야 합니다: {n}")
    if n == 1:
        return FR(1)

    g = FR(MULTIPLICATIVE_GENERATOR)
    return g ** ((CURVE_ORDER - 1) // n)


def get_roots_of_unity(n):
    """단위근 리스트 [1, ω, ω², ..., ω^(n-1)]을 반환한다."""
    omega = get_root_of_unity(n)
    roots = []
    current = FR(1)
    for _ in range(n):
        roots.append(current)
        current = current * omega
    return roots
