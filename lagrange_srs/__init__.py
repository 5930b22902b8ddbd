"""
Lagrange 기저 SRS 보간
======================

거듭제곱 기저 SRS를 2의 거듭제곱 크기 평가 도메인 위의
Lagrange 기저 SRS로 변환한다.

사용 예시:
    >>> from lagrange_srs import srs_to_lagrange
    >>> lagrange_points = srs_to_lagrange(srs_points)
"""

from lagrange_srs.errors import InterpolationError, InvalidParameters, FieldError, SizeError
from lagrange_srs.interpolation import srs_to_lagrange
from lagrange_srs.srs import SRS

__all__ = [
    "srs_to_lagrange",
    "SRS",
    "InterpolationError",
    "InvalidParameters",
    "FieldError",
    "SizeError",
]
