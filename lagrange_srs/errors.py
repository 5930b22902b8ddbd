"""
보간(interpolation) 오류 타입
=============================

SRS를 Lagrange 기저로 변환하는 동안 발생할 수 있는 오류를 정의한다.

모든 오류는 ``InterpolationError``를 상속하며, 이는 다시 ``ValueError``를
상속한다. 따라서 ``except ValueError``로 잡던 기존 호출자도 그대로 동작한다.

  ┌──────────────────────┬──────────────────────────────────────────────┐
  │  InvalidParameters   │  내부 변환 불일치, 무한원점 입력 등          │
  │  FieldError          │  필드 역원 계산 실패 (0의 역원)              │
  │  SizeError           │  SRS 길이가 2의 거듭제곱이 아니거나 도메인 없음│
  └──────────────────────┴──────────────────────────────────────────────┘

모든 오류는 즉시 전파된다 (fail-fast). 부분 결과나 재시도는 없다.
"""


class InterpolationError(ValueError):
    """SRS 보간 중 발생하는 모든 오류의 기반 클래스."""

    prefix = "Interpolation error"

    def __init__(self, message=""):
        self.message = message
        super().__init__(f"{self.prefix}: {message}" if message else self.prefix)


class InvalidParameters(InterpolationError):
    """보간 함수에 잘못된 파라미터가 전달되었다."""

    prefix = "Invalid parameters"


class FieldError(InterpolationError):
    """유한체 연산(역원 계산)에 실패했다."""

    prefix = "Field error"


class SizeError(InterpolationError):
    """SRS 크기가 2의 거듭제곱이 아니거나, 해당 크기의 평가 도메인이 없다."""

    prefix = "Size error"

    def __init__(self, message="the provided SRS size was not a power of two"):
        super().__init__(message)
