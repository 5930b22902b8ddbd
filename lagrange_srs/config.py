"""
보간 설정
=========

환경 변수로 기본값을 덮어쓸 수 있다.

    LAGRANGE_SRS_LOG_LEVEL       로거 레벨 (기본값: WARNING)
    LAGRANGE_SRS_CHECK_ON_CURVE  입력 점이 곡선 위에 있는지 검사 (기본값: false)
"""

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv('LAGRANGE_SRS_LOG_LEVEL', 'WARNING')
DEFAULT_CHECK_ON_CURVE = os.getenv('LAGRANGE_SRS_CHECK_ON_CURVE', 'false').lower() == 'true'


class Config:
    """보간 설정

    속성:
        log_level: 로깅 레벨 이름 ("DEBUG", "INFO", ...)
        check_on_curve: True이면 변환 전에 모든 입력 점의 곡선 방정식을 검사한다.
                        정직하게 생성된 SRS인지는 검사하지 않는다.
    """

    def __init__(self, log_level=None, check_on_curve=None):
        self.log_level = (log_level or DEFAULT_LOG_LEVEL).upper()
        self.check_on_curve = DEFAULT_CHECK_ON_CURVE if check_on_curve is None else check_on_curve

    @classmethod
    def from_env(cls):
        """현재 환경 변수로부터 설정을 다시 읽는다."""
        return cls(
            log_level=os.getenv('LAGRANGE_SRS_LOG_LEVEL', 'WARNING'),
            check_on_curve=os.getenv('LAGRANGE_SRS_CHECK_ON_CURVE', 'false').lower() == 'true',
        )

    @property
    def level(self):
        """``logging`` 모듈의 정수 레벨. 알 수 없는 이름이면 WARNING."""
        return getattr(logging, self.log_level, logging.WARNING)

    def __repr__(self):
        return f"Config(log_level={self.log_level!r}, check_on_curve={self.check_on_curve})"


# 전역 설정 인스턴스
config = Config()
