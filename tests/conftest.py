import pytest

from lagrange_srs.srs import SRS


SRS_SEED = 1234


class _SRSCache:
    """크기별 SRS와 그 Lagrange 변환 결과를 세션 동안 한 번만 계산한다."""

    def __init__(self, seed):
        self.seed = seed
        self._srs = {}
        self._lagrange = {}

    def srs(self, log_n):
        if log_n not in self._srs:
            self._srs[log_n] = SRS.generate(max_degree=(1 << log_n) - 1, seed=self.seed + log_n)
        return self._srs[log_n]

    def lagrange(self, log_n):
        if log_n not in self._lagrange:
            self._lagrange[log_n] = self.srs(log_n).to_lagrange()
        return self._lagrange[log_n]


@pytest.fixture(scope="session")
def srs_cache():
    """세션 단위 SRS 캐시 (seed = SRS_SEED + log_n)."""
    return _SRSCache(SRS_SEED)


@pytest.fixture(scope="session")
def srs_small(srs_cache):
    """크기 8 SRS."""
    return srs_cache.srs(3)
