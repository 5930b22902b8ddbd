"""
Structured Reference String (SRS)
=================================

**SRS란?**
  KZG 다항식 커밋먼트에 필요한 공개 파라미터이다.
  비밀 값 τ ("toxic waste")로 생성되며, 생성 후 τ는 폐기되어야 한다.

      G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]

**Lagrange 기저**:
  크기가 2의 거듭제곱인 SRS는 ``to_lagrange()``로
  [L_0(τ)·G1, ..., L_{n-1}(τ)·G1]로 변환할 수 있다.

**보안**:
  τ를 아는 사람은 임의의 거짓 증명을 만들 수 있다.
  실제 시스템에서는 MPC 세레모니로 τ를 생성한다.
  여기서는 테스트/교육용으로 seed에서 결정론적으로 생성한다.

사용 예시:
    >>> srs = SRS.generate(max_degree=15, seed=42)
    >>> len(srs.g1_powers)  # 16
    >>> lagrange = srs.to_lagrange()
"""

import hashlib
import secrets

from lagrange_srs.field import FR, G1, ec_mul, CURVE_ORDER
from lagrange_srs.interpolation import srs_to_lagrange


def derive_tau(seed):
    """seed에서 toxic waste τ를 결정론적으로 유도한다 (테스트용)."""
    h = hashlib.sha256(str(seed).encode()).digest()
    return FR(int.from_bytes(h, "big") % CURVE_ORDER)


class SRS:
    """Structured Reference String: KZG 커밋먼트용 G1 거듭제곱.

    속성:
        g1_powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
        max_degree: 지원하는 최대 다항식 차수 d
    """

    def __init__(self, g1_powers, max_degree=None):
        self.g1_powers = list(g1_powers)
        self.max_degree = len(self.g1_powers) - 1 if max_degree is None else max_degree

    def __len__(self):
        return len(self.g1_powers)

    @classmethod
    def generate(cls, max_degree, seed=None):
        """SRS를 생성한다 (테스트용).

        Args:
            max_degree: 지원할 최대 다항식 차수.
                        Lagrange 변환에는 max_degree + 1 이 2의 거듭제곱이어야 한다.
            seed: 결정론적 생성을 위한 시드. None이면 무작위 τ.

        Returns:
            SRS
        """
        if seed is not None:
            tau = derive_tau(seed)
        else:
            tau = FR(secrets.randbelow(CURVE_ORDER - 1) + 1)

        g1_powers = []
        tau_power = FR(1)  # τ^0 = 1
        for _ in range(max_degree + 1):
            g1_powers.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau

        return cls(g1_powers, max_degree)

    def to_lagrange(self, config=None):
        """Lagrange 기저로 변환한 G1 점 리스트를 반환한다.

        Raises:
            SizeError: len(g1_powers)가 2의 거듭제곱이 아닐 때
        """
        return srs_to_lagrange(self.g1_powers, config=config)
