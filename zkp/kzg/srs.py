"""
KZG Structured Reference String (SRS)
======================================

신뢰 설정(trusted setup)으로 KZG 공개 파라미터를 생성한다.

**SRS란?**
  커밋과 검증에 필요한 공개 파라미터이다.
  비밀 값 τ ("toxic waste")를 사용하여 생성되며,
  생성 후 τ는 반드시 폐기되어야 한다.

  SRS = {
      G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
      G2 powers: [G2, τ·G2, τ²·G2, ..., τ^d·G2]
  }

  단일 점 검증에는 [τ]₂ 하나면 충분하지만, 다중 점(벡터) 검증은
  소거 다항식 Z(x)를 G2에 커밋해야 하므로 G2 powers도 같은 길이로 만든다.

**보안**:
  τ를 아는 사람은 임의의 거짓 증명을 만들 수 있다.
  τ는 generate() 안의 지역 변수로만 존재하고 SRS 객체에는 저장되지 않는다.
  실제 시스템에서는 MPC(Multi-Party Computation)로 τ를 생성하여
  참여자 중 한 명이라도 정직하면 안전성이 보장된다.
  seed를 주면 결정론적으로 생성된다 (테스트/데모용).

사용 예시:
    >>> srs = SRS.generate(max_degree=16)
    >>> len(srs.g1_powers)  # 17 (0차부터 16차까지)
"""

import hashlib
import logging
import secrets

from zkp.kzg.errors import PreconditionViolation
from zkp.kzg.field import FR, G1, G2, ec_mul, CURVE_ORDER

logger = logging.getLogger(__name__)


class SRS:
    """Structured Reference String: KZG 커밋먼트용 공개 파라미터.

    생성 후에는 읽기 전용이다. 여러 prove/verify 호출이 잠금 없이 공유한다.

    속성:
        g1_powers: (G1, τ·G1, ..., τ^d·G1)
        g2_powers: (G2, τ·G2, ..., τ^d·G2)
        max_degree: 지원하는 최대 다항식 차수 d
    """

    __slots__ = ("g1_powers", "g2_powers")

    def __init__(self, g1_powers, g2_powers):
        if len(g1_powers) != len(g2_powers):
            raise PreconditionViolation(
                f"g1_powers 길이 {len(g1_powers)}와 g2_powers 길이 {len(g2_powers)}가 다릅니다"
            )
        if not g1_powers:
            raise PreconditionViolation("SRS가 비어 있습니다")
        self.g1_powers = tuple(g1_powers)
        self.g2_powers = tuple(g2_powers)

    @property
    def max_degree(self):
        return len(self.g1_powers) - 1

    def __len__(self):
        return len(self.g1_powers)

    def __repr__(self):
        return f"SRS(max_degree={self.max_degree})"

    @classmethod
    def generate(cls, max_degree, seed=None):
        """SRS를 생성한다.

        Args:
            max_degree: 지원할 최대 다항식 차수 (계수 max_degree + 1개까지 커밋 가능)
            seed: 결정론적 생성을 위한 시드 (테스트/데모용).
                  없으면 secrets로 τ를 균등하게 뽑는다.

        Returns:
            SRS: 생성된 구조화 참조 문자열

        Raises:
            PreconditionViolation: max_degree < 0

        예시:
            >>> srs = SRS.generate(max_degree=8, seed=42)
            >>> srs.max_degree  # 8
        """
        if max_degree < 0:
            raise PreconditionViolation(f"max_degree는 0 이상이어야 합니다: {max_degree}")

        g1_powers, g2_powers = _powers_of_tau(_draw_tau(seed), max_degree)
        logger.debug("SRS generated: max_degree=%d, seeded=%s", max_degree, seed is not None)
        return cls(g1_powers, g2_powers)


def _draw_tau(seed):
    # toxic waste τ ∈ [1, CURVE_ORDER)
    if seed is not None:
        h = hashlib.sha256(str(seed).encode()).digest()
        return FR(int.from_bytes(h, "big") % (CURVE_ORDER - 1) + 1)
    return FR(secrets.randbelow(CURVE_ORDER - 1) + 1)


def _powers_of_tau(tau, max_degree):
    """τ^0, τ^1, ..., τ^max_degree 를 G1, G2에 올린다. τ는 이 함수 밖으로 나가지 않는다."""
    g1_powers = []
    g2_powers = []
    tau_power = FR(1)  # τ^0 = 1
    for _ in range(max_degree + 1):
        g1_powers.append(ec_mul(G1, tau_power))
        g2_powers.append(ec_mul(G2, tau_power))
        tau_power = tau_power * tau
    return g1_powers, g2_powers
