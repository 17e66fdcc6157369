"""
KZG 다항식 커밋먼트 스킴: 단일 점 열기
=========================================

Kate-Zaverucha-Goldberg (KZG) 커밋먼트로 "p(z) = y" 를 증명한다.

**KZG 커밋먼트란?**
  다항식 p(x)에 대한 간결한 "지문"(커밋먼트)을 타원곡선 점으로 생성한다.
  - 커밋먼트: C = p(τ)·G1 (τ는 SRS의 비밀 값)
  - 바인딩(binding): 한 번 커밋하면 다른 다항식으로 바꿀 수 없음

**열기 증명 (Opening Proof)**:
  1. y = p(z)를 계산하고 상수항에서 y를 뺀다 → p(x) - y 는 z에서 0
  2. 몫 다항식 q(x) = (p(x) - y) / (x - z)
  3. 증명 = ([p]₁, [q]₁, y)
  4. 검증: e([q]₁, [τ]₂ - z·G2) == e([p]₁ - y·G1, G2)
     즉 q(τ)·(τ - z) = p(τ) - y 를 τ를 모른 채 페어링으로 확인한다.

사용 예시:
    >>> from zkp.kzg.kzg import prove, verify
    >>> proof = prove(poly, FR(7), srs)
    >>> verify(proof, FR(7), srs)  # True
"""

import logging

from zkp.kzg.errors import PreconditionViolation
from zkp.kzg.field import G1, G2, ec_mul, ec_sub, ec_pairing, to_fr
from zkp.kzg.polynomial import Polynomial, commit, exact_divide
from zkp.kzg.proof import PointProof

logger = logging.getLogger(__name__)


def prove(polynomial, challenge, srs):
    """다항식 p(x)를 챌린지 z에서 여는 증명을 만든다.

    Args:
        polynomial: 열어볼 다항식 p(x) (Polynomial 또는 계수 시퀀스)
        challenge: 평가 점 z (FR 원소 또는 정수)
        srs: SRS

    Returns:
        PointProof: ([p]₁, [q]₁, p(z))

    Raises:
        PreconditionViolation: 빈 다항식, 또는 다항식이 SRS보다 길 때

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> proof = prove(p, FR(3), srs)
        >>> proof.evaluation  # FR(7)
    """
    if not isinstance(polynomial, Polynomial):
        polynomial = Polynomial(polynomial)
    challenge = to_fr(challenge)

    # p(z) = y 이면 (p(x) - y)는 (x - z)로 나누어 떨어진다 (인수정리)
    evaluation = polynomial.evaluate(challenge)
    numerator = polynomial - evaluation
    quotient = exact_divide(numerator, Polynomial.linear(challenge))

    proof = PointProof(
        commit(polynomial, srs.g1_powers),
        commit(quotient, srs.g1_powers),
        evaluation,
    )
    logger.debug("point proof created: polynomial length=%d", len(polynomial))
    return proof


def verify(proof, challenge, srs):
    """단일 점 열기 증명을 검증한다.

    검증 방정식 (페어링):
        e([q]₁, [τ - z]₂) == e([p]₁ - y·G1, G2)

    Args:
        proof: PointProof
        challenge: 평가 점 z
        srs: SRS (g2_powers가 2개 이상)

    Returns:
        bool: 검증 성공 여부. 틀린 증명은 예외 없이 False.

    Raises:
        PreconditionViolation: BatchProof가 주어졌거나 SRS에 [τ]₂가 없을 때
    """
    if not isinstance(proof, PointProof):
        raise PreconditionViolation(
            f"단일 점 검증에는 PointProof가 필요합니다: {type(proof).__name__}"
        )
    if len(srs.g2_powers) < 2:
        raise PreconditionViolation("검증에는 [τ]₂가 포함된 SRS가 필요합니다")
    challenge = to_fr(challenge)

    # [τ]₂ - z·G2 = [τ - z]₂
    tau_minus_z_g2 = ec_sub(srs.g2_powers[1], ec_mul(G2, challenge))
    lhs = ec_pairing(tau_minus_z_g2, proof.quotient_commitment)

    # [p]₁ - y·G1
    c_minus_y = ec_sub(proof.polynomial_commitment, ec_mul(G1, proof.evaluation))
    rhs = ec_pairing(G2, c_minus_y)

    ok = lhs == rhs
    logger.debug("point proof verified: %s", ok)
    return ok
