"""
KZG 벡터 커밋먼트: 다중 점 일괄 열기
======================================

벡터 v = [v₀, ..., v_{n-1}]를 도메인 [d₀, ..., d_{n-1}] 위에서 보간한
다항식 P(x) (P(dᵢ) = vᵢ)로 커밋하고, 챌린지 집합 {z₁, ..., z_k} 전체에서의
값을 G1 점 두 개짜리 증명 하나로 연다.

**일괄 열기 (Batch Opening)**:
  1. P(x) = Lagrange(domain, values)
  2. I(x) = Lagrange(challenges, P(challenges))   : 차수 < k, 챌린지에서 P와 일치
  3. Z(x) = ∏ (x - zᵢ)                             : 챌린지에서만 0
  4. Q(x) = (P(x) - I(x)) / Z(x)                    : P - I는 모든 zᵢ에서 0
  5. 증명 = ([P]₁, [Q]₁)

**검증**:
  I(x)와 Z(x)는 공개 정보만으로 다시 계산할 수 있다.
    e([Q]₁, [Z(τ)]₂) == e([P]₁ - [I(τ)]₁, G2)
  즉 Q(τ)·Z(τ) = P(τ) - I(τ). k와 무관하게 증명 크기가 일정하다.

**단일 인덱스 열기**:
  prove_index / verify_index 는 벡터의 한 위치만 단일 점 KZG로 연다.

사용 예시:
    >>> from zkp.kzg.vector import prove, verify
    >>> values, domain = [1, 5, 2, 3], [0, 1, 2, 3]
    >>> proof = prove(values, domain, [0, 2], srs)
    >>> verify(proof, values, domain, [0, 2], srs)  # True
"""

import logging

from zkp.kzg import kzg
from zkp.kzg.errors import PreconditionViolation
from zkp.kzg.field import G2, ec_sub, ec_pairing, to_fr
from zkp.kzg.polynomial import (
    commit,
    exact_divide,
    lagrange_interpolate,
    vanishing_polynomial,
)
from zkp.kzg.proof import BatchProof

logger = logging.getLogger(__name__)


def _vanishing_within(challenges, srs):
    z = vanishing_polynomial(challenges)
    # 검증자가 [Z(τ)]₂를 계산할 수 있어야 한다
    if len(z) > len(srs.g2_powers):
        raise PreconditionViolation(
            f"챌린지 {len(challenges)}개에 대한 소거 다항식이 SRS 길이 {len(srs.g2_powers)}를 초과합니다"
        )
    return z


def prove(values, domain, challenges, srs):
    """벡터를 챌린지 집합 전체에서 여는 일괄 증명을 만든다.

    Args:
        values: 벡터 값 리스트 (FR 또는 정수)
        domain: 각 값의 도메인 점 리스트 (서로 달라야 함)
        challenges: 열어볼 점 리스트 (1개 이상, 서로 달라야 함)
        srs: SRS

    Returns:
        BatchProof: ([P]₁, [Q]₁)

    Raises:
        PreconditionViolation: 빈 벡터, 길이 불일치, 중복 점, 빈 챌린지 집합,
            SRS보다 긴 다항식
    """
    challenges = [to_fr(z) for z in challenges]
    z_poly = _vanishing_within(challenges, srs)

    p_poly = lagrange_interpolate(domain, values)
    i_poly = lagrange_interpolate(challenges, [p_poly.evaluate(z) for z in challenges])

    # P - I 는 모든 챌린지에서 0이므로 Z로 나누어 떨어진다
    quotient = exact_divide(p_poly - i_poly, z_poly)

    proof = BatchProof(
        commit(p_poly, srs.g1_powers),
        commit(quotient, srs.g1_powers),
    )
    logger.debug(
        "batch proof created: vector length=%d, challenges=%d", len(values), len(challenges)
    )
    return proof


def claimed_values(values, domain, challenges):
    """공개 벡터에서 각 챌린지의 값을 구한다.

    챌린지가 도메인 점이면 벡터의 해당 값을, 아니면 보간 다항식의 값을 쓴다.

    Raises:
        PreconditionViolation: 길이 불일치, 중복된 도메인 점 (prove와 같은 조건)
    """
    domain = [to_fr(d) for d in domain]
    values = [to_fr(v) for v in values]
    if len(domain) != len(values):
        raise PreconditionViolation(
            f"도메인 길이 {len(domain)}와 값 길이 {len(values)}가 다릅니다"
        )
    by_point = {int(d): v for d, v in zip(domain, values)}
    if len(by_point) != len(domain):
        raise PreconditionViolation("보간 도메인에 중복된 점이 있습니다")

    p_poly = None
    result = []
    for z in challenges:
        z = to_fr(z)
        if int(z) in by_point:
            result.append(by_point[int(z)])
            continue
        if p_poly is None:
            p_poly = lagrange_interpolate(domain, values)
        result.append(p_poly.evaluate(z))
    return result


def verify_values(proof, challenges, claimed, srs):
    """열린 부분 벡터 (challenges, claimed)만으로 일괄 증명을 검증한다.

    검증 방정식:
        e([Q]₁, [Z(τ)]₂) == e([P]₁ - [I(τ)]₁, G2)

    Returns:
        bool: 검증 성공 여부. 틀린 값이나 증명은 예외 없이 False.

    Raises:
        PreconditionViolation: PointProof가 주어졌거나, 챌린지 집합이 비었거나
            중복되었거나, SRS가 짧을 때
    """
    if not isinstance(proof, BatchProof):
        raise PreconditionViolation(
            f"일괄 검증에는 BatchProof가 필요합니다: {type(proof).__name__}"
        )
    challenges = [to_fr(z) for z in challenges]
    z_poly = _vanishing_within(challenges, srs)
    i_poly = lagrange_interpolate(challenges, claimed)

    lhs = ec_pairing(commit(z_poly, srs.g2_powers), proof.quotient_commitment)
    rhs = ec_pairing(G2, ec_sub(proof.polynomial_commitment, commit(i_poly, srs.g1_powers)))

    ok = lhs == rhs
    logger.debug("batch proof verified: challenges=%d, result=%s", len(challenges), ok)
    return ok


def verify(proof, values, domain, challenges, srs):
    """공개 벡터와 챌린지 집합으로 일괄 증명을 검증한다.

    Args:
        proof: BatchProof
        values: 벡터 값 리스트
        domain: 도메인 점 리스트
        challenges: 열린 점 리스트
        srs: SRS

    Returns:
        bool: 검증 성공 여부
    """
    return verify_values(proof, challenges, claimed_values(values, domain, challenges), srs)


# ─────────────────────────────────────────────────────────────────────
# 단일 인덱스 열기
# ─────────────────────────────────────────────────────────────────────

def prove_index(values, index, srs, domain=None):
    """벡터의 index번째 값을 단일 점 KZG로 연다.

    domain이 없으면 [0, 1, ..., n-1]을 도메인으로 쓴다.

    Returns:
        PointProof: evaluation == values[index]

    Raises:
        PreconditionViolation: index가 벡터 범위를 벗어날 때
    """
    domain = list(range(len(values))) if domain is None else list(domain)
    if not 0 <= index < len(domain):
        raise PreconditionViolation(f"인덱스 {index}가 벡터 길이 {len(domain)}를 벗어납니다")
    p_poly = lagrange_interpolate(domain, values)
    return kzg.prove(p_poly, domain[index], srs)


def verify_index(proof, value, index, srs, domain=None):
    """prove_index로 만든 증명이 index 위치의 값 value를 여는지 검증한다.

    domain이 없으면 index 자체가 평가 점이다.
    """
    point = index if domain is None else list(domain)[index]
    if not kzg.verify(proof, point, srs):
        return False
    return proof.evaluation == to_fr(value)
