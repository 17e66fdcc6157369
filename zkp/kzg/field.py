"""
KZG 기반 모듈: 유한체(Finite Field) 및 타원곡선 연산
=====================================================

KZG 커밋먼트가 소비하는 외부 대수 도구를 한 곳에 모은 어댑터 모듈이다.
실제 산술은 모두 py_ecc(bn128)가 담당하고, 여기서는 이름과 인자 순서만 맞춘다.

**유한체 FR**:
  bn128 타원곡선의 스칼라 필드. 다항식 계수, 챌린지, 평가값이 모두 FR 원소이다.
  - 위수(order) p ≈ 2^254, 소수체(prime field)
  - 주의: py_ecc의 FQ는 0의 역원을 0으로 돌려준다 (예외가 아님).
    0으로 나누는 경우는 호출하는 쪽에서 먼저 걸러야 한다.

**타원곡선 연산**:
  G1, G2 그룹 연산과 페어링 e: G1 × G2 → GT.
  무한원점(항등원)은 py_ecc 관례대로 None으로 표현한다.

사용 예시:
    >>> from zkp.kzg.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> b = FR(7)
    >>> c = a * b        # FR(21)
    >>> P = ec_mul(G1, 5)  # 5·G1
"""

import secrets

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    예시:
        >>> x = FR(3)
        >>> x * x          # FR(9)
        >>> FR(1) / FR(3)   # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


# 곡선 위수 (필드 크기)
CURVE_ORDER = bn128.curve_order


def to_fr(value):
    """정수나 FR 원소를 FR로 맞춘다."""
    return value if isinstance(value, FR) else FR(value)


def random_fr():
    """암호학적으로 안전한 난수원(secrets)에서 균등한 FR 원소를 뽑는다."""
    return FR(secrets.randbelow(CURVE_ORDER))


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bn128.G1

# G2 그룹 생성자 (generator)
G2 = bn128.G2

# 영점 (point at infinity) - 항등원
Z1 = None  # bn128에서 항등원은 G1, G2 모두 None으로 표현


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (None이면 무한원점)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)

    예시:
        >>> P = ec_mul(G1, FR(5))  # 5·G1
        >>> Q = ec_mul(G2, 3)       # 3·G2
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2. 어느 한쪽이 None이면 다른 쪽을 그대로 돌려준다."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    return bn128.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return ec_add(p1, ec_neg(p2))


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    bn128의 optimal Ate 페어링을 수행한다. 결과(FQ12)는 == 로 비교할 수 있다.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.

    예시:
        >>> e1 = ec_pairing(G2, G1)             # e(G1, G2)
        >>> e2 = ec_pairing(G2, ec_mul(G1, 5))  # e(5·G1, G2) = e(G1, G2)^5
    """
    return bn128.pairing(g2_point, g1_point)
