"""
KZG 기반 모듈: 다항식(Polynomial) 엔진
=======================================

KZG 커밋먼트와 열기 증명(opening proof)에 필요한 모든 다항식 연산을 제공한다.

**Polynomial 클래스**:
  계수(coefficient) 표현 기반 다항식. p(x) = c₀ + c₁·x + c₂·x² + ...
  불변(immutable) 값으로 취급한다. 모든 연산은 새 다항식을 돌려준다.

**정확한 나눗셈 (exact_divide)**:
  열기 증명의 몫 다항식 q(x) = (p(x) - y) / (x - z) 또는
  q(x) = (p(x) - I(x)) / Z(x) 를 계산한다.
  나누어 떨어진다는 것이 사전조건이며, 나머지는 assert로만 확인한다.

**Lagrange 보간 / 소거 다항식**:
  벡터 커밋먼트에서 (도메인 점, 값) 쌍을 다항식으로 바꾸고,
  챌린지 집합 위에서 0이 되는 Z(x) = ∏(x - zᵢ)를 만든다.

**커밋 (commit)**:
  SRS의 거듭제곱 점들과 계수의 선형결합 Σ cᵢ·[τⁱ] = p(τ)·G.
  τ를 모르는 상태에서 "지수 위에서" 다항식을 평가한다.

사용 예시:
    >>> from zkp.kzg.polynomial import Polynomial, lagrange_interpolate
    >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
    >>> p.evaluate(FR(2))  # 1 + 4 + 12 = FR(17)
    >>> lagrange_interpolate([0, 1, 2, 3], [1, 5, 2, 3]).evaluate(1)  # FR(5)
"""

from zkp.kzg.errors import PreconditionViolation
from zkp.kzg.field import FR, ec_add, ec_mul, random_fr, to_fr


# ─────────────────────────────────────────────────────────────────────
# Polynomial 클래스
# ─────────────────────────────────────────────────────────────────────

class Polynomial:
    """유한체 FR 위의 다항식.

    계수 튜플로 표현: coeffs = (c₀, c₁, c₂, ...) → c₀ + c₁x + c₂x² + ...

    계수는 주어진 그대로 보관한다. 최고차 계수가 0일 수 있으므로
    len(p) - 1 은 차수의 상한일 뿐이고, 실제 차수는 degree로 구한다.
    비교(==)는 값 기준이라 [1, 2]와 [1, 2, 0]은 같은 다항식이다.
    계수가 하나도 없는 다항식은 만들 수 없다.

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([3, 4])          # 3 + 4x (정수도 FR로 변환)
        >>> r = p + q                        # 4 + 6x
        >>> r = p * q                        # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소(또는 정수)의 시퀀스 [c₀, c₁, ...].
                    None이면 영 다항식(0)을 생성한다.

        Raises:
            PreconditionViolation: 빈 계수 리스트가 주어졌을 때
        """
        if coeffs is None:
            coeffs = [FR(0)]
        coeffs = [to_fr(c) for c in coeffs]
        if not coeffs:
            raise PreconditionViolation("빈 다항식은 허용되지 않습니다 (계수가 최소 1개 필요)")
        self.coeffs = tuple(coeffs)

    @property
    def degree(self):
        """0이 아닌 최고차 계수의 차수. 영 다항식의 차수는 0으로 정의한다."""
        for i in range(len(self.coeffs) - 1, 0, -1):
            if self.coeffs[i] != FR(0):
                return i
        return 0

    def is_zero(self):
        """영 다항식인지 확인 (계수 개수와 무관)."""
        return all(c == FR(0) for c in self.coeffs)

    def _significant(self):
        return self.coeffs[:self.degree + 1]

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        Horner's method: p(x) = c₀ + x(c₁ + x(c₂ + ...))

        Args:
            point: 평가할 FR 원소 (정수도 허용)

        Returns:
            FR: p(point) 값

        예시:
            >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
            >>> p.evaluate(FR(2))  # FR(17)
        """
        point = to_fr(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __call__(self, point):
        return self.evaluate(point)

    def _combine(self, other, op):
        # 긴 쪽 길이에 맞추고 짧은 쪽의 빈 고차항은 0으로 본다 (인자 순서와 무관)
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        a, b = self.coeffs, other.coeffs
        max_len = max(len(a), len(b))
        zero = FR(0)
        return Polynomial([
            op(a[i] if i < len(a) else zero, b[i] if i < len(b) else zero)
            for i in range(max_len)
        ])

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        return self._combine(other, lambda x, y: x + y)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x)."""
        return self._combine(other, lambda x, y: x - y)

    def __rsub__(self, other):
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return other.__sub__(self)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([FR(0) - c for c in self.coeffs])

    def __mul__(self, other):
        """다항식 곱셈: p(x) · q(x) 또는 스칼라곱.

        다항식 × 다항식: O(n²) 컨볼루션, 결과 계수 k = Σ p[i]·q[k-i]
        다항식 × 스칼라: 각 계수에 스칼라를 곱함
        """
        if isinstance(other, (int, FR)):
            other = to_fr(other)
            return Polynomial([c * other for c in self.coeffs])
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            if a == FR(0):
                continue
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        """다항식 동등 비교."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._significant() == other._significant()

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def __len__(self):
        """계수 개수 반환 (최고차 0 계수 포함)."""
        return len(self.coeffs)

    def __getitem__(self, i):
        return self.coeffs[i]

    def scale(self, scalar):
        """스칼라곱: scalar · p(x)."""
        return self * scalar

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([FR(0)])

    @classmethod
    def one(cls):
        """상수 다항식 p(x) = 1."""
        return cls([FR(1)])

    @classmethod
    def linear(cls, root):
        """근이 root인 1차 다항식 (x - root), 계수 [-root, 1]."""
        return cls([FR(0) - to_fr(root), FR(1)])

    @classmethod
    def random(cls, length):
        """계수 length개를 암호학적 난수로 채운 다항식.

        Raises:
            PreconditionViolation: length < 1
        """
        if length < 1:
            raise PreconditionViolation(f"다항식 길이는 1 이상이어야 합니다: {length}")
        return cls([random_fr() for _ in range(length)])


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈
# ─────────────────────────────────────────────────────────────────────

def exact_divide(numerator, divisor):
    """나누어 떨어지는 다항식 나눗셈: numerator(x) / divisor(x).

    합성 나눗셈(synthetic division)을 최고차부터 한 번에 수행한다.
    1차 제수 (x - r) = [-r, 1]이면 점화식은

        q[deg-1] = n[deg]
        q[i-1]   = n[i] - q[i]·divisor[0] = n[i] + q[i]·r

    이고, 소거 다항식 Z(x)처럼 차수가 높은 제수에서는 같은 방식으로
    최고차 몫 계수 하나를 정할 때마다 제수의 나머지 계수 전체를 뺀다.

    나머지는 돌려주지 않는다. 나누어 떨어짐은 사전조건이며
    assert로만 확인한다 (python -O에서는 생략된다).

    Args:
        numerator: 피제수 다항식 (예: p(x) - y, p(x) - I(x))
        divisor: 제수 다항식 (예: x - z, Z(x)). 차수 1 이상.

    Returns:
        Polynomial: 몫 다항식, 길이 len(numerator) - (divisor.degree + 1) + 1

    Raises:
        PreconditionViolation: 제수의 차수가 1 미만이거나, 0이 아닌 피제수의
            길이가 제수보다 짧을 때

    예시:
        >>> n = Polynomial([FR(6), FR(0) - FR(5), FR(1)])  # x² - 5x + 6
        >>> exact_divide(n, Polynomial.linear(2))           # x - 3
    """
    # 제수의 최고차 0 계수는 버린다 (0의 역원은 py_ecc에서 조용히 0이 된다)
    divisor_coeffs = divisor._significant()
    d = len(divisor_coeffs)
    if d < 2:
        raise PreconditionViolation(
            f"제수의 차수는 1 이상이어야 합니다 (차수 {d - 1})"
        )
    if numerator.is_zero():
        return Polynomial.zero()
    n = len(numerator.coeffs)
    if n < d:
        raise PreconditionViolation(
            f"피제수 길이 {n}가 제수 길이 {d}보다 짧습니다"
        )

    lead_inv = FR(1) / divisor_coeffs[-1]  # 소거 다항식은 monic이므로 1
    remainder = list(numerator.coeffs)
    quotient = [FR(0)] * (n - d + 1)

    for i in range(n - d, -1, -1):
        coeff = remainder[i + d - 1] * lead_inv
        quotient[i] = coeff
        if coeff == FR(0):
            continue
        # 최고차 항은 상쇄되므로 나머지 d-1개 계수만 갱신
        for j in range(d - 1):
            remainder[i + j] = remainder[i + j] - coeff * divisor_coeffs[j]

    assert all(c == FR(0) for c in remainder[:d - 1]), (
        "나누어 떨어지지 않습니다: 피제수가 제수의 모든 근에서 0이 아닙니다"
    )
    return Polynomial(quotient)


# ─────────────────────────────────────────────────────────────────────
# Lagrange 보간 / 소거 다항식
# ─────────────────────────────────────────────────────────────────────

def lagrange_basis(domain, i):
    """i번째 Lagrange 기저 다항식 L_i(x)를 계수 형태로 반환한다.

    L_i(x) = ∏_{j≠i} (x - d_j) / (d_i - d_j)

    성질: L_i(d_j) = δ_{ij} (크로네커 델타)

    Args:
        domain: FR 원소(또는 정수) 리스트 [d₀, d₁, ..., d_{n-1}]
        i: 기저 인덱스

    Returns:
        Polynomial: L_i(x)

    Raises:
        PreconditionViolation: 도메인에 같은 점이 두 번 나올 때
            (분모가 0이 되어 역원이 없다)
    """
    domain = [to_fr(d) for d in domain]
    result = Polynomial.one()
    denominator = FR(1)

    for j, d_j in enumerate(domain):
        if j == i:
            continue
        result = result * Polynomial.linear(d_j)
        denominator = denominator * (domain[i] - d_j)

    # py_ecc는 0의 역원을 0으로 돌려주므로 먼저 확인한다
    if denominator == FR(0):
        raise PreconditionViolation(f"보간 도메인에 중복된 점이 있습니다: {int(domain[i])}")
    return result * (FR(1) / denominator)


def lagrange_interpolate(domain, values):
    """(domain[i], values[i]) 쌍을 모두 지나는 차수 < n 인 유일한 다항식.

    P(x) = Σᵢ values[i] · L_i(x)

    O(n²)개의 1차 인수 곱셈을 사용한다. 수십~수백 개 점이 대상이다.

    Args:
        domain: 보간 점 리스트 (서로 달라야 함)
        values: 각 점에서의 값 리스트

    Returns:
        Polynomial: 보간 다항식

    Raises:
        PreconditionViolation: 빈 도메인, 길이 불일치, 중복된 점

    예시:
        >>> p = lagrange_interpolate([0, 1, 2, 3], [1, 5, 2, 3])
        >>> [p.evaluate(x) for x in range(4)]  # [FR(1), FR(5), FR(2), FR(3)]
    """
    domain = [to_fr(d) for d in domain]
    values = [to_fr(v) for v in values]
    if not domain:
        raise PreconditionViolation("보간 도메인이 비어 있습니다")
    if len(domain) != len(values):
        raise PreconditionViolation(
            f"도메인 길이 {len(domain)}와 값 길이 {len(values)}가 다릅니다"
        )
    if len({int(d) for d in domain}) != len(domain):
        raise PreconditionViolation("보간 도메인에 중복된 점이 있습니다")

    result = Polynomial.zero()
    for i, value in enumerate(values):
        if value == FR(0):
            continue
        result = result + lagrange_basis(domain, i) * value
    return result


def vanishing_polynomial(points):
    """주어진 점들에서만 0이 되는 소거 다항식 Z(x) = ∏ᵢ (x - zᵢ).

    1차 인수를 차례로 곱해서 만든다. 결과는 monic이다.

    Raises:
        PreconditionViolation: 점 집합이 비어 있을 때
    """
    if not points:
        raise PreconditionViolation("소거 다항식을 만들 점이 없습니다")
    result = Polynomial.one()
    for z in points:
        result = result * Polynomial.linear(z)
    return result


# ─────────────────────────────────────────────────────────────────────
# 커밋 (지수 위에서의 평가)
# ─────────────────────────────────────────────────────────────────────

def commit(poly, powers):
    """다항식을 SRS 거듭제곱 점들로 커밋한다.

    C = Σᵢ cᵢ · powers[i] = p(τ) · G

    powers가 srs.g1_powers이면 G1 커밋먼트, srs.g2_powers이면 G2 커밋먼트이다.
    단순 MSM(다중 스칼라 곱셈)이며 0 계수는 건너뛴다.

    Args:
        poly: 커밋할 다항식 (Polynomial)
        powers: [G, τG, τ²G, ...] 점 시퀀스

    Returns:
        점: 커밋먼트 C (영 다항식이면 무한원점 None)

    Raises:
        PreconditionViolation: len(powers) < len(poly)

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
        >>> C = commit(p, srs.g1_powers)  # (1 + 2τ + 3τ²)·G1
    """
    if len(poly.coeffs) > len(powers):
        raise PreconditionViolation(
            f"다항식 길이 {len(poly.coeffs)}가 SRS 길이 {len(powers)}를 초과합니다"
        )

    result = None  # 무한원점 (항등원)
    for point, coeff in zip(powers, poly.coeffs):
        if coeff == FR(0):
            continue
        result = ec_add(result, ec_mul(point, coeff))
    return result
