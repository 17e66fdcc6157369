"""
KZG 증명 데이터 컨테이너
=========================

두 가지 열기 증명을 서로 다른 타입으로 구분한다.

  ┌──────────────┬──────────────────────────────────────────────┐
  │ PointProof   │ [P]₁, [Q]₁, y = P(z)    (단일 점 열기)      │
  │ BatchProof   │ [P]₁, [Q]₁              (다중 점/벡터 열기)  │
  └──────────────┴──────────────────────────────────────────────┘

BatchProof에는 평가값 속성 자체가 없다. 검증자가 공개된 벡터와
챌린지 집합으로 I(x)를 직접 다시 계산하기 때문이다.
"""


class Proof:
    """두 증명 타입이 공유하는 커밋먼트.

    속성:
        polynomial_commitment: [P(τ)]₁ (G1 점)
        quotient_commitment: [Q(τ)]₁ (G1 점, 영 다항식이면 None)
    """

    def __init__(self, polynomial_commitment, quotient_commitment):
        self.polynomial_commitment = polynomial_commitment
        self.quotient_commitment = quotient_commitment

    def _fields(self):
        return (self.polynomial_commitment, self.quotient_commitment)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    def __repr__(self):
        return f"{type(self).__name__}{self._fields()!r}"


class PointProof(Proof):
    """단일 점 z에서의 열기 증명. evaluation = P(z)."""

    def __init__(self, polynomial_commitment, quotient_commitment, evaluation):
        super().__init__(polynomial_commitment, quotient_commitment)
        self.evaluation = evaluation

    def _fields(self):
        return (self.polynomial_commitment, self.quotient_commitment, self.evaluation)


class BatchProof(Proof):
    """챌린지 집합 {z₁, ..., z_k} 전체에 대한 일괄 열기 증명."""
