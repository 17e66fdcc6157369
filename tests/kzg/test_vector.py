"""
KZG 벡터 커밋먼트 (다중 점 일괄 열기) 테스트
=============================================

테스트 범위:
  - 벡터 [1, 5, 2, 3], 도메인 [0, 1, 2, 3]에서 전체/부분 집합 열기
  - 도메인 밖의 챌린지 열기
  - 건전성: 조작된 값, 다른 챌린지, 뒤바뀐 커밋먼트
  - 사전조건 위반: 빈 챌린지, 중복 챌린지, 짧은 SRS, 빈 벡터
  - 단일 인덱스 열기 (prove_index / verify_index)
"""

import pytest

from zkp.kzg.errors import PreconditionViolation
from zkp.kzg.field import FR, G1
from zkp.kzg.polynomial import Polynomial, commit, exact_divide, lagrange_interpolate
from zkp.kzg.proof import BatchProof, PointProof
from zkp.kzg.srs import SRS
from zkp.kzg import vector

VECTOR = [1, 5, 2, 3]
DOMAIN = [0, 1, 2, 3]


# ─────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────

@pytest.fixture(scope="module")
def full_opening(srs_small):
    """Proof opening VECTOR at every domain point."""
    return vector.prove(VECTOR, DOMAIN, DOMAIN, srs_small)


@pytest.fixture(scope="module")
def subset_opening(srs_small):
    """Proof opening VECTOR at the subset [0, 2]."""
    return vector.prove(VECTOR, DOMAIN, [0, 2], srs_small)


# ─────────────────────────────────────────────────────────────────────
# Batch opening
# ─────────────────────────────────────────────────────────────────────

class TestBatchProve:
    def test_proof_shape(self, full_opening, srs_small):
        assert isinstance(full_opening, BatchProof)
        expected = commit(lagrange_interpolate(DOMAIN, VECTOR), srs_small.g1_powers)
        assert full_opening.polynomial_commitment == expected

    def test_full_opening_has_zero_quotient(self, full_opening):
        """I(x) == P(x) when every point is opened, so Q(x) == 0."""
        assert full_opening.quotient_commitment is None

    def test_subset_quotient(self, subset_opening, srs_small):
        p = lagrange_interpolate(DOMAIN, VECTOR)
        i = lagrange_interpolate([0, 2], [1, 2])
        z = Polynomial([0, FR(0) - FR(2), 1])  # x(x - 2)
        q = exact_divide(p - i, z)
        assert q * z == p - i
        assert subset_opening.quotient_commitment == commit(q, srs_small.g1_powers)

    def test_same_commitment_for_any_challenge_set(self, full_opening, subset_opening):
        assert full_opening.polynomial_commitment == subset_opening.polynomial_commitment


class TestBatchVerify:
    def test_full_opening_verifies(self, full_opening, srs_small):
        assert vector.verify(full_opening, VECTOR, DOMAIN, DOMAIN, srs_small)

    def test_subset_opening_verifies(self, subset_opening, srs_small):
        assert vector.verify(subset_opening, VECTOR, DOMAIN, [0, 2], srs_small)

    def test_subset_with_only_claimed_values(self, subset_opening, srs_small):
        """The verifier needs only the opened sub-vector."""
        assert vector.verify_values(subset_opening, [0, 2], [1, 2], srs_small)

    def test_single_challenge(self, srs_small):
        proof = vector.prove(VECTOR, DOMAIN, [3], srs_small)
        assert vector.verify_values(proof, [3], [3], srs_small)

    def test_challenges_outside_domain(self, srs_small):
        challenges = [7, 100]
        proof = vector.prove(VECTOR, DOMAIN, challenges, srs_small)
        assert vector.verify(proof, VECTOR, DOMAIN, challenges, srs_small)

    def test_tampered_claimed_value(self, subset_opening, srs_small):
        assert not vector.verify_values(subset_opening, [0, 2], [1, 3], srs_small)

    def test_tampered_vector(self, subset_opening, srs_small):
        tampered = [1, 5, 9, 3]
        assert not vector.verify(subset_opening, tampered, DOMAIN, [0, 2], srs_small)

    def test_wrong_challenge_set(self, subset_opening, srs_small):
        assert not vector.verify(subset_opening, VECTOR, DOMAIN, [0, 1], srs_small)

    def test_swapped_polynomial_commitment(self, subset_opening, srs_small):
        other = commit(lagrange_interpolate(DOMAIN, [1, 5, 2, 4]), srs_small.g1_powers)
        forged = BatchProof(other, subset_opening.quotient_commitment)
        assert not vector.verify(forged, VECTOR, DOMAIN, [0, 2], srs_small)

    def test_point_proof_rejected(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.verify_values(PointProof(G1, G1, FR(0)), [0, 2], [1, 2], srs_small)


class TestClaimedValues:
    def test_domain_points_use_vector(self):
        assert vector.claimed_values(VECTOR, DOMAIN, [2, 0]) == [FR(2), FR(1)]

    def test_outside_domain_interpolates(self):
        p = lagrange_interpolate(DOMAIN, VECTOR)
        assert vector.claimed_values(VECTOR, DOMAIN, [9]) == [p.evaluate(9)]

    def test_length_mismatch(self):
        with pytest.raises(PreconditionViolation):
            vector.claimed_values([1, 2], DOMAIN, [0])

    def test_duplicate_domain_points(self):
        """A repeated domain point is rejected, not collapsed to its last value."""
        with pytest.raises(PreconditionViolation):
            vector.claimed_values([1, 2], [0, 0], [0])

    def test_verify_with_duplicate_domain_points(self, subset_opening, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.verify(subset_opening, [1, 5, 2, 3], [0, 1, 2, 0], [0, 2], srs_small)


class TestBatchPreconditions:
    def test_empty_challenge_set(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.prove(VECTOR, DOMAIN, [], srs_small)

    def test_empty_challenge_set_on_verify(self, subset_opening, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.verify_values(subset_opening, [], [], srs_small)

    def test_duplicate_challenges(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.prove(VECTOR, DOMAIN, [1, 1], srs_small)

    def test_empty_vector(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.prove([], [], [0], srs_small)

    def test_domain_length_mismatch(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.prove([1, 2, 3], DOMAIN, [0], srs_small)

    def test_vector_longer_than_srs(self, srs_tiny):
        with pytest.raises(PreconditionViolation):
            vector.prove(VECTOR, DOMAIN, [0], srs_tiny)

    def test_too_many_challenges_for_srs(self, srs_tiny):
        with pytest.raises(PreconditionViolation):
            vector.prove([1, 2], [0, 1], [0, 1, 2], srs_tiny)


# ─────────────────────────────────────────────────────────────────────
# Single index opening
# ─────────────────────────────────────────────────────────────────────

class TestIndexOpening:
    def test_open_index_zero(self, srs_small):
        """Open the first element with the implicit [0, 1, ..., n-1] domain."""
        proof = vector.prove_index(VECTOR, 0, srs_small)
        assert isinstance(proof, PointProof)
        assert proof.evaluation == FR(1)
        assert vector.verify_index(proof, 1, 0, srs_small)

    def test_open_with_explicit_domain(self, srs_small):
        domain = [10, 20, 30, 40]
        proof = vector.prove_index(VECTOR, 1, srs_small, domain=domain)
        assert proof.evaluation == FR(5)
        assert vector.verify_index(proof, 5, 1, srs_small, domain=domain)

    def test_wrong_value(self, srs_small):
        proof = vector.prove_index(VECTOR, 2, srs_small)
        assert not vector.verify_index(proof, 3, 2, srs_small)

    def test_wrong_index(self, srs_small):
        proof = vector.prove_index(VECTOR, 2, srs_small)
        assert not vector.verify_index(proof, 2, 3, srs_small)

    def test_index_out_of_range(self, srs_small):
        with pytest.raises(PreconditionViolation):
            vector.prove_index(VECTOR, 4, srs_small)


class TestLargerVector:
    def test_random_vector_random_subset(self):
        srs = SRS.generate(max_degree=6, seed=2024)
        values = [FR(v) for v in (3, 1, 4, 1, 5, 9, 2)]
        domain = list(range(len(values)))
        challenges = [1, 4, 6]
        proof = vector.prove(values, domain, challenges, srs)
        assert vector.verify(proof, values, domain, challenges, srs)
