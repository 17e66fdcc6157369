"""
KZG 오류 타입
=============

잘못된 입력으로 인한 프로그래밍 오류를 나타낸다. 검증 실패(verify가 False를
돌려주는 경우)는 정상적인 결과이므로 여기에 포함되지 않는다.
"""


class PreconditionViolation(ValueError):
    """사전조건 위반: 빈 다항식, SRS 길이 부족, 제수 차수 불일치,
    중복된 보간 점, 빈 챌린지 집합 등.

    ValueError를 상속하므로 ``except ValueError``로도 잡힌다.
    """
