"""
도메인 레이어 -- I/O 없는 순수 계산 로직

- cycle: 발주/도착 주기 계산
- demand: 수요 구간 분할 및 수요 모델
- quantity: 추천 수량 및 긴급도
"""
