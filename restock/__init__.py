"""
restock -- 유통기한 짧은 원료 재고 보충 추천 엔진

우유(주 2회 발주)와 아이스크림 원료(매월 1·3번째 금요일 발주)의
다음 발주일, 도착일, 추천 발주 수량(박스)과 긴급도를 계산한다.
"""

__version__ = "1.0.0"
