"""애플리케이션 레이어 -- 도메인 파이프라인 조합"""
