"""설정 모듈 (경로, 환경변수, 업무 상수)"""
