"""
핵심 모듈

설정, 로깅, 예외 정의를 제공합니다.
"""
