"""
VaultPrime

순차 ID와 비밀번호 생성 유틸리티 패키지
"""

__version__ = "0.1.0"
