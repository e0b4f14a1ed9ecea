"""
공통 유틸리티 모듈

이 패키지는 식별자 및 비밀번호 생성 함수들을 제공합니다.
"""

from .id_generator import CombGuid, generate_comb_guid, generate_comb_guid_str, get_comb_timestamp, is_valid_uuid
from .password import PasswordStrength, build_character_universe, generate_password, evaluate_password_strength
from .datetime import utc_now, utc_now_ticks, datetime_to_ticks, ticks_to_datetime

__all__ = [
    # ID 생성
    "CombGuid",
    "generate_comb_guid",
    "generate_comb_guid_str",
    "get_comb_timestamp",
    "is_valid_uuid",

    # 비밀번호
    "PasswordStrength",
    "build_character_universe",
    "generate_password",
    "evaluate_password_strength",

    # 날짜/시간
    "utc_now",
    "utc_now_ticks",
    "datetime_to_ticks",
    "ticks_to_datetime",
]
