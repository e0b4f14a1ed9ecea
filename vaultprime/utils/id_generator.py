"""
ID 생성 유틸리티

시간 순으로 정렬되는 COMB GUID를 생성하는 함수들을 제공합니다.

COMB GUID는 랜덤 UUID4의 마지막 6바이트(노드 영역)를 현재 UTC 틱으로
덮어쓴 128비트 식별자입니다. 앞 10바이트는 랜덤 접두사, 뒤 6바이트는
시간 접미사이며, 정렬은 시간 접미사를 가장 상위로 비교합니다.
"""

import uuid
from typing import Callable, Optional, Union

from .datetime import utc_now_ticks


# 바이트 레이아웃
GUID_BYTE_OFFSET = 10
TIMESTAMP_BYTE_OFFSET = 2
TIMESTAMP_BYTE_COUNT = 6
TIMESTAMP_SIZE = 8


def _comb_sort_key(value: uuid.UUID) -> bytes:
    raw = value.bytes
    return raw[GUID_BYTE_OFFSET:] + raw[:GUID_BYTE_OFFSET]


class CombGuid(uuid.UUID):
    """
    시간 접미사 우선으로 정렬되는 UUID 값 타입

    동등성, 해시, 문자열 표현(8-4-4-4-12)은 uuid.UUID와 같습니다.
    대소 비교는 바이트 10..15(시간 접미사)를 먼저, 바이트 0..9(랜덤 접두사)를
    그 다음으로 비교하는 전순서입니다. 같은 틱에서 생성된 ID 사이의 순서는
    랜덤 접두사에 따라 임의로 정해집니다.
    """

    __slots__ = ()

    @classmethod
    def from_uuid(cls, value: Union[uuid.UUID, str]) -> "CombGuid":
        """
        기존 UUID 또는 UUID 문자열을 CombGuid로 감쌉니다.

        Raises:
            ValueError: 유효한 UUID 문자열이 아닌 경우
        """
        if isinstance(value, uuid.UUID):
            return cls(int=value.int)
        return cls(value)

    def sort_key(self) -> bytes:
        """정렬에 사용하는 16바이트 키 (시간 접미사 + 랜덤 접두사)"""
        return _comb_sort_key(self)

    def __lt__(self, other):
        if isinstance(other, uuid.UUID):
            return self.sort_key() < _comb_sort_key(other)
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, uuid.UUID):
            return self.sort_key() <= _comb_sort_key(other)
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, uuid.UUID):
            return self.sort_key() > _comb_sort_key(other)
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, uuid.UUID):
            return self.sort_key() >= _comb_sort_key(other)
        return NotImplemented


def generate_comb_guid(ticks: Optional[Callable[[], int]] = None) -> CombGuid:
    """
    순차 COMB GUID를 생성합니다.

    랜덤 UUID4 바이트의 10..15 위치에 현재 UTC 틱(8바이트, 빅엔디언)의
    2..7 바이트를 복사합니다. 상위 2바이트는 거의 변하지 않으므로 버립니다.
    외부 자원에 의존하지 않으므로 항상 성공합니다.

    Args:
        ticks: 현재 틱 값을 반환하는 함수 (기본값: utc_now_ticks)

    Returns:
        CombGuid: 시간 순으로 정렬되는 UUID
    """
    guid_bytes = bytearray(uuid.uuid4().bytes)

    timestamp = (ticks or utc_now_ticks)()
    timestamp_bytes = timestamp.to_bytes(TIMESTAMP_SIZE, "big")

    guid_bytes[GUID_BYTE_OFFSET:GUID_BYTE_OFFSET + TIMESTAMP_BYTE_COUNT] = timestamp_bytes[
        TIMESTAMP_BYTE_OFFSET:TIMESTAMP_BYTE_OFFSET + TIMESTAMP_BYTE_COUNT
    ]

    return CombGuid(bytes=bytes(guid_bytes))


def generate_comb_guid_str() -> str:
    """
    순차 COMB GUID를 문자열로 생성합니다.

    Returns:
        str: UUID 문자열 (하이픈 포함)
    """
    return str(generate_comb_guid())


def get_comb_timestamp(identifier: uuid.UUID) -> int:
    """
    COMB GUID에 저장된 48비트 시간 조각을 반환합니다.

    값은 생성 시점 틱의 하위 48비트(ticks mod 2**48)입니다.

    Args:
        identifier: COMB GUID

    Returns:
        int: 시간 조각
    """
    return int.from_bytes(identifier.bytes[GUID_BYTE_OFFSET:], "big")


def is_valid_uuid(value: str) -> bool:
    """
    유효한 UUID인지 검증합니다.

    Args:
        value: 검증할 문자열

    Returns:
        bool: 유효한 UUID인 경우 True
    """
    try:
        uuid.UUID(value)
        return True
    except (ValueError, AttributeError, TypeError):
        return False
