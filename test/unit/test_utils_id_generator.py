"""
ID 생성 유틸리티 단위 테스트
"""

import random
import uuid
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

import pytest

from vaultprime.utils.id_generator import (
    CombGuid,
    generate_comb_guid,
    generate_comb_guid_str,
    get_comb_timestamp,
    is_valid_uuid
)


# 2024-01-15 12:30:45 UTC의 틱 값
BASE_TICKS = 638409186450000000


class TestGenerateCombGuid:
    """COMB GUID 생성 테스트"""

    def test_generate_comb_guid_type(self):
        """반환 타입 테스트"""
        result = generate_comb_guid()

        assert isinstance(result, CombGuid)
        assert isinstance(result, uuid.UUID)

    def test_generate_comb_guid_string_format(self):
        """문자열 형식 테스트 (8-4-4-4-12)"""
        result = str(generate_comb_guid())

        assert len(result) == 36
        assert result.count('-') == 4
        assert [len(part) for part in result.split('-')] == [8, 4, 4, 4, 12]
        assert str(uuid.UUID(result)) == result

    def test_generate_comb_guid_str(self):
        """문자열 생성 함수 테스트"""
        result = generate_comb_guid_str()

        assert isinstance(result, str)
        assert is_valid_uuid(result)

    def test_timestamp_bytes_layout(self):
        """타임스탬프 바이트 배치 테스트 (빅엔디언 2..7 바이트)"""
        result = generate_comb_guid(ticks=lambda: 0x0102030405060708)

        assert result.bytes[10:] == bytes([0x03, 0x04, 0x05, 0x06, 0x07, 0x08])
        assert get_comb_timestamp(result) == 0x030405060708

    def test_most_significant_timestamp_bytes_dropped(self):
        """타임스탬프 상위 2바이트 무시 테스트"""
        first = generate_comb_guid(ticks=lambda: 0x0000AABBCCDDEEFF)
        second = generate_comb_guid(ticks=lambda: 0xFFFFAABBCCDDEEFF & 0x7FFFFFFFFFFFFFFF)

        assert first.bytes[10:] == second.bytes[10:]

    def test_random_prefix_keeps_uuid4_version(self):
        """랜덤 접두사의 UUID4 버전/변형 비트 유지 테스트"""
        result = generate_comb_guid(ticks=lambda: BASE_TICKS)

        assert result.version == 4
        assert result.variant == uuid.RFC_4122

    def test_uses_current_utc_ticks_by_default(self):
        """기본 시간 소스 테스트"""
        with patch('vaultprime.utils.id_generator.utc_now_ticks', return_value=BASE_TICKS) as mock_ticks:
            result = generate_comb_guid()

        mock_ticks.assert_called_once_with()
        assert get_comb_timestamp(result) == BASE_TICKS % (1 << 48)

    def test_generate_comb_guid_uniqueness(self):
        """고유성 테스트"""
        guids = [generate_comb_guid() for _ in range(1000)]

        assert len(set(guids)) == 1000

    def test_same_tick_uniqueness(self):
        """같은 틱에서의 고유성 테스트"""
        guids = [generate_comb_guid(ticks=lambda: BASE_TICKS) for _ in range(100)]

        assert len(set(guids)) == 100
        assert len({g.bytes[10:] for g in guids}) == 1

    def test_concurrent_generation(self):
        """동시 생성 테스트"""
        with ThreadPoolExecutor(max_workers=8) as executor:
            guids = list(executor.map(lambda _: generate_comb_guid(), range(500)))

        assert len(set(guids)) == 500


class TestCombGuidOrdering:
    """COMB GUID 정렬 테스트"""

    def test_increasing_ticks_are_strictly_increasing(self):
        """증가하는 틱에 대한 순서 테스트"""
        guids = [
            generate_comb_guid(ticks=lambda t=t: t)
            for t in range(BASE_TICKS, BASE_TICKS + 200)
        ]

        assert all(a < b for a, b in zip(guids, guids[1:]))
        assert all(b > a for a, b in zip(guids, guids[1:]))

    def test_sorting_restores_generation_order(self):
        """정렬 시 생성 순서 복원 테스트"""
        guids = [
            generate_comb_guid(ticks=lambda t=t: t)
            for t in range(BASE_TICKS, BASE_TICKS + 10_000_000, 100_000)
        ]
        shuffled = guids[:]
        random.shuffle(shuffled)

        assert sorted(shuffled) == guids

    def test_real_clock_is_non_decreasing(self):
        """실제 시계 기준 시간 조각 비감소 테스트"""
        guids = [generate_comb_guid() for _ in range(100)]
        timestamps = [get_comb_timestamp(g) for g in guids]

        assert timestamps == sorted(timestamps)

    def test_same_tick_ordered_by_random_prefix(self):
        """같은 틱에서는 랜덤 접두사로 순서 결정 테스트"""
        first = generate_comb_guid(ticks=lambda: BASE_TICKS)
        second = generate_comb_guid(ticks=lambda: BASE_TICKS)

        assert (first < second) == (first.bytes[:10] < second.bytes[:10])

    def test_comparison_operators_are_consistent(self):
        """비교 연산자 일관성 테스트"""
        earlier = generate_comb_guid(ticks=lambda: BASE_TICKS)
        later = generate_comb_guid(ticks=lambda: BASE_TICKS + 1)

        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier
        assert earlier <= earlier
        assert earlier >= earlier
        assert not earlier < earlier

    def test_suffix_outranks_prefix(self):
        """시간 접미사가 랜덤 접두사보다 우선 비교되는지 테스트"""
        low_time = CombGuid(bytes=b'\xff' * 10 + b'\x00' * 6)
        high_time = CombGuid(bytes=b'\x00' * 10 + b'\x00' * 5 + b'\x01')

        assert low_time < high_time
        # 일반 UUID 정렬은 반대
        assert uuid.UUID(bytes=low_time.bytes) > uuid.UUID(bytes=high_time.bytes)

    def test_comparison_with_plain_uuid(self):
        """일반 UUID와의 비교 테스트"""
        comb = CombGuid(bytes=b'\xff' * 10 + b'\x00' * 6)
        plain = uuid.UUID(bytes=b'\x00' * 10 + b'\x00' * 5 + b'\x01')

        assert comb < plain
        assert plain > comb

    def test_comparison_with_non_uuid(self):
        """UUID가 아닌 값과의 비교 테스트"""
        guid = generate_comb_guid()

        with pytest.raises(TypeError):
            guid < "not-a-uuid"

    def test_sort_key(self):
        """정렬 키 구성 테스트"""
        raw = bytes(range(16))
        guid = CombGuid(bytes=raw)

        assert guid.sort_key() == raw[10:] + raw[:10]


class TestCombGuidValue:
    """COMB GUID 값 타입 테스트"""

    def test_from_uuid(self):
        """UUID 감싸기 테스트"""
        original = uuid.uuid4()
        result = CombGuid.from_uuid(original)

        assert isinstance(result, CombGuid)
        assert result == original
        assert hash(result) == hash(original)

    def test_from_uuid_string(self):
        """UUID 문자열 감싸기 테스트"""
        value = "550e8400-e29b-41d4-a716-446655440000"
        result = CombGuid.from_uuid(value)

        assert str(result) == value

    def test_from_uuid_invalid_string(self):
        """잘못된 문자열 테스트"""
        with pytest.raises(ValueError):
            CombGuid.from_uuid("invalid-uuid")

    def test_equality_and_hash(self):
        """동등성과 해시 테스트"""
        guid = generate_comb_guid()
        same = CombGuid(str(guid))

        assert guid == same
        assert len({guid, same}) == 1

    def test_immutable(self):
        """불변성 테스트"""
        guid = generate_comb_guid()

        with pytest.raises(TypeError):
            guid.int = 0


class TestIsValidUuid:
    """UUID 검증 테스트"""

    def test_valid_uuid(self):
        """유효한 UUID 테스트"""
        assert is_valid_uuid(str(generate_comb_guid())) is True
        assert is_valid_uuid("550e8400-e29b-41d4-a716-446655440000") is True

    def test_invalid_uuid(self):
        """유효하지 않은 UUID 테스트"""
        assert is_valid_uuid("invalid-uuid") is False
        assert is_valid_uuid("") is False
        assert is_valid_uuid("550e8400-e29b-41d4-a716") is False
