"""
날짜/시간 처리 유틸리티

UTC 시각과 틱(tick) 값 사이의 변환 함수들을 제공합니다.
틱은 0001-01-01T00:00:00Z 부터 경과한 100 나노초 단위의 정수입니다.
"""

from datetime import datetime, timezone, timedelta


# 틱 기준 시각과 단위
TICKS_EPOCH = datetime(1, 1, 1, tzinfo=timezone.utc)
TICKS_PER_MICROSECOND = 10
TICKS_PER_SECOND = 10_000_000


def utc_now() -> datetime:
    """
    현재 UTC 시간을 반환합니다.

    Returns:
        datetime: UTC 시간대의 현재 시간
    """
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """
    datetime 객체를 UTC로 변환합니다.

    Args:
        dt: 변환할 datetime 객체

    Returns:
        datetime: UTC로 변환된 datetime 객체
    """
    if dt.tzinfo is None:
        # naive datetime은 UTC로 가정
        return dt.replace(tzinfo=timezone.utc)
    else:
        return dt.astimezone(timezone.utc)


def datetime_to_ticks(dt: datetime) -> int:
    """
    datetime 객체를 틱 값으로 변환합니다.

    Args:
        dt: 변환할 datetime 객체 (naive인 경우 UTC로 간주)

    Returns:
        int: 0001-01-01 UTC 기준 100 나노초 틱
    """
    delta = to_utc(dt) - TICKS_EPOCH
    seconds = delta.days * 86400 + delta.seconds
    return seconds * TICKS_PER_SECOND + delta.microseconds * TICKS_PER_MICROSECOND


def ticks_to_datetime(ticks: int) -> datetime:
    """
    틱 값을 UTC datetime 객체로 변환합니다.
    datetime의 해상도가 마이크로초이므로 100 나노초 단위는 버려집니다.

    Args:
        ticks: 0001-01-01 UTC 기준 100 나노초 틱

    Returns:
        datetime: UTC 시간대의 datetime 객체
    """
    return TICKS_EPOCH + timedelta(microseconds=ticks // TICKS_PER_MICROSECOND)


def utc_now_ticks() -> int:
    """현재 UTC 시각의 틱 값을 반환합니다."""
    return datetime_to_ticks(utc_now())
