"""
비밀번호 유틸리티

암호학적으로 안전한 비밀번호 생성과 간단한 강도 평가 함수들을 제공합니다.
"""

import secrets
import string
from enum import IntEnum
from typing import List, Optional

from vaultprime.core.config import settings, MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH
from vaultprime.core.exceptions import (
    EmptyCharacterUniverseError,
    InvalidLengthError,
    handle_validation_error,
)
from vaultprime.core.logging import get_logger, log_function_call


logger = get_logger(__name__)


# 문자 집합
LOWERCASE_CHARACTERS = string.ascii_lowercase
UPPERCASE_CHARACTERS = string.ascii_uppercase
NUMERIC_CHARACTERS = string.digits
SPECIAL_CHARACTERS = "!#$%&*@\\"
AMBIGUOUS_CHARACTERS = "l1O0"


class PasswordStrength(IntEnum):
    """비밀번호 강도 (값이 클수록 강함)"""
    WEAK = 0
    MEDIUM = 1
    STRONG = 2
    VERY_STRONG = 3


def build_character_universe(
    include_lowercase: bool = True,
    include_uppercase: bool = True,
    include_numeric: bool = True,
    include_special: bool = True,
    exclude_ambiguous: bool = True
) -> str:
    """
    비밀번호 생성에 사용할 문자 집합을 구성합니다.

    Args:
        include_lowercase: 소문자 포함 여부
        include_uppercase: 대문자 포함 여부
        include_numeric: 숫자 포함 여부
        include_special: 특수문자 포함 여부
        exclude_ambiguous: 혼동되기 쉬운 문자(l, 1, O, 0) 제외 여부

    Returns:
        str: 중복 없는 문자 집합

    Raises:
        EmptyCharacterUniverseError: 선택된 문자가 하나도 없는 경우
    """
    flags = {
        "include_lowercase": include_lowercase,
        "include_uppercase": include_uppercase,
        "include_numeric": include_numeric,
        "include_special": include_special,
        "exclude_ambiguous": exclude_ambiguous,
    }

    classes = [
        (include_lowercase, LOWERCASE_CHARACTERS),
        (include_uppercase, UPPERCASE_CHARACTERS),
        (include_numeric, NUMERIC_CHARACTERS),
        (include_special, SPECIAL_CHARACTERS),
    ]
    characters = "".join(chars for selected, chars in classes if selected)

    if not characters:
        raise EmptyCharacterUniverseError(
            message="최소 한 가지 문자 유형을 선택해야 합니다",
            details=flags
        )

    if exclude_ambiguous:
        characters = "".join(c for c in characters if c not in AMBIGUOUS_CHARACTERS)

    # 선택 순서를 유지하며 중복 제거
    universe = "".join(dict.fromkeys(characters))

    if not universe:
        raise EmptyCharacterUniverseError(
            message="혼동 문자 제외 후 사용할 수 있는 문자가 없습니다",
            details=flags
        )

    return universe


def _secure_shuffle(items: List[str]) -> None:
    """secrets.randbelow 기반 Fisher-Yates 셔플 (제자리)"""
    for i in range(len(items) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]


def generate_password(
    length: Optional[int] = None,
    include_lowercase: bool = True,
    include_uppercase: bool = True,
    include_numeric: bool = True,
    include_special: bool = True,
    exclude_ambiguous: bool = True
) -> str:
    """
    규칙에 맞는 랜덤 비밀번호를 생성합니다.

    각 문자는 문자 집합에서 균등하게 독립적으로 뽑히며, 완성된 순서는
    다시 한 번 균등하게 섞입니다. 모든 난수는 secrets 모듈에서 가져옵니다.

    Args:
        length: 비밀번호 길이, 8 이상 128 이하 (None인 경우 설정 기본값)
        include_lowercase: 소문자 포함 여부
        include_uppercase: 대문자 포함 여부
        include_numeric: 숫자 포함 여부
        include_special: 특수문자 포함 여부
        exclude_ambiguous: 혼동되기 쉬운 문자(l, 1, O, 0) 제외 여부

    Returns:
        str: 생성된 비밀번호

    Raises:
        InvalidLengthError: 길이가 허용 범위를 벗어난 경우
        EmptyCharacterUniverseError: 사용할 수 있는 문자가 없는 경우
    """
    if length is None:
        length = settings.password_default_length

    if length < MIN_PASSWORD_LENGTH or length > MAX_PASSWORD_LENGTH:
        raise handle_validation_error(
            field="length",
            value=length,
            constraint=f"비밀번호 길이는 {MIN_PASSWORD_LENGTH} 이상 {MAX_PASSWORD_LENGTH} 이하여야 합니다",
            expected=f"{MIN_PASSWORD_LENGTH}-{MAX_PASSWORD_LENGTH}",
            error_class=InvalidLengthError
        )

    universe = build_character_universe(
        include_lowercase=include_lowercase,
        include_uppercase=include_uppercase,
        include_numeric=include_numeric,
        include_special=include_special,
        exclude_ambiguous=exclude_ambiguous
    )

    password = [secrets.choice(universe) for _ in range(length)]

    # 문자 위치까지 무작위가 되도록 섞기
    _secure_shuffle(password)

    logger.debug(
        "Password generated",
        **log_function_call("generate_password", length=length, universe_size=len(universe))
    )

    return "".join(password)


def evaluate_password_strength(password: Optional[str]) -> PasswordStrength:
    """
    간단한 점수 모델로 비밀번호 강도를 평가합니다.

    길이(8 이상, 12 이상)와 문자 유형(소문자, 대문자, 숫자, 특수문자)마다
    1점씩 더해 0-2점은 WEAK, 3-4점은 MEDIUM, 5점은 STRONG, 6점은 VERY_STRONG입니다.
    휴리스틱일 뿐이며 엔트로피 계산이나 암호학적 강도 측정을 대신하지 않습니다.

    Args:
        password: 평가할 비밀번호

    Returns:
        PasswordStrength: 강도 등급
    """
    if not password:
        return PasswordStrength.WEAK

    score = 0
    if len(password) >= 8:
        score += 1
    if len(password) >= 12:
        score += 1
    if any(c.islower() for c in password):
        score += 1
    if any(c.isupper() for c in password):
        score += 1
    if any(c.isdecimal() for c in password):
        score += 1
    if any(c in SPECIAL_CHARACTERS for c in password):
        score += 1

    if score <= 2:
        return PasswordStrength.WEAK
    if score <= 4:
        return PasswordStrength.MEDIUM
    if score == 5:
        return PasswordStrength.STRONG
    return PasswordStrength.VERY_STRONG
