"""
애플리케이션 예외 클래스 정의
"""

from typing import Any, Dict, Type


class BaseApplicationError(Exception):
    """애플리케이션 기본 예외 클래스"""

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """예외를 딕셔너리로 변환"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(BaseApplicationError):
    """검증 오류"""
    pass


class ConfigurationError(BaseApplicationError):
    """설정 오류"""
    pass


# 도메인별 예외 클래스들

class SecretGenerationError(BaseApplicationError):
    """비밀번호 생성 관련 오류"""
    pass


class InvalidLengthError(SecretGenerationError, ValidationError):
    """허용 범위를 벗어난 비밀번호 길이"""
    pass


class EmptyCharacterUniverseError(SecretGenerationError, ConfigurationError):
    """선택된 문자 집합이 비어 있음"""
    pass


def handle_validation_error(
    field: str,
    value: Any,
    constraint: str,
    expected: str = None,
    error_class: Type[ValidationError] = ValidationError
) -> ValidationError:
    """검증 오류를 생성하는 헬퍼 함수"""

    details = {
        "field": field,
        "value": str(value),
        "constraint": constraint
    }

    if expected:
        details["expected"] = expected

    message = f"필드 '{field}' 검증 실패: {constraint}"

    return error_class(
        message=message,
        details=details
    )
