"""
구조화된 로깅 설정
"""

import logging
import sys
import structlog
from typing import Any, Dict
from structlog.types import Processor

from .config import settings


# 라이브러리 로거: 애플리케이션이 핸들러를 설정하기 전에는 아무것도 출력하지 않음
logging.getLogger("vaultprime").addHandler(logging.NullHandler())


def setup_logging() -> None:
    """
    로깅 설정 초기화

    라이브러리 자체는 호출하지 않습니다. 로그를 보려는 애플리케이션이
    시작 시점에 한 번 호출합니다.
    """

    # 로그 레벨 설정
    log_level = settings.log_level.upper()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level, logging.INFO),
    )

    # 프로세서 체인 구성
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # 개발 환경에서는 컬러 출력, 프로덕션에서는 JSON
    if settings.debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    # structlog 설정
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거 인스턴스 반환

    표준 logging 로거를 감싸므로 출력 여부는 logging 레벨과 핸들러가 결정합니다.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def log_function_call(func_name: str, **kwargs: Any) -> Dict[str, Any]:
    """함수 호출 로그용 컨텍스트 생성"""
    return {
        "function": func_name,
        "parameters": kwargs,
        "log_event": "function_call"
    }
