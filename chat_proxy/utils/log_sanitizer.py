"""
사용자 입력 로그 인젝션 방지

채팅 메시지와 모델 응답은 이 헬퍼를 거쳐 로깅하여
CR/LF가 포함된 메시지가 가짜 로그 라인을 만들지 못하게 한다.
"""

import logging
import re

_NEWLINES = re.compile(r"[\r\n]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")

PREVIEW_LENGTH = 120


def sanitize_log_input(value: object) -> str:
    """개행은 공백으로 치환하고 나머지 제어 문자는 제거"""
    if value is None:
        return "None"
    return _CONTROL_CHARS.sub("", _NEWLINES.sub(" ", str(value)))


def preview(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """로깅용으로 텍스트를 자르고 잘린 길이를 표시"""
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... (+{len(text) - limit} chars)"


def safe_log(logger: logging.Logger, level: int, msg: str, *args: object) -> None:
    """모든 인자를 정제한 뒤 로깅

    사용 예:
        safe_log(logger, logging.INFO, "Chat request: %s", message)
    """
    logger.log(level, msg, *(sanitize_log_input(arg) for arg in args))


def safe_info(logger: logging.Logger, msg: str, *args: object) -> None:
    safe_log(logger, logging.INFO, msg, *args)
