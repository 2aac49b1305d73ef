"""
채팅 프록시 API

GET  /  - 헬스 체크 (요청 body echo)
POST /  - 사용자 메시지를 모델에 전달하고 응답 반환
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from chat_proxy.config.dependencies import get_app_settings, get_provider
from chat_proxy.config.settings import Settings
from chat_proxy.infrastructure.llm.base import BaseModelProvider
from chat_proxy.schemas.chat import (
    GENERATION_FAILED,
    MESSAGE_REQUIRED,
    ChatReplyResponse,
    DebugInfo,
    ErrorResponse,
    HealthResponse,
)
from chat_proxy.utils.log_sanitizer import preview, safe_info

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Chat"])


def is_json_content_type(content_type: str | None) -> bool:
    """application/json 또는 */*+json 미디어 타입인지 확인"""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Any:
    """
    요청 body를 JSON으로 파싱합니다.

    JSON 객체 또는 배열만 그대로 반환하고, 그 외(JSON이 아닌 Content-Type,
    빈 body, 잘못된 JSON, 스칼라 값)는 빈 객체로 처리합니다.
    """
    if not is_json_content_type(request.headers.get("content-type")):
        return {}

    raw = await request.body()
    if not raw:
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        logger.warning("Request body is not valid JSON; treating as empty object")
        return {}
    return payload if isinstance(payload, (dict, list)) else {}


def extract_message(payload: Any) -> str | None:
    """body가 객체이고 message가 공백이 아닌 문자열일 때만 반환"""
    if not isinstance(payload, dict):
        return None
    message = payload.get("message")
    if not isinstance(message, str) or not message.strip():
        return None
    return message


def build_debug_info(settings: Settings) -> DebugInfo:
    return DebugInfo(
        model_name=settings.model_name,
        project=settings.project_id,
        location=settings.region,
        model_provider=settings.model_provider,
    )


@router.get("/", response_model=HealthResponse, summary="헬스 체크")
async def health_check(request: Request):
    """
    헬스 체크 엔드포인트

    모델 provider를 호출하지 않으며, 전달된 body를 그대로 돌려줍니다.
    """
    payload = await read_json_body(request)
    return HealthResponse(request=payload)


@router.post(
    "/",
    response_model=ChatReplyResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Message is required"},
        500: {"model": ErrorResponse, "description": "Error generating content"},
    },
    summary="채팅 메시지 전달",
)
async def chat(
    request: Request,
    provider: BaseModelProvider = Depends(get_provider),
    settings: Settings = Depends(get_app_settings),
):
    """
    사용자 메시지를 모델에 단일 턴 프롬프트로 전달합니다.

    **Request body:** `{"message": "..."}`
    """
    payload = await read_json_body(request)
    user_message = extract_message(payload)

    if user_message is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=MESSAGE_REQUIRED).model_dump(exclude_none=True),
        )

    safe_info(logger, "💬 Chat request: %s", preview(user_message))

    try:
        reply = await provider.generate(user_message)
    except Exception as e:
        logger.exception("Error generating content")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=GENERATION_FAILED, details=str(e)).model_dump(),
        )

    safe_info(logger, "✅ Chat reply: %s", preview(reply))

    response = ChatReplyResponse(reply=reply, request=payload)
    if settings.expose_debug_info:
        response.debug = build_debug_info(settings)
    return JSONResponse(content=response.model_dump(by_alias=True, exclude_unset=True))
