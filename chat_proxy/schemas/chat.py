"""
채팅 API 스키마

요청 바디는 그대로 되돌려주므로 검증 모델 대신 JSON 값으로 보관한다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MESSAGE_REQUIRED = "Message is required"
GENERATION_FAILED = "Error generating content"
HEALTH_CHECK_OK = "Health check successful"


class DebugInfo(BaseModel):
    """채팅 응답에 포함되는 모델 설정 정보"""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_name: str = Field(..., alias="MODEL_NAME", description="Gemini 모델 이름")
    project: str | None = Field(None, description="Google Cloud 프로젝트 ID")
    location: str = Field(..., description="Vertex AI 리전")
    model_provider: str = Field(..., alias="modelProvider", description="선택된 백엔드")


class HealthResponse(BaseModel):
    """GET / 응답"""

    message: str = Field(HEALTH_CHECK_OK, description="상태 메시지")
    request: Any = Field(default_factory=dict, description="요청 바디 에코")


class ChatReplyResponse(BaseModel):
    """POST / 성공 응답"""

    reply: str = Field(..., description="모델 응답 텍스트")
    request: Any = Field(..., description="요청 바디 에코")
    debug: DebugInfo | None = Field(None, description="모델 설정 정보")


class ErrorResponse(BaseModel):
    """에러 응답"""

    error: str = Field(..., description="에러 요약")
    details: str | None = Field(None, description="상세 에러 내용")
