import asyncio
import logging
import sys

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_proxy import __version__
from chat_proxy.api.routes import chat
from chat_proxy.config.settings import Settings, get_settings
from chat_proxy.infrastructure.llm.base import BaseModelProvider
from chat_proxy.infrastructure.llm.errors import ProviderInitError
from chat_proxy.infrastructure.llm.factory import create_provider
from chat_proxy.middlewares.request_logging_middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

# ============================================================================
# 로깅 설정 (Cloud Run / 로컬 공통)
# ============================================================================


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """애플리케이션 및 uvicorn 로그를 하나의 포맷으로 stdout에 출력"""
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    level = getattr(logging, log_level.upper(), logging.INFO)

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 기존 핸들러 제거 (중복 방지)
    root_logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    root_logger.addHandler(stdout_handler)

    # uvicorn 로거도 동일하게 설정
    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.addHandler(stdout_handler)
        uvicorn_logger.setLevel(level)
        uvicorn_logger.propagate = False

    return root_logger


# ============================================================================
# FastAPI 애플리케이션
# ============================================================================


def create_app(provider: BaseModelProvider, settings: Settings) -> FastAPI:
    """초기화가 끝난 provider로 FastAPI 앱 생성"""
    app = FastAPI(
        title="Gemini Chat Proxy",
        description="채팅 메시지를 Google Gemini로 전달하는 단일 엔드포인트 프록시",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # provider는 프로세스 수명 동안 고정
    app.state.provider = provider
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(chat.router)

    return app


async def serve(settings: Settings, provider: BaseModelProvider | None = None) -> None:
    """provider 초기화 후 서버 시작

    initialize()가 성공한 뒤에만 포트를 바인딩한다.
    """
    if provider is None:
        provider = create_provider(settings)

    await provider.initialize()

    app = create_app(provider, settings)
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config)

    logger.info(f"🚀 Starting server on http://{settings.host}:{settings.port}")
    await server.serve()


def main(settings: Settings | None = None) -> None:
    """콘솔 엔트리 포인트 (``chat-proxy``)"""
    # .env 파일 로드
    load_dotenv()

    settings = settings or get_settings()
    setup_logging(settings.log_level)

    logger.info("=" * 60)
    logger.info("🔧 Gemini chat proxy starting")
    logger.info(f"   Model provider: {settings.model_provider}")
    logger.info(f"   Log level: {settings.log_level}")
    logger.info("=" * 60)

    try:
        asyncio.run(serve(settings))
    except ProviderInitError as e:
        logger.error(f"❌ Failed to initialize model provider: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
