import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.core.logger import get_logger
from backend.core.settings import Settings, get_settings
from backend.app.routes_fibonacci import router as fibonacci_router
from backend.service.fibonacci_service import SharedCursor

# === ЛОГГЕР ===
log = get_logger("main")


def lift_int_digits_limit() -> None:
    # Python 3.11+ по умолчанию не переводит в строку int длиннее 4300 цифр,
    # а F(n) перерастает этот предел около n = 20600.
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Fibonacci Cursor")

    # === CORS ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === ОБЩИЙ КУРСОР ===
    # Один на процесс, после рестарта снова с нуля
    app.state.cursor = SharedCursor()
    app.state.settings = settings

    @app.on_event("startup")
    async def startup_event():
        lift_int_digits_limit()
        position, value = app.state.cursor.snapshot()
        log.info("🚀 Fibonacci cursor has started")
        log.info(f"ENV FIB_API_PREFIX: {settings.api_prefix or '/'}")
        log.info(f"✅ Курсор на позиции {position} (значение {value})")

    # === РОУТЫ ===
    app.include_router(fibonacci_router, prefix=settings.api_prefix)

    return app


app = create_app()
