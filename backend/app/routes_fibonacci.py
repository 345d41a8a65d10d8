from typing import Callable

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from backend.core.logger import get_logger
from backend.service.fibonacci_service import SharedCursor

router = APIRouter(tags=["fibonacci"])
log = get_logger("routes.fibonacci")


def get_cursor(request: Request) -> SharedCursor:
    """Курсор, которым владеет приложение (создаётся в ``create_app``)."""
    return request.app.state.cursor


def _respond(operation: str, step: Callable[[], int]) -> PlainTextResponse:
    # Лимит длины int -> str снимается на старте приложения
    body = str(step())
    log.debug("/%s -> %s цифр", operation, len(body))
    return PlainTextResponse(body)


@router.get("/next")
def fib_next(cursor: SharedCursor = Depends(get_cursor)):
    """Следующее число общей последовательности."""
    return _respond("next", cursor.advance)


@router.get("/previous")
def fib_previous(cursor: SharedCursor = Depends(get_cursor)):
    """Предыдущее число; на нулевой позиции всегда 0."""
    return _respond("previous", cursor.regress)


@router.get("/current")
def fib_current(cursor: SharedCursor = Depends(get_cursor)):
    return _respond("current", cursor.inspect)
