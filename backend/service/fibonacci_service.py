"""Общий курсор по последовательности Фибоначчи для эндпоинтов /next, /previous, /current."""
from __future__ import annotations

import threading
from typing import Tuple

# Начало последовательности: F(0), F(1), F(2).
# Пока предшественников меньше двух, значения берём отсюда, а не суммой.
FIB_PREFIX: Tuple[int, ...] = (0, 1, 1)
WINDOW_SIZE = len(FIB_PREFIX)


class SequenceCursor:
    """Курсор по последовательности Фибоначчи с окном из последних трёх значений.

    Храним только ``position`` и ``window`` = (F(n-2), F(n-1), F(n)) для тех
    элементов, что существуют. Шаг вперёд и шаг назад стоят O(1) по времени и
    памяти, сколько бы раз ни вызывали ``advance``. Шаг назад восстанавливает
    выпавшее значение по тождеству F(n-2) = F(n) - F(n-1).

    Класс не потокобезопасен, для общего доступа есть :class:`SharedCursor`.
    """

    def __init__(self) -> None:
        self._position = 0
        self._window: Tuple[int, ...] = FIB_PREFIX[:1]

    @property
    def position(self) -> int:
        return self._position

    @property
    def window(self) -> Tuple[int, ...]:
        return self._window

    def inspect(self) -> int:
        """Текущее значение F(position) без изменения состояния."""
        if not self._window:
            return 0
        return self._window[-1]

    def advance(self) -> int:
        """Сдвигает курсор вперёд и возвращает F(position + 1)."""
        position = self._position + 1

        if position < WINDOW_SIZE:
            window = FIB_PREFIX[: position + 1]
        else:
            # position >= 3 -> в окне ровно три значения
            _, older, newest = self._window
            window = (older, newest, older + newest)

        self._commit(position, window)
        return window[-1]

    def regress(self) -> int:
        """Сдвигает курсор назад и возвращает F(position - 1).

        На нулевой позиции ничего не делает и возвращает 0.
        """
        if self._position == 0:
            return 0

        position = self._position - 1

        if position < WINDOW_SIZE:
            window = FIB_PREFIX[: position + 1]
        else:
            oldest, older, _ = self._window
            window = (older - oldest, oldest, older)

        self._commit(position, window)
        return window[-1]

    def _commit(self, position: int, window: Tuple[int, ...]) -> None:
        # Позиция и окно меняются только вместе и только после всех вычислений
        self._position, self._window = position, window

    def __repr__(self) -> str:
        return f"SequenceCursor(position={self._position}, window_len={len(self._window)})"


class SharedCursor:
    """Один :class:`SequenceCursor` на весь процесс под ``threading.Lock``.

    Каждая операция выполняется целиком под замком, внутри только арифметика.
    Порядок операций определяется порядком захвата замка.
    """

    def __init__(self, cursor: SequenceCursor | None = None) -> None:
        self._cursor = cursor or SequenceCursor()
        self._lock = threading.Lock()

    def advance(self) -> int:
        with self._lock:
            return self._cursor.advance()

    def regress(self) -> int:
        with self._lock:
            return self._cursor.regress()

    def inspect(self) -> int:
        with self._lock:
            return self._cursor.inspect()

    def snapshot(self) -> Tuple[int, int]:
        """Согласованная пара (position, value) для логов и проверок."""
        with self._lock:
            return self._cursor.position, self._cursor.inspect()
