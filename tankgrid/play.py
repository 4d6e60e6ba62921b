"""Timed game events delivered over queues."""

from __future__ import annotations

import enum
import queue
import threading
from dataclasses import dataclass


class AppMessage(enum.Enum):
    """Events exchanged between the timer threads and the game loop."""

    SPAWN_ENEMY = enum.auto()
    MOVE_ENEMIES = enum.auto()
    MOVE_SHOOT = enum.auto()
    SHOOT = enum.auto()
    END = enum.auto()


@dataclass(frozen=True)
class _Timer:
    message: AppMessage
    first: float
    period: float


_SCHEDULE = (
    _Timer(AppMessage.SPAWN_ENEMY, 0.0, 10.0),
    _Timer(AppMessage.MOVE_ENEMIES, 3.0, 1.0),
    _Timer(AppMessage.SHOOT, 7.5, 4.5),
    _Timer(AppMessage.MOVE_SHOOT, 5.5, 1.5),
)


def _run_timer(timer: _Timer, sink: queue.Queue, stop: threading.Event) -> None:
    if stop.wait(timer.first):
        return
    while True:
        sink.put(timer.message)
        if stop.wait(timer.period):
            return


def send_message(tx: queue.Queue, rx: queue.Queue) -> None:
    """Forward timed events to ``tx`` until anything arrives on ``rx``.

    Spawning fires at once and every 10 s, enemy moves from 3 s every second,
    shots from 7.5 s every 4.5 s and shell moves from 5.5 s every 1.5 s.
    The check for a stop request happens as each event arrives.
    """
    events: queue.Queue = queue.Queue()
    stop = threading.Event()
    workers = [
        threading.Thread(target=_run_timer, args=(timer, events, stop), daemon=True)
        for timer in _SCHEDULE
    ]
    for worker in workers:
        worker.start()
    try:
        while True:
            message = events.get()
            try:
                rx.get_nowait()
            except queue.Empty:
                tx.put(message)
            else:
                break
    finally:
        stop.set()