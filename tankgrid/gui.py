"""Game session state and a window to play it in."""

from __future__ import annotations

import queue
import threading

from tankgrid.executor import CellKind, Executors, MapPlace
from tankgrid.play import AppMessage, send_message

_ARROWS = {"E": ">", "S": "v", "W": "<", "N": "^"}
_TICKS_PER_EVENT = 10

_COLOURS = {
    CellKind.PLAYER: "green",
    CellKind.ENEMY: "red",
    CellKind.SHOOT: "brown",
    CellKind.PLACE: "black",
    CellKind.BLOCK: "black",
}


def cell_glyph(cell: MapPlace) -> str:
    """Return the character that shows ``cell`` on the board."""
    if cell.kind is CellKind.PLACE:
        return "+"
    if cell.kind is CellKind.BLOCK:
        return "#"
    if cell.kind is CellKind.SHOOT:
        return "·"
    _, _, heading = cell.executor.query()
    return _ARROWS.get(heading, "N")


class GameSession:
    """Everything the window needs: the board, the event feed and dialog state."""

    def __init__(self, board: Executors | None = None) -> None:
        self.map = board if board is not None else Executors()
        self.messages: queue.Queue = queue.Queue()
        self.started = False
        self.is_lose = False
        self.timer = 0
        self.show_confirmation_dialog = False
        self.allowed_to_close = False
        self._end_queue: queue.Queue | None = None
        self._feeder: threading.Thread | None = None

    def start(self) -> None:
        """Begin feeding timed events; later calls do nothing."""
        if self.started:
            return
        self.started = True
        self._end_queue = queue.Queue()
        self._feeder = threading.Thread(
            target=send_message,
            args=(self.messages, self._end_queue),
            daemon=True,
        )
        self._feeder.start()

    def tick(self) -> AppMessage | None:
        """Advance one frame; every tenth frame apply one pending event.

        Returns the event that was applied, if any.
        """
        if self.map.is_lose:
            if self._end_queue is not None:
                self._end_queue.put(AppMessage.END)
            self.map.is_lose = False
            self.is_lose = True

        self.timer += 1
        if self.timer < _TICKS_PER_EVENT:
            return None
        self.timer = 0
        try:
            message = self.messages.get_nowait()
        except queue.Empty:
            return None
        handlers = {
            AppMessage.SPAWN_ENEMY: self.map.spawn,
            AppMessage.MOVE_ENEMIES: self.map.enemy_move,
            AppMessage.SHOOT: self.map.shoot,
            AppMessage.MOVE_SHOOT: self.map.shoot_move,
        }
        handler = handlers.get(message)
        if handler is None:
            return None
        handler()
        return message

    def player_command(self, cmd: str) -> None:
        """Pass ``L``, ``M`` or ``R`` to the player once the game has started."""
        if self.started:
            self.map.player_move(cmd)

    def request_close(self) -> bool:
        """Return whether closing may go ahead; if not, ask for confirmation."""
        if self.allowed_to_close:
            return True
        self.show_confirmation_dialog = True
        return False

    def answer_close(self, confirmed: bool) -> bool:
        """Record the answer to the close dialog and return whether to close."""
        self.show_confirmation_dialog = False
        self.allowed_to_close = bool(confirmed)
        return self.allowed_to_close


def create_gui() -> None:
    """Open the game window and run it until it is closed."""
    import tkinter as tk
    from tkinter import messagebox

    session = GameSession()
    root = tk.Tk()
    root.title("CAR")
    root.geometry("1280x720")

    header = tk.Frame(root)
    header.pack(pady=10)
    tk.Label(header, text="A Simple GUI", fg="red", font=("TkDefaultFont", 40)).pack(
        side=tk.LEFT, padx=20
    )
    tk.Button(
        header, text="Start", font=("TkDefaultFont", 24), command=session.start
    ).pack(side=tk.LEFT, padx=20)
    point_label = tk.Label(header, fg="red", font=("TkDefaultFont", 40))
    point_label.pack(side=tk.LEFT, padx=20)
    lose_label = tk.Label(header, fg="red", font=("TkDefaultFont", 40))
    lose_label.pack(side=tk.LEFT)

    board = tk.Frame(root)
    board.pack(pady=10)
    labels = [
        [
            tk.Label(board, width=2, font=("TkFixedFont", 20))
            for _ in row
        ]
        for row in session.map.grid
    ]
    for r, row in enumerate(labels):
        for c, label in enumerate(row):
            label.grid(row=r, column=c, padx=5, pady=2)

    controls = tk.Frame(root)
    controls.pack(pady=10)
    for cmd in ("L", "M", "R"):
        tk.Button(
            controls,
            text=cmd,
            font=("TkDefaultFont", 24),
            width=12,
            height=2,
            command=lambda cmd=cmd: session.player_command(cmd),
        ).pack(side=tk.LEFT, padx=30)

    def on_close() -> None:
        if session.request_close():
            root.destroy()
            return
        confirmed = messagebox.askyesno("Do you want to close?", "Do you want to close?")
        if session.answer_close(confirmed):
            root.destroy()

    def refresh() -> None:
        session.tick()
        point_label.config(text=f"Point:{session.map.point}")
        lose_label.config(text="  Game Over" if session.is_lose else "")
        for row_cells, row_labels in zip(session.map.grid, labels):
            for cell, label in zip(row_cells, row_labels):
                label.config(text=cell_glyph(cell), fg=_COLOURS[cell.kind])
        root.after(16, refresh)

    root.protocol("WM_DELETE_WINDOW", on_close)
    refresh()
    root.mainloop()


def main(argv: list[str] | None = None) -> int:
    """Start the game window."""
    create_gui()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())