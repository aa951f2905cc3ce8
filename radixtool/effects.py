import time
from typing import Callable

from rich.console import Console
from rich.live import Live
from rich.text import Text


def typewriter_effect(
    console: Console,
    text: str,
    delay: float = 0.05,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    for char in text:
        console.print(char, end="", markup=False, highlight=False)
        if delay > 0:
            sleep(delay)
    console.print()


def fade_out_effect(
    console: Console,
    text: str,
    steps: int = 10,
    delay: float = 0.1,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Redraw ``text`` in place, dimming it from white to black, then clear it."""
    with Live(console=console, transient=True, auto_refresh=False) as live:
        for step in range(steps):
            level = 255 - (255 * step) // max(steps - 1, 1)
            live.update(Text(text, style=f"rgb({level},{level},{level})"), refresh=True)
            if delay > 0:
                sleep(delay)
