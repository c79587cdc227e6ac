"""Terminal playback of a streamed completion."""
import sys
import time
from typing import Callable, TextIO
from ..modes import get_theme
from .reveal import ResponseViewer, char_schedule
from .session import SessionState, TherapySession

RESET = '\033[0m'
BOLD = '\033[1m'
DIM = '\033[2m'


class TerminalPlayer:
    """Types each line of the completion out with the mode's colour and pacing."""

    def __init__(
        self,
        session: TherapySession,
        out: TextIO = sys.stdout,
        sleep: Callable[[float], None] = time.sleep,
        poll_interval: float = 0.05
    ):
        self.session = session
        self.out = out
        self.sleep = sleep
        self.poll_interval = poll_interval

    def render_line(self, viewer: ResponseViewer, color: str) -> float:
        """Type out the current line. Returns the seconds spent sleeping."""
        line = viewer.current_line
        spent = 0.0
        self.out.write(f"{color}{BOLD}")
        for char, _ in char_schedule(line, viewer.timing):
            self.out.write(char)
            self.out.flush()
            self.sleep(viewer.timing.char_stagger)
            spent += viewer.timing.char_stagger
        self.out.write(f"{RESET}\n")
        self.sleep(viewer.timing.char_duration)
        return spent + viewer.timing.char_duration

    def render_indicators(self, viewer: ResponseViewer):
        dots = " ".join("●" if active else "○" for active in viewer.indicators())
        self.out.write(f"{DIM}{dots}{RESET}\n\n")
        self.out.flush()

    def play(self) -> str:
        """
        Play the completion until the stream ends and every line is shown.

        Returns:
            The completion as played
        """
        if self.session.state is not SessionState.VIEW_RESPONSE:
            raise RuntimeError("Nothing to play before a technology is submitted")

        theme = get_theme(self.session.mode)
        viewer = ResponseViewer(theme.timing)
        rendered = -1

        while True:
            text, finished = self.session.snapshot()
            viewer.update(text, finished)

            if viewer.index != rendered and viewer.is_line_complete(viewer.index):
                spent = self.render_line(viewer, theme.ansi_color)
                self.render_indicators(viewer)
                rendered = viewer.index
                viewer.tick(spent)
                continue

            if finished and (not viewer.lines or (viewer.index == rendered and not viewer.has_next())):
                break

            # The viewer decides when the pause is over and the next line is due
            self.sleep(self.poll_interval)
            viewer.tick(self.poll_interval)

        return text
