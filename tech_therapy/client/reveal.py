"""Progressive reveal of a streamed completion, one line at a time."""
from typing import List, Tuple
from ..modes import AnimationTiming

# abs(offset px) * abs(velocity px/s) a drag needs to count as a swipe
SWIPE_CONFIDENCE_THRESHOLD = 10000


def split_lines(text: str) -> List[str]:
    """Split a completion into stripped, non-blank lines."""
    return [line.strip() for line in text.split("\n") if line.strip()]


def char_schedule(line: str, timing: AnimationTiming) -> List[Tuple[str, float]]:
    """
    Compute when each character of a line starts fading in.

    Args:
        line: Line to reveal
        timing: Pacing of the current mode

    Returns:
        (character, delay in seconds from the start of the line) pairs
    """
    return [(char, index * timing.char_stagger) for index, char in enumerate(line)]


def line_duration(line: str, timing: AnimationTiming) -> float:
    """Seconds from a line's first character until the viewer may move on."""
    if not line:
        return timing.line_pause
    return (len(line) - 1) * timing.char_stagger + timing.char_duration + timing.line_pause


class ResponseViewer:
    """
    Swipeable viewer over the lines of a growing completion.

    Shows one line at a time. ``tick`` advances automatically once the
    current line has been on screen for its duration and a following line
    exists; ``next``/``previous``/``go_to``/``swipe`` navigate by hand.
    Navigation only lands on complete lines, so a line still being
    streamed is never put on screen half written.
    """

    def __init__(self, timing: AnimationTiming):
        self.timing = timing
        self.lines: List[str] = []
        self.index = 0
        self.elapsed = 0.0
        self.finished = False
        self._complete_count = 0

    def update(self, text: str, finished: bool = False):
        """
        Refresh the lines from the completion received so far.

        Args:
            text: Completion so far
            finished: Whether the stream has ended
        """
        self.lines = split_lines(text)
        self.finished = finished
        if finished:
            self._complete_count = len(self.lines)
        else:
            # Only lines followed by a newline are final
            self._complete_count = len(split_lines(text[:text.rfind("\n") + 1]))
        if self.index >= len(self.lines):
            self.index = max(len(self.lines) - 1, 0)

    def reset(self):
        self.lines = []
        self.index = 0
        self.elapsed = 0.0
        self.finished = False
        self._complete_count = 0

    @property
    def current_line(self) -> str:
        return self.lines[self.index] if self.lines else ""

    def is_line_complete(self, index: int) -> bool:
        return 0 <= index < self._complete_count

    def has_next(self) -> bool:
        return self.is_line_complete(self.index + 1)

    def go_to(self, index: int) -> bool:
        """Jump to a line (position dot click). Returns False if not complete yet."""
        if not self.is_line_complete(index):
            return False
        if index != self.index:
            self.index = index
            self.elapsed = 0.0
        return True

    def next(self) -> bool:
        return self.has_next() and self.go_to(self.index + 1)

    def previous(self) -> bool:
        return self.index > 0 and self.go_to(self.index - 1)

    def swipe(self, offset: float, velocity: float) -> bool:
        """
        Handle the end of a horizontal drag.

        Dragging left (negative offset) moves to the next line, dragging
        right to the previous one, when the swipe is strong enough.

        Returns:
            True if the current line changed
        """
        if abs(offset) * abs(velocity) < SWIPE_CONFIDENCE_THRESHOLD:
            return False
        return self.next() if offset < 0 else self.previous()

    def tick(self, seconds: float) -> bool:
        """
        Let time pass and auto-advance when the current line is done.

        Returns:
            True if the viewer moved to the next line
        """
        self.elapsed += seconds
        if self.elapsed >= line_duration(self.current_line, self.timing) and self.has_next():
            return self.next()
        return False

    def indicators(self) -> List[bool]:
        """Position dots, True for the line on screen."""
        return [index == self.index for index in range(len(self.lines))]
