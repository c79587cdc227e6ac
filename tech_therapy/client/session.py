"""Client session: mode selection, technology entry and response playback."""
import threading
from enum import Enum
from typing import Callable, Iterable, Optional, Union
from ..logging_config import get_logger
from ..modes import Mode, parse_mode

logger = get_logger("tech_therapy.client.session")


class SessionStateError(RuntimeError):
    """Raised when an action is not allowed in the current state."""


class SessionState(Enum):
    SELECT_MODE = "select_mode"
    ENTER_TECH = "enter_tech"
    VIEW_RESPONSE = "view_response"


class TherapySession:
    """
    One user's pass through the app.

    The completion is filled by a single stream. Every submit and restart
    bumps a generation counter; chunks tagged with an older generation
    belong to an abandoned stream and are dropped.
    """

    def __init__(self):
        self.state = SessionState.SELECT_MODE
        self.mode: Optional[Mode] = None
        self.tech = ""
        self.completion = ""
        self.streaming = False
        self.error: Optional[Exception] = None
        self._generation = 0
        self._lock = threading.Lock()
        self._abandon: Optional[Callable[[], None]] = None
        self._worker: Optional[threading.Thread] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def failed(self) -> bool:
        return self.error is not None

    def _require(self, state: SessionState, action: str):
        if self.state is not state:
            raise SessionStateError(f"Cannot {action} while in {self.state.value}")

    def select_mode(self, mode: Union[Mode, str]) -> Mode:
        """Pick a support mode and move on to technology entry."""
        self._require(SessionState.SELECT_MODE, "select a mode")
        self.mode = parse_mode(mode)
        self.state = SessionState.ENTER_TECH
        return self.mode

    def submit(self, tech: str) -> int:
        """
        Submit the technology name and switch to the response view.

        Returns:
            Generation token to tag the chunks of this request's stream

        Raises:
            ValueError: If the technology name is blank
        """
        self._require(SessionState.ENTER_TECH, "submit")
        tech = tech.strip()
        if not tech:
            raise ValueError("Technology name must not be empty")

        with self._lock:
            self._generation += 1
            self.tech = tech
            self.completion = ""
            self.error = None
            self.streaming = True
            self.state = SessionState.VIEW_RESPONSE
            return self._generation

    def append(self, chunk: str, generation: int) -> bool:
        """Append a chunk unless it belongs to an abandoned stream."""
        with self._lock:
            if generation != self._generation or not self.streaming:
                return False
            self.completion += chunk
            return True

    def finish(self, generation: int, error: Optional[Exception] = None):
        """Mark the stream of the given generation as ended."""
        with self._lock:
            if generation != self._generation:
                return
            self.streaming = False
            self.error = error
            self._abandon = None

    def snapshot(self) -> tuple[str, bool]:
        """Get the completion so far and whether the stream has ended."""
        with self._lock:
            return self.completion, not self.streaming

    def consume(self, chunks: Iterable[str], generation: Optional[int] = None) -> str:
        """
        Accumulate a whole stream into the completion.

        Args:
            chunks: Text chunks in arrival order
            generation: Token from submit() (default: current generation)

        Returns:
            The completion once the stream ends

        Raises:
            Exception: Whatever the stream raised, after marking the session failed
        """
        if generation is None:
            generation = self._generation
        try:
            for chunk in chunks:
                if not self.append(chunk, generation):
                    logger.debug(f"Dropping chunks of abandoned stream {generation}")
                    break
        except Exception as e:
            self.finish(generation, error=e)
            raise
        self.finish(generation)
        return self.completion

    def start_stream(self, client) -> threading.Thread:
        """
        Read the completion for the submitted request on a worker thread.

        Args:
            client: TherapyClient (anything with stream(tech, mode) and close())

        Returns:
            The started worker thread
        """
        self._require(SessionState.VIEW_RESPONSE, "start streaming")
        generation = self._generation
        self._abandon = client.close

        def run():
            try:
                self.consume(client.stream(self.tech, self.mode), generation)
            except Exception as e:
                if generation == self._generation:
                    logger.error(f"Stream failed: {e}")
                else:
                    logger.debug(f"Abandoned stream {generation} ended with: {e}")

        self._worker = threading.Thread(target=run, name=f"therapy-stream-{generation}", daemon=True)
        self._worker.start()
        return self._worker

    def wait(self, timeout: Optional[float] = None):
        """Block until the worker thread (if any) is done."""
        if self._worker is not None:
            self._worker.join(timeout)

    def restart(self):
        """Drop the completion, abandon any in-flight stream and go back to mode selection."""
        with self._lock:
            abandon = self._abandon
            self._generation += 1
            self._abandon = None
            self.state = SessionState.SELECT_MODE
            self.mode = None
            self.tech = ""
            self.completion = ""
            self.streaming = False
            self.error = None

        if abandon is not None:
            logger.info("Abandoning in-flight stream")
            abandon()
