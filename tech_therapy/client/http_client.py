"""HTTP client for the therapy streaming endpoint."""
from typing import Iterator, Optional, Union
import requests
from ..config import Config
from ..logging_config import get_logger
from ..modes import Mode

logger = get_logger("tech_therapy.client.http")


class ApiError(Exception):
    """Raised when the therapy endpoint cannot deliver a completion."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidModeError(ApiError):
    """Raised when the endpoint rejects the mode (HTTP 400)."""


class TherapyClient:
    """Streams completions from ``POST /api/therapy``."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        connect_timeout: Optional[float] = None
    ):
        """
        Initialize the client.

        Args:
            base_url: API base URL (default: from THERAPY_API_URL env var)
            session: requests session to reuse
            connect_timeout: Seconds to wait for the connection (reads never time out)
        """
        self.base_url = (base_url or Config.get_api_url()).rstrip("/")
        self.http = session or requests.Session()
        self.connect_timeout = connect_timeout or Config.CLIENT_CONNECT_TIMEOUT
        self._response = None

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/api/therapy"

    def stream(self, tech: str, mode: Union[Mode, str]) -> Iterator[str]:
        """
        Request a completion and yield it as it arrives.

        Args:
            tech: Technology the user is frustrated with
            mode: Support mode

        Yields:
            Decoded text chunks in arrival order

        Raises:
            InvalidModeError: If the endpoint answers 400
            ApiError: On any other non-OK status or a broken stream
        """
        mode_value = mode.value if isinstance(mode, Mode) else mode
        payload = {"prompt": {"tech": tech, "mode": mode_value}}
        logger.info(f"POST {self.endpoint} mode={mode_value}")

        try:
            response = self.http.post(
                self.endpoint,
                json=payload,
                stream=True,
                timeout=(self.connect_timeout, None)
            )
        except requests.RequestException as e:
            raise ApiError(f"Request failed: {e}") from e

        self._response = response
        try:
            if response.status_code == 400:
                raise InvalidModeError(response.text.strip() or "Invalid mode", status_code=400)
            if not response.ok:
                raise ApiError(f"Therapy endpoint returned {response.status_code}", status_code=response.status_code)

            response.encoding = "utf-8"
            chunk_count = 0
            for chunk in response.iter_content(chunk_size=None, decode_unicode=True):
                if chunk:
                    chunk_count += 1
                    yield chunk
            logger.info(f"Stream finished after {chunk_count} chunks")

        except requests.RequestException as e:
            raise ApiError(f"Stream broken: {e}") from e
        finally:
            response.close()
            self._response = None

    def close(self):
        """Abandon the in-flight stream, if any."""
        # stream() clears _response from the worker thread
        response = self._response
        if response is not None:
            logger.debug("Closing in-flight stream")
            response.close()
