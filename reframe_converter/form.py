"""
Coordinate transformation form

``CoordinateTransformClient`` owns the view state of one form instance:
the selected direction, the raw easting/northing text, the last
transformed pair and at most one error message.

Each ``transform()`` call takes a new request token. A completion is only
applied while its token is still the latest one, so a slow response can
never overwrite the outcome of a later call.
"""

import logging
import threading
from typing import Optional

from .client import ReframeClient
from .exceptions import CoordinateValidationError, TransformError
from .schemas import Direction, FormState

logger = logging.getLogger(__name__)


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


class CoordinateTransformClient:
    def __init__(self, reframe: ReframeClient, state: Optional[FormState] = None):
        self.reframe = reframe
        self.state = state.model_copy() if state is not None else FormState()
        self._lock = threading.Lock()
        self._latest_token = 0

    def set_direction(self, value) -> None:
        self.state.direction = Direction(value)

    def set_easting(self, text: str) -> None:
        self.state.easting = text

    def set_northing(self, text: str) -> None:
        self.state.northing = text

    def _next_token(self) -> int:
        with self._lock:
            self._latest_token += 1
            return self._latest_token

    def _is_current(self, token: int) -> bool:
        return token == self._latest_token

    def transform(self) -> FormState:
        """Validate the inputs, query REFRAME once and update the state.

        Errors never propagate: they end up as ``state.error``. Output
        fields are only replaced by a successful response.
        """
        token = self._next_token()
        self.state.error = None

        direction = self.state.direction
        easting, northing = self.state.easting, self.state.northing

        if _is_blank(easting) or _is_blank(northing):
            logger.info(f"Transformation rejected: easting={easting!r}, northing={northing!r}")
            self.state.error = CoordinateValidationError.user_message
            return self.state

        try:
            result = self.reframe.transform(direction, easting, northing)
        except TransformError as e:
            with self._lock:
                if not self._is_current(token):
                    logger.info(f"Dropping stale failure of request {token}: {e.message}")
                    return self.state
                logger.warning(f"Transformation {direction.value} failed: {e.message}")
                self.state.error = e.user_message
            return self.state

        with self._lock:
            if not self._is_current(token):
                logger.info(f"Dropping stale result of request {token}")
                return self.state
            self.state.transformed_x = result.easting
            self.state.transformed_y = result.northing

        return self.state
