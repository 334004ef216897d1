"""
REFRAME HTTP client

Thin wrapper around the swisstopo REFRAME service. One GET per call, no
retry, no caching. Each direction maps to exactly one fixed endpoint.
"""

import logging
import threading
from typing import Any, Optional

import requests
from pydantic import ValidationError

from .exceptions import (
    MalformedResponseError,
    RequestFailedError,
    UnexpectedTransformError,
)
from .schemas import Direction, ReframeResult

logger = logging.getLogger(__name__)

LV95_TO_WGS84_URL = "https://geodesy.geo.admin.ch/reframe/lv95towgs84"
WGS84_TO_LV95_URL = "https://geodesy.geo.admin.ch/reframe/wgs84tolv95"

ENDPOINTS = {
    Direction.LV95_TO_WGS84: LV95_TO_WGS84_URL,
    Direction.WGS84_TO_LV95: WGS84_TO_LV95_URL,
}


def endpoint_for(direction) -> str:
    """Return the REFRAME base URL for a transformation direction"""
    return ENDPOINTS[Direction(direction)]


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        float(value)
    except (TypeError, ValueError):
        return False
    return True


class ReframeClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        strict: bool = False,
    ):
        self._session = session
        self._local = threading.local()
        self.timeout = timeout
        self.strict = strict

    @property
    def session(self) -> requests.Session:
        """Injected session, else one session per thread"""
        if self._session is not None:
            return self._session
        if not hasattr(self._local, "session"):
            self._local.session = requests.Session()
        return self._local.session

    def transform(self, direction, easting: str, northing: str) -> ReframeResult:
        """Transform one coordinate pair through REFRAME.

        Raises:
            RequestFailedError: REFRAME answered with a non-2xx status.
            UnexpectedTransformError: The request or JSON decoding failed.
            MalformedResponseError: ``strict`` is set and the body lacks a
                numeric ``easting`` or ``northing``.
        """
        url = endpoint_for(direction)
        params = {"easting": easting, "northing": northing, "format": "json"}

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"REFRAME request to {url} failed: {str(e)}")
            raise UnexpectedTransformError(f"Request to {url} failed: {str(e)}") from e
        except Exception as e:
            logger.error(f"REFRAME request to {url} could not be sent: {e!r}", exc_info=e)
            raise UnexpectedTransformError(f"Request to {url} could not be sent: {e!r}") from e

        if not response.ok:
            logger.warning(f"REFRAME returned HTTP {response.status_code} for {response.url}")
            raise RequestFailedError(
                f"REFRAME returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"REFRAME response is not valid JSON: {str(e)}")
            raise UnexpectedTransformError(f"Invalid JSON from REFRAME: {str(e)}") from e
        except Exception as e:
            logger.error(f"REFRAME response could not be decoded: {e!r}", exc_info=e)
            raise UnexpectedTransformError(f"Undecodable response from REFRAME: {e!r}") from e

        if not isinstance(data, dict):
            logger.error(f"REFRAME response is not a JSON object: {data!r}")
            raise UnexpectedTransformError("REFRAME response is not a JSON object")

        if self.strict:
            missing = [key for key in ("easting", "northing") if not _is_number(data.get(key))]
            if missing:
                logger.warning(f"REFRAME response without numeric {missing}: {data!r}")
                raise MalformedResponseError(f"Missing or non-numeric fields: {', '.join(missing)}")
        elif "easting" not in data or "northing" not in data:
            logger.warning(f"REFRAME response is missing coordinate fields: {data!r}")

        try:
            result = ReframeResult(easting=data.get("easting"), northing=data.get("northing"))
        except ValidationError as e:
            logger.error(f"REFRAME coordinates have an unusable type: {data!r}")
            raise UnexpectedTransformError(f"Unusable coordinate values from REFRAME: {str(e)}") from e

        logger.debug(f"REFRAME {Direction(direction).value}: ({easting}, {northing}) -> ({result.easting}, {result.northing})")
        return result
