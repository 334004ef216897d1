from __future__ import annotations

import os
import tempfile

# Keep audit logs out of the working tree; must run before the package is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="reframe-logs-"))

import pytest

from reframe_converter.client import ReframeClient
from reframe_converter.form import CoordinateTransformClient


@pytest.fixture()
def reframe() -> ReframeClient:
    return ReframeClient()


@pytest.fixture()
def form(reframe: ReframeClient) -> CoordinateTransformClient:
    return CoordinateTransformClient(reframe)
