"""
REFRAME Coordinate Converter Package
LV95 <-> WGS84 transformation through the swisstopo REFRAME service
"""

__version__ = "1.0.0"
__author__ = "Coordinate Converter Team"

# Import key components to make them easily accessible
from .main import app
from .client import ReframeClient
from .form import CoordinateTransformClient
from .logger import setup_logging
