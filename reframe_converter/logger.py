import json
import logging
import os
import sys
from datetime import datetime

from .config import settings


def setup_logging():
    """Setup logging to a dated file and stdout for audit purposes"""

    os.makedirs(settings.log_dir, exist_ok=True)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(
                os.path.join(settings.log_dir, f"reframe_{datetime.now().strftime('%Y%m%d')}.log")
            ),
            logging.StreamHandler(sys.stdout)
        ]
    )

    return logging.getLogger(__name__)

# Global logger instance
logger = setup_logging()

def log_transformation(original_coords, transformed_coords, direction, user_agent="Unknown"):
    """Log transformation activities for audit trail"""
    log_entry = {
        "timestamp": datetime.now().isoformat(),
        "direction": direction,
        "original_coordinates": original_coords,
        "transformed_coordinates": transformed_coords,
        "user_agent": user_agent
    }

    logger.info(f"Transformation performed: {json.dumps(log_entry, default=str)}")
