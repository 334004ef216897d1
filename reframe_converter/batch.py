import io
import logging

import pandas as pd

from .client import ReframeClient
from .exceptions import CoordinateValidationError, TransformError
from .schemas import BatchSummary, Direction

logger = logging.getLogger(__name__)

EASTING_NAMES = ['easting', 'east', 'x', 'e', 'x_coordinate', 'lon', 'longitude']
NORTHING_NAMES = ['northing', 'north', 'y', 'n', 'y_coordinate', 'lat', 'latitude']

ENCODINGS = ['utf-8-sig', 'windows-1252']


def decode_csv(contents: bytes) -> str:
    """Decode uploaded CSV bytes, trying common encodings in order"""
    for encoding in ENCODINGS:
        try:
            content_str = contents.decode(encoding)
            logger.info(f"Successfully decoded with {encoding}")
            return content_str
        except UnicodeDecodeError:
            continue

    # latin-1 maps every byte
    logger.info("Falling back to latin-1")
    return contents.decode('latin-1')


def read_csv(contents: bytes) -> pd.DataFrame:
    # Keep coordinates as text so they reach REFRAME exactly as written
    return pd.read_csv(io.StringIO(decode_csv(contents)), dtype=str, keep_default_na=False)


def detect_coordinate_columns(df):
    """Detect easting and northing columns in a CSV"""
    easting_col = northing_col = None

    for col in df.columns:
        col_lower = str(col).lower().strip()
        if col_lower in EASTING_NAMES and easting_col is None:
            easting_col = col
        elif col_lower in NORTHING_NAMES and northing_col is None:
            northing_col = col

    return easting_col, northing_col


def transform_dataframe(df: pd.DataFrame, direction, client: ReframeClient, filename: str = "upload.csv"):
    """Transform every row of *df* through REFRAME.

    Returns the original columns plus ``transformed_x``, ``transformed_y``
    and ``status``, together with a :class:`BatchSummary`.
    """
    direction = Direction(direction)
    easting_col, northing_col = detect_coordinate_columns(df)
    logger.info(f"Detected columns - easting: {easting_col}, northing: {northing_col}")

    if not easting_col or not northing_col:
        raise CoordinateValidationError(
            f"Could not find coordinate columns. Tried: {EASTING_NAMES} and {NORTHING_NAMES}. "
            f"Found columns: {df.columns.tolist()}"
        )

    transformed_x, transformed_y, statuses = [], [], []
    successful_count = 0

    for index, row in df.iterrows():
        easting = str(row[easting_col]).strip()
        northing = str(row[northing_col]).strip()

        if not easting or not northing:
            transformed_x.append(None)
            transformed_y.append(None)
            statuses.append('skipped: empty coordinates')
            continue

        try:
            result = client.transform(direction, easting, northing)
        except TransformError as e:
            logger.warning(f"Row {index + 1} failed: {e.message}")
            transformed_x.append(None)
            transformed_y.append(None)
            statuses.append(f"error: {e.user_message}")
            continue

        transformed_x.append(result.easting)
        transformed_y.append(result.northing)
        statuses.append('success')
        successful_count += 1

    output_df = df.copy()
    output_df['transformed_x'] = transformed_x
    output_df['transformed_y'] = transformed_y
    output_df['status'] = statuses

    summary = BatchSummary(
        filename=filename,
        direction=direction,
        record_count=len(output_df),
        success_count=successful_count,
    )
    logger.info(f"Batch transformation completed. Successful: {successful_count}/{len(output_df)}")
    return output_df, summary


def to_csv_bytes(df: pd.DataFrame) -> bytes:
    output_io = io.StringIO()
    df.to_csv(output_io, index=False)
    return output_io.getvalue().encode('utf-8-sig')
