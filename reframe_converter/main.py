from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response
import json
import pandas as pd

from . import __version__
from .batch import read_csv, to_csv_bytes, transform_dataframe
from .client import ReframeClient
from .config import settings
from .exceptions import CoordinateValidationError
from .form import CoordinateTransformClient
from .logger import logger, log_transformation
from .pages import render_form_page
from .schemas import Direction, FormState

app = FastAPI(title=settings.app_name, version=__version__)
reframe = ReframeClient(timeout=settings.request_timeout, strict=settings.strict_response)


class AsciiJSONResponse(JSONResponse):
    """JSON response that escapes non-ASCII, so echoed raw input always encodes"""

    def render(self, content) -> bytes:
        return json.dumps(content, separators=(",", ":")).encode("ascii")


# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def run_transform(state: FormState, http_request: Request) -> FormState:
    """Run one transformation on a fresh form built from the posted state"""
    form = CoordinateTransformClient(reframe, state)
    result = form.transform()

    if result.error is None:
        log_transformation(
            original_coords={"easting": result.easting, "northing": result.northing},
            transformed_coords={"x": result.transformed_x, "y": result.transformed_y},
            direction=result.direction.value,
            user_agent=http_request.headers.get("user-agent", "Unknown")
        )

    return result


@app.get("/", response_class=HTMLResponse)
def read_root():
    return HTMLResponse(content=render_form_page(FormState()))

@app.post("/", response_class=HTMLResponse)
def submit_form(
    http_request: Request,
    direction: Direction = Form(Direction.LV95_TO_WGS84),
    easting: str = Form(""),
    northing: str = Form(""),
    transformed_x: str = Form(""),
    transformed_y: str = Form(""),
):
    """Handle a submission of the HTML form"""
    state = FormState(
        direction=direction,
        easting=easting,
        northing=northing,
        transformed_x=transformed_x or None,
        transformed_y=transformed_y or None,
    )
    return HTMLResponse(content=render_form_page(run_transform(state, http_request)))

@app.post("/api/transform", response_model=FormState)
def api_transform(state: FormState, http_request: Request):
    """Transform the pair held in a form state and return the updated state"""
    return AsciiJSONResponse(content=run_transform(state, http_request).model_dump())

@app.post("/transform/batch")
def transform_batch(
    file: UploadFile = File(...),
    direction: Direction = Form(Direction.LV95_TO_WGS84),
):
    """Transform every row of an uploaded CSV through REFRAME"""
    logger.info(f"Batch transformation started for file: {file.filename}, direction: {direction.value}")

    try:
        df = read_csv(file.file.read())
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.warning(f"Batch file could not be parsed: {str(e)}")
        raise HTTPException(status_code=400, detail=f"File processing error: {str(e)}")

    if len(df) > settings.batch_max_rows:
        raise HTTPException(
            status_code=400,
            detail=f"Too many rows: {len(df)} (maximum {settings.batch_max_rows})"
        )

    try:
        output_df, summary = transform_dataframe(df, direction, reframe, filename=file.filename)
    except CoordinateValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(f"Batch summary: {summary.model_dump_json()}")

    return Response(
        content=to_csv_bytes(output_df),
        media_type='text/csv; charset=utf-8',
        headers={
            'Content-Disposition': f'attachment; filename="converted_{file.filename}"',
            'X-Record-Count': str(summary.record_count),
            'X-Success-Count': str(summary.success_count),
        }
    )

@app.get("/download-sample-csv")
def download_sample_csv():
    """Download a sample LV95 CSV for batch transformation"""
    sample_data = """name,easting,northing,description
Federal Palace Bern,2600670,1199655,Reference point
Zimmerwald Observatory,2602030,1191775,Geodetic observatory
Zurich Main Station,2683100,1248100,Railway station
Geneva Jet d'Eau,2501350,1118300,Landmark"""

    return Response(
        content=sample_data.encode('utf-8-sig'),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": "attachment; filename=sample_lv95_coordinates.csv"}
    )

@app.get("/health")
def health_check():
    return {"status": "healthy", "service": settings.app_name}

# Error handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global error handler: {str(exc)}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )
