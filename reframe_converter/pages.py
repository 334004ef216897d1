from html import escape

from .schemas import Direction, FormState


def _value(value) -> str:
    return "" if value is None else escape(str(value), quote=True)


def render_form_page(state: FormState) -> str:
    """Render the single transformation page for the given view state"""
    options = "\n".join(
        f'<option value="{d.value}"{" selected" if d == state.direction else ""}>{d.label}</option>'
        for d in Direction
    )

    error_block = ""
    if state.error:
        error_block = f'<div class="alert alert-danger" role="alert" id="error">{escape(state.error)}</div>'

    return f"""
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <meta charset="UTF-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>Coordinate Transformation</title>
        <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.1.3/dist/css/bootstrap.min.css" rel="stylesheet">
        <style>
            body {{ background-color: #f8f9fa; }}
            .card {{ box-shadow: 0 0.125rem 0.25rem rgba(0, 0, 0, 0.075); }}
            .coord-value {{ font-family: monospace; }}
        </style>
    </head>
    <body>
        <div class="container" style="max-width: 600px;">
            <div class="card mt-5">
                <div class="card-body">
                    <h1 class="h4 text-center mb-4">Coordinate Transformation</h1>
                    <form method="post" action="/">
                        <div class="mb-3">
                            <label for="direction" class="form-label">REFRAME service</label>
                            <select class="form-select" id="direction" name="direction">
                                {options}
                            </select>
                        </div>
                        <div class="row g-2 mb-3">
                            <div class="col">
                                <label for="easting" class="form-label">Easting</label>
                                <input type="text" class="form-control" id="easting" name="easting" value="{_value(state.easting)}">
                            </div>
                            <div class="col">
                                <label for="northing" class="form-label">Northing</label>
                                <input type="text" class="form-control" id="northing" name="northing" value="{_value(state.northing)}">
                            </div>
                        </div>
                        <button type="submit" class="btn btn-primary w-100 mb-3">Transform</button>
                        {error_block}
                        <div class="row g-2">
                            <div class="col">
                                <label for="transformed_x" class="form-label">Transformed X</label>
                                <input type="text" class="form-control coord-value" id="transformed_x" name="transformed_x" value="{_value(state.transformed_x)}" readonly>
                            </div>
                            <div class="col">
                                <label for="transformed_y" class="form-label">Transformed Y</label>
                                <input type="text" class="form-control coord-value" id="transformed_y" name="transformed_y" value="{_value(state.transformed_y)}" readonly>
                            </div>
                        </div>
                    </form>
                    <p class="text-muted small mt-4 mb-0">
                        Batch files: POST a CSV to <code>/transform/batch</code>
                        (<a href="/download-sample-csv">sample CSV</a>).
                    </p>
                </div>
            </div>
        </div>
    </body>
    </html>
    """
