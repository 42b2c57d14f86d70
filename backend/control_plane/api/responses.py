"""Response Classes: JSON with an explicit utf-8 charset.

Invariants:
    - Every JSON body from this API is served as application/json; charset=utf-8
    - Bodies are compact (no whitespace between tokens), non-ASCII kept as UTF-8
"""

from fastapi.responses import JSONResponse


class UTF8JSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"
