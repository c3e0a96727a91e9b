from typing import Any

from fastapi.responses import JSONResponse


def error(message: Any, status: int = 500):
    return JSONResponse(
        status_code=status,
        content={"error": message},
    )
