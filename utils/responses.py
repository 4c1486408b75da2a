from fastapi.responses import JSONResponse


def not_found(message: str, **extra) -> JSONResponse:
    """404 in the project's error envelope: {"success": False, "error": {...}, **extra}"""
    return JSONResponse(
        status_code=404,
        content={"success": False, "error": {"code": 404, "message": message}, **extra},
    )
