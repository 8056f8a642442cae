from fastapi import Request, status
from fastapi.responses import JSONResponse


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

class CouldNotCreate(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Couldn't save URL"

class CouldNotFetch(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Couldn't fetch URL."

class InvalidUrlId(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid URL id."

class InvalidRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request body."

def error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc)

async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(InvalidRequest())
