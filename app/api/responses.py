from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.results import ActionResult, ErrorKind, format_validation_error

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def respond(result: ActionResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    code = success_status if result.success else STATUS_BY_KIND[result.kind]
    return JSONResponse(status_code=code, content=result.envelope())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed bodies, path ids and query params
    return respond(ActionResult.fail(ErrorKind.VALIDATION, format_validation_error(exc)))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    body = ActionResult(success=False, error=str(exc.detail)).envelope()
    return JSONResponse(status_code=exc.status_code, content=body, headers=exc.headers)
