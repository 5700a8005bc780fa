from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class ValidationException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class StorageException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": str(exc)},
    )


def validation_error_handler(request: Request, exc: ValidationException):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": str(exc)},
    )


def storage_exception_handler(request: Request, exc: StorageException):
    logger.error(f"{exc} Cause: {exc.__cause__!r}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "An unexpected error occurred"},
    )


def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
):
    def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
        """Convert a tuple of location parts to a dot-separated string"""
        path = ""
        for i, x in enumerate(loc):
            if isinstance(x, str):
                if i > 0:
                    path += "."
                path += x
            elif isinstance(x, int):
                path += f"[{x}]"
            else:
                raise TypeError("Unexpected type")
        return path

    def process_error(error: dict[str, Any]) -> dict[str, Any]:
        """Keep the JSON-safe parts of a pydantic error"""
        return {
            "type": error["type"],
            "loc": loc_to_dot_sep(error["loc"]),
            "msg": error["msg"],
            "input": jsonable_encoder(error.get("input")),
        }

    errors = [process_error(error) for error in exc.errors()]
    message = "; ".join(f"{error['loc']}: {error['msg']}" for error in errors)
    logger.error(f"Request validation failed: {message}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message or "Validation error", "errors": errors},
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {
                "application/json": {
                    "example": {"error": f"{resource_type.value} 'example' not found"}
                }
            },
        }
    }


internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {"example": {"error": "An unexpected error occurred"}}
        },
    }
}

validation_error_response: ResponseDict = {
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": "body.title: Field required",
                    "errors": [
                        {
                            "type": "missing",
                            "loc": "body.title",
                            "msg": "Field required",
                            "input": {},
                        }
                    ],
                }
            }
        },
    }
}
