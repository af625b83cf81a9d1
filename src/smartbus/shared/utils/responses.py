from pydantic import BaseModel, ValidationError


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def error_response(error_code: str, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(exclude_none=True)


def validation_error_response(error: ValidationError) -> dict:
    """Pydantic の検証エラーをレスポンス形式に変換"""
    details = [
        {"field": ".".join(str(part) for part in item["loc"]), "message": item["msg"]}
        for item in error.errors(include_url=False)
    ]
    return error_response("VALIDATION_ERROR", "Invalid request", details)
