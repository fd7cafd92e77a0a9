"""
services/errors.py

- 핵심 계층(services)에서 발생하는 오류 분류
- middlewares/error_handler.py 에서 HTTP 응답으로 변환
"""

from typing import Optional


class ServiceError(Exception):
    code = "SERVICE_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class Unauthenticated(ServiceError):
    """세션 없음 → 로그인 화면으로 리다이렉트 (데이터 오류 아님)"""
    code = "UNAUTHENTICATED"
    status_code = 303

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class Forbidden(ServiceError):
    code = "FORBIDDEN"
    status_code = 403

    def __init__(self, action: str, role: str):
        super().__init__(f"Role {role} is not allowed to {action}")
        self.action = action
        self.role = role


class ValidationError(ServiceError):
    code = "VALIDATION_ERROR"
    status_code = 422

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class NotFound(ServiceError):
    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, resource: str, resource_id: Optional[str] = None):
        super().__init__(f"{resource} not found" if not resource_id else f"{resource} {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class StoreFailure(ServiceError):
    code = "STORE_FAILURE"
    status_code = 500
