"""Service layer exceptions"""

from datetime import datetime, timezone


class ServiceError(Exception):
    """Base exception for service layer errors"""

    def __init__(self, message: str, original_error: Exception = None, error_code: str = None):
        super().__init__(message)
        self.original_error = original_error
        self.error_code = error_code or "SERVICE_ERROR"
        self.timestamp = datetime.now(timezone.utc)


class ConfigurationError(ServiceError):
    """Exception for configuration errors"""

    def __init__(self, message: str, config_key: str = None):
        super().__init__(message, error_code="CONFIGURATION_ERROR")
        self.config_key = config_key


class CollectorError(ServiceError):
    """Exception for failed collector requests"""

    def __init__(
            self,
            message: str,
            endpoint: str = None,
            status_code: int = None,
            response_body: str = None,
            original_error: Exception = None
    ):
        super().__init__(message, original_error=original_error, error_code="COLLECTOR_ERROR")
        self.endpoint = endpoint
        self.status_code = status_code
        self.response_body = response_body
