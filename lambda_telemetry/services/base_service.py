"""
Base Service Class

Abstract base class for services providing common logging and error
wrapping helpers.
"""

from abc import ABC
from datetime import datetime, timezone
from typing import Optional

import structlog

from lambda_telemetry.services.exceptions import ServiceError


class BaseService(ABC):
    """Abstract base class for all services"""

    def __init__(self):
        self.logger = structlog.get_logger(self.__class__.__name__)
        self.service_name = self.__class__.__name__

    def log_operation(
            self,
            operation: str,
            user_id: Optional[str] = None,
            company_id: Optional[str] = None,
            **kwargs
    ) -> None:
        """Log service operation with standard fields"""
        log_data = {
            "service": self.service_name,
            "operation": operation,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }

        if user_id:
            log_data["user_id"] = user_id
        if company_id:
            log_data["company_id"] = company_id

        self.logger.info("Service operation", **log_data)

    def handle_service_error(
            self,
            error: Exception,
            operation: str,
            **context
    ) -> ServiceError:
        """
        Log an error and wrap it with service context

        Args:
            error: Original exception
            operation: Operation that failed
            **context: Additional context

        Returns:
            ServiceError wrapping the original exception
        """
        error_context = {
            "service": self.service_name,
            "operation": operation,
            "error_type": type(error).__name__,
            "error_message": str(error),
            **context
        }

        self.logger.error("Service operation failed", **error_context)

        if isinstance(error, ServiceError):
            return error

        return ServiceError(
            f"{operation} failed: {error}",
            original_error=error
        )
