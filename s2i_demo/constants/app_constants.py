"""
Fixed values reported by the service endpoints.
"""

from enum import Enum


APPLICATION_ID = "s2i-go-demo"
APP_VERSION = "1.0.0"
INFO_MESSAGE = "Go application built with OpenShift S2I"
DEFAULT_ENVIRONMENT = "development"

# Methods declared on each route; AnyMethodRoute also accepts any other method
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

ENDPOINT_PATHS = ["/", "/health", "/ready", "/api/info"]


class HealthStatusEnum(str, Enum):
    """Liveness states"""
    HEALTHY = "healthy"


class ReadinessStatusEnum(str, Enum):
    """Readiness states"""
    READY = "ready"


class CheckStatusEnum(str, Enum):
    """Result of an individual readiness check"""
    OK = "ok"
