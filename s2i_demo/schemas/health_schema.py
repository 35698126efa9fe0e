from pydantic import BaseModel
from datetime import datetime
from typing import Dict


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    uptime: str


class ReadinessResponse(BaseModel):
    status: str
    checks: Dict[str, str]
