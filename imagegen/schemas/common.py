# imagegen/schemas/common.py
from datetime import datetime

from pydantic import BaseModel

class SuccessResponse(BaseModel):
    success: bool

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
