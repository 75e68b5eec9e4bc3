"""Health check schema."""
from typing import Optional
from datetime import datetime
from musicare.schemas.base import CamelModel


class HealthResponse(CamelModel):
    status: str
    mode: str
    has_database: bool
    database_connected: bool
    timestamp: datetime
    db_error: Optional[str] = None
