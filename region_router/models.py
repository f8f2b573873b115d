from pydantic import BaseModel, ConfigDict
from typing import Any, Dict, List, Optional, Union

class RoutingConfig(BaseModel):
    """Database routing decided once at startup"""
    database_url: str
    database_host: Optional[str] = None
    fly_region: str
    primary_region: str = ""
    is_primary_region: bool

    model_config = ConfigDict(frozen=True)

class QueryResponse(BaseModel):
    """Query result plus where it was served from"""
    time_ms: float
    fly_region: str
    is_primary_region: bool
    database_host: Optional[str] = None
    data: Union[List[Dict[str, Any]], str]

class HealthResponse(BaseModel):
    status: str
    fly_region: str
    primary_region: str
    is_primary_region: bool
    database_host: Optional[str] = None
    database_healthy: bool
