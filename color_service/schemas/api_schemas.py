"""
Pydantic schemas for Color Service API responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class HealthResponse(BaseModel):
    """Response for health check."""
    status: str = "healthy"
    service: str
    version: str
    recent_colors: int = Field(description="Number of entries in the recent colors list")


# Color Schemas

class HexColorResponse(BaseModel):
    """A single color encoded as '#rrggbb'."""
    color: str = Field(description="Hex encoded color", examples=["#b4da55"])


class RGBColorResponse(BaseModel):
    """A single color as [red, green, blue]."""
    color: List[int] = Field(description="Color components in r, g, b order", examples=[[180, 218, 85]])


class ColorListResponse(BaseModel):
    """Recently submitted colors, oldest first."""
    colors: List[str] = Field(description="Hex encoded colors")


class InterpolationResponse(BaseModel):
    """Intermediate colors between two endpoints."""
    steps: List[str] = Field(description="Hex encoded colors ordered from start to end")


# Error Response Schema

class ErrorResponse(BaseModel):
    """Standard response for rejected requests."""
    detail: Optional[str] = None
