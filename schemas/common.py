"""
schemas/common.py

- Shared schemas reused across the project (Pydantic v2)
- Error response standard: ErrorDetail, ErrorResponse
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ConfigDict


# =========================================================
# Error response standard
# =========================================================

class ErrorDetail(BaseModel):
    """Smallest unit of an error: code + message (+ optional field details)"""
    code: str = Field(..., description="Error code (e.g. INTERNAL_ERROR, VALIDATION_ERROR)")
    message: str = Field(..., description="Human readable message")
    details: Optional[List[Any]] = Field(default=None, description="Per-field validation problems")

class ErrorResponse(BaseModel):
    """
    Standard error body returned by the global handlers
    (middlewares/error_handler.py)
    """
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Response generation time (UTC)"
    )
    latency_ms: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(extra="ignore")

