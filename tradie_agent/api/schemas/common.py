"""
Shared API response envelopes.

Errors raised outside the command flow are returned as an ErrorResponse
carrying the request id, so a UI can match a failure to its request.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class BaseResponse(BaseModel):
    """Base response schema."""

    success: bool = True
    message: Optional[str] = None


class ErrorResponse(BaseResponse):
    """Error response schema."""

    success: bool = False
    error_type: Optional[str] = None
    request_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
