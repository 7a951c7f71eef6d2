"""
Pydantic schemas for the Pinport API.

These models describe the request and response shapes of the pin endpoints.
The client serializes request models but never validates responses against
them; use ``Pin.model_validate`` on a response when typed objects are wanted.
"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """A 3D coordinate. Also used for pin offsets."""

    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)
    z: float = Field(..., allow_inf_nan=False)


class _PinFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    enable_line: Optional[bool] = Field(None, alias="enableLine", description="Draw a line from the pin to its position")
    alert: Optional[bool] = Field(None, description="Render the pin in alert style")
    icon: Optional[str] = Field(None, description="Presentation icon identifier")
    color: Optional[str] = Field(None, description="Hexadecimal color, e.g. #ff8800")


# Request schemas

class CreatePin(_PinFields):
    """
    Schema for creating a pin.

    ``meta_id``, ``position`` and ``html`` are required. Optional fields left
    unset are not sent, so the server applies its defaults
    (offset 0/0/0, opacity 1, no line, no alert).
    """

    meta_id: str = Field(..., description="Grouping key used to look pins up together")
    position: Position
    offset: Optional[Position] = None
    html: str
    opacity: Optional[float] = Field(None, description="Expected in [0, 1]; enforced by the API")


class UpdatePin(_PinFields):
    """Partial pin update. Only ``id`` is required; only set fields are sent."""

    id: str
    meta_id: Optional[str] = None
    position: Optional[Position] = None
    offset: Optional[Position] = None
    html: Optional[str] = None
    opacity: Optional[float] = Field(None, description="Expected in [0, 1]; enforced by the API")


# Response schemas

class Pin(BaseModel):
    """A pin as stored by the Pinport API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    meta_id: str
    position: Position
    offset: Position
    html: str
    opacity: float
    enable_line: bool = Field(..., alias="enableLine")
    alert: bool
    icon: Optional[str] = None
    color: Optional[str] = None


class DeletePinsResult(BaseModel):
    """Response of a bulk delete."""

    deleted: int


class ErrorIssue(BaseModel):
    """A single validation issue reported by the Pinport API."""

    model_config = ConfigDict(extra="allow")

    code: str
    message: str
    path: List[Union[int, str]] = Field(default_factory=list)
    expected: Optional[str] = None
    received: Optional[str] = None
    minimum: Optional[float] = None


class ErrorDetail(BaseModel):
    issues: List[ErrorIssue] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx responses."""

    error: Union[ErrorDetail, str]
