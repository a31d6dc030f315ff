"""Pydantic schemas for the Actions API.

API Documentation: https://docs.hetzner.cloud/#actions
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ActionResourceReference(BaseModel):
    """Resource affected by an action."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="ID of the resource")
    type: str = Field(..., description="Resource type (e.g., 'server', 'image')")


class ActionError(BaseModel):
    model_config = ConfigDict(extra="allow")

    code: str = Field(..., description="Error code of a failed action")
    message: str = Field("", description="Error message of a failed action")


class Action(BaseModel):
    """Action returned from GET /actions/{id} and every lifecycle endpoint."""

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., description="Unique action ID")
    command: str | None = Field(None, description="Command executed (e.g., 'start_server')")
    status: str | None = Field(None, description="Status: running, success or error")
    progress: int = Field(0, description="Progress in percent")
    started: datetime | None = Field(None, description="Point in time when the action was started")
    finished: datetime | None = Field(None, description="Point in time when the action finished")
    resources: list[ActionResourceReference] = Field(default_factory=list)
    error: ActionError | None = Field(None, description="Set if the action failed")


class ActionGetResponse(BaseModel):
    action: Action


class ActionListResponse(BaseModel):
    actions: list[Action] = Field(default_factory=list)
