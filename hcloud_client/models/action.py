"""Action domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from hcloud_client import schemas


class ActionStatus(str, Enum):
    RUNNING = "running"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class ActionResource:
    id: int
    type: str


@dataclass(frozen=True)
class Action:
    """Asynchronous operation started by a lifecycle endpoint.

    Returned as soon as the API accepts the request, usually still running.
    """

    id: int
    command: str = ""
    status: ActionStatus | str = ActionStatus.RUNNING
    progress: int = 0
    started: datetime | None = None
    finished: datetime | None = None
    error_code: str = ""
    error_message: str = ""
    resources: tuple[ActionResource, ...] = field(default_factory=tuple)

    @property
    def is_finished(self) -> bool:
        return self.status in (ActionStatus.SUCCESS, ActionStatus.ERROR)


def _action_status(value: str | None) -> ActionStatus | str:
    if value is None:
        return ActionStatus.RUNNING
    try:
        return ActionStatus(value)
    except ValueError:
        return value


def action_from_schema(s: schemas.Action) -> Action:
    return Action(
        id=s.id,
        command=s.command or "",
        status=_action_status(s.status),
        progress=s.progress,
        started=s.started,
        finished=s.finished,
        error_code=s.error.code if s.error else "",
        error_message=s.error.message if s.error else "",
        resources=tuple(ActionResource(id=r.id, type=r.type) for r in s.resources),
    )
