"""Interest signal model: a student's recorded interest in a professor."""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class InterestStatus(str, Enum):
    """Lifecycle of an interest signal. Only INTERESTED affects scoring."""

    INTERESTED = "interested"
    CONTACTED = "contacted"
    MATCHED = "matched"
    DECLINED = "declined"


class InterestSignal(BaseModel):
    """A (student, professor) interest record supplied by the collaborator."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    student_id: str
    professor_id: str
    status: InterestStatus = InterestStatus.INTERESTED
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_active_interest(self) -> bool:
        return self.status == InterestStatus.INTERESTED


def has_interest(
    signals: list[InterestSignal],
    student_id: Optional[str],
    professor_id: Optional[str],
) -> bool:
    """Check whether the student has an active interest signal toward the professor.

    Records without ids can never carry a signal.
    """
    if not student_id or not professor_id:
        return False

    return any(
        signal.student_id == student_id
        and signal.professor_id == professor_id
        and signal.is_active_interest()
        for signal in signals
    )
