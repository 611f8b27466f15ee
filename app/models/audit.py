from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field


class AuditStatus(str, Enum):
    FOUND = "Found"
    MISSING = "Missing"
    COMPLETE = "Complete"
    INCOMPLETE = "Incomplete"


class AuditResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    status: AuditStatus
    suggestion: str
    detail: Optional[str] = None

    @computed_field  # type: ignore[misc]
    @property
    def status_text(self) -> str:
        """Status as shown in the report, e.g. ``"Found (en)"``."""
        if self.detail:
            return f"{self.status.value} ({self.detail})"
        return self.status.value
