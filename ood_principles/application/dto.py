"""Data transfer objects for the application layer."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class DemonstrationResult(BaseModel):
    """Outcome of running one principle's scenario."""
    model_config = ConfigDict(frozen=True)

    principle: str
    title: str
    summary: str
    outcome: Dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
