"""Demonstration scenario schema."""
from pydantic import BaseModel, Field


class DemoConfig(BaseModel):
    """Parameters of the principle demonstrations."""

    request_url: str = Field("https://example.com/data.json", description="URL used by the Liskov demo")
    travel_seconds: float = Field(
        -1_000_000_000.0, description="Seconds travelled in the dependency inversion demo"
    )
