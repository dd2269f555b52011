"""
Shared Pydantic models for the API endpoints.

These give FastAPI the type information it needs for request validation and
accurate OpenAPI schemas.
"""

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

# ==== Requests ====


class SlotRequest(BaseModel):
    """A candidate time slot. Naive timestamps are taken as UTC."""

    start: datetime = Field(description="Inclusive start, ISO 8601")
    end: datetime = Field(description="Exclusive end, ISO 8601")

    @field_validator("start", "end")
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


# ==== Slots ====


class SlotResponse(BaseModel):
    """One time slot."""

    start: str = Field(description="ISO timestamp, inclusive")
    end: str = Field(description="ISO timestamp, exclusive")
    duration_min: int = Field(description="Length in whole minutes")


class ScheduleResponse(BaseModel):
    """A machine's bookings in chronological order."""

    machine_id: int
    slots: list[SlotResponse] = Field(default_factory=list)
    total: int


class BookingResponse(BaseModel):
    """Result of booking or releasing a slot."""

    success: bool
    slot: SlotResponse


class AvailabilityResponse(BaseModel):
    """Whether a slot is free, and what it collides with if not."""

    free: bool
    conflicts: list[SlotResponse] = Field(default_factory=list)


class NextSlotResponse(BaseModel):
    """Next busy or free slot; slot is null when there is none."""

    machine_id: int
    slot: SlotResponse | None = None


# ==== Machines ====


class MachineResponse(BaseModel):
    """Machine summary."""

    id: int
    name: str
    status: str = Field(description="busy or idle")


class MachineListResponse(BaseModel):
    """All machines in the laundry room."""

    items: list[MachineResponse] = Field(default_factory=list)
    total: int


# ==== Health Check ====


class HealthResponse(BaseModel):
    """Health check result."""

    status: str = Field(description="healthy")
    version: str = Field(description="Package version")
    machines: int = Field(description="Machines in the roster")
    timestamp: str = Field(description="ISO timestamp")
