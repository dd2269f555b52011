"""
Machine API Router — REST endpoints for the laundry room.

Endpoints:
- GET /api/machines — list machines with their status
- GET /api/machines/{machine_id} — one machine
- GET /api/machines/{machine_id}/schedule — bookings in order
- POST /api/machines/{machine_id}/slots — book a slot
- DELETE /api/machines/{machine_id}/slots — release a slot
- POST /api/machines/{machine_id}/slots/check — is a slot free
- GET /api/machines/{machine_id}/next-busy — next booking
- GET /api/machines/{machine_id}/next-free — gap before the next booking
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from laundry_os.time_truth import (
    ELAPSED,
    OVERLAP,
    Machine,
    MachineRegistry,
    TimeSlot,
    TimeSlotError,
    UnknownMachineError,
)

from .response_models import (
    AvailabilityResponse,
    BookingResponse,
    MachineListResponse,
    MachineResponse,
    NextSlotResponse,
    ScheduleResponse,
    SlotRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/machines", tags=["machines"])


def get_registry(request: Request) -> MachineRegistry:
    """Registry attached to the app by create_app()."""
    return request.app.state.registry


def _get_machine(registry: MachineRegistry, machine_id: int) -> Machine:
    try:
        return registry.get(machine_id)
    except UnknownMachineError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e


def _to_slot(request: SlotRequest) -> TimeSlot:
    try:
        return TimeSlot(request.start, request.end)
    except TimeSlotError as e:
        logger.info(f"Invalid slot {request.start} -> {request.end}: {e}")
        raise HTTPException(status_code=422, detail=str(e)) from e


def _book(machine: Machine, slot: TimeSlot) -> tuple[bool, str | None, list[TimeSlot]]:
    try:
        return machine.book(slot)
    except TimeSlotError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


# Endpoints



@router.get("", response_model=MachineListResponse)
def list_machines(registry: MachineRegistry = Depends(get_registry)):
    """List all machines with their current status."""
    items = [machine.to_dict() for machine in registry.machines()]
    return {"items": items, "total": len(items)}


@router.get("/{machine_id}", response_model=MachineResponse)
def get_machine(machine_id: int, registry: MachineRegistry = Depends(get_registry)):
    """Get one machine and its current status."""
    return _get_machine(registry, machine_id).to_dict()


@router.get("/{machine_id}/schedule", response_model=ScheduleResponse)
def get_schedule(machine_id: int, registry: MachineRegistry = Depends(get_registry)):
    """Bookings of a machine in chronological order."""
    slots = _get_machine(registry, machine_id).get_schedule().time_slots
    return {
        "machine_id": machine_id,
        "slots": [slot.to_dict() for slot in slots],
        "total": len(slots),
    }


@router.post("/{machine_id}/slots", response_model=BookingResponse)
def book_slot(machine_id: int, request: SlotRequest, registry: MachineRegistry = Depends(get_registry)):
    """
    Book a slot on a machine.

    409 when the slot has already elapsed or overlaps an existing booking.
    """
    machine = _get_machine(registry, machine_id)
    slot = _to_slot(request)

    admitted, reason, conflicts = _book(machine, slot)
    if admitted:
        return {"success": True, "slot": slot.to_dict()}

    if reason == ELAPSED:
        raise HTTPException(
            status_code=409,
            detail={"reason": ELAPSED, "message": "The time slot has already ended."},
        )
    raise HTTPException(
        status_code=409,
        detail={
            "reason": OVERLAP,
            "message": "The time slot overlaps an existing booking.",
            "conflicts": [c.to_dict() for c in conflicts],
        },
    )


@router.delete("/{machine_id}/slots", response_model=BookingResponse)
def release_slot(machine_id: int, request: SlotRequest, registry: MachineRegistry = Depends(get_registry)):
    """Release a booking with exactly this start and end."""
    machine = _get_machine(registry, machine_id)
    slot = _to_slot(request)

    if not machine.remove_time_slot(slot):
        raise HTTPException(status_code=404, detail=f"No booking {slot} on machine {machine_id}")
    return {"success": True, "slot": slot.to_dict()}


@router.post("/{machine_id}/slots/check", response_model=AvailabilityResponse)
def check_slot(machine_id: int, request: SlotRequest, registry: MachineRegistry = Depends(get_registry)):
    """Check whether a slot is free without booking it."""
    schedule = _get_machine(registry, machine_id).get_schedule()
    slot = _to_slot(request)
    try:
        conflicts = schedule.conflicts(slot)
    except TimeSlotError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {"free": not conflicts, "conflicts": [c.to_dict() for c in conflicts]}


@router.get("/{machine_id}/next-busy", response_model=NextSlotResponse)
def next_busy(machine_id: int, registry: MachineRegistry = Depends(get_registry)):
    """Next booking that has not started yet."""
    slot = _get_machine(registry, machine_id).get_schedule().next_busy_time_slot()
    return {"machine_id": machine_id, "slot": slot.to_dict() if slot else None}


@router.get("/{machine_id}/next-free", response_model=NextSlotResponse)
def next_free(machine_id: int, registry: MachineRegistry = Depends(get_registry)):
    """
    Free gap before the next booking.

    409 when the gap cannot be expressed as a slot (back-to-back bookings,
    or a gap longer than 24 hours).
    """
    schedule = _get_machine(registry, machine_id).get_schedule()
    try:
        slot = schedule.next_free_time_slot()
    except TimeSlotError as e:
        raise HTTPException(
            status_code=409,
            detail=f"Next free gap cannot be represented as a time slot: {e}",
        ) from e
    return {"machine_id": machine_id, "slot": slot.to_dict() if slot else None}
