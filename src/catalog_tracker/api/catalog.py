"""Catalog endpoints: CRUD, queries and statistics per entity type."""

from __future__ import annotations

from dataclasses import replace
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING, Any
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder

from catalog_tracker.api.schemas import (
    BagInput,
    DayNote,
    HabitToggle,
    LookInput,
    NoteInput,
    OutfitInput,
    PlanAssignment,
    ProductInput,
)
from catalog_tracker.domain.outfits import Weekday  # noqa: TC001
from catalog_tracker.services.bags import BAG_QUERY
from catalog_tracker.services.looks import LOOK_QUERY
from catalog_tracker.services.notes import NOTE_QUERY
from catalog_tracker.services.outfits import OUTFIT_QUERY
from catalog_tracker.services.products import PRODUCT_QUERY
from catalog_tracker.services.query import QuerySchema, QueryView

if TYPE_CHECKING:
    from catalog_tracker.containers import AppContainer
    from catalog_tracker.services.records import RecordStore

router = APIRouter()


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def _query(  # noqa: PLR0913
    store: RecordStore,
    schema: QuerySchema,
    *,
    filter_axis: str | None,
    filter_value: str | None,
    toggle_axis: str | None,
    q: str | None,
    sort: str | None,
) -> list[Any]:
    view = QueryView(store, schema)
    try:
        if toggle_axis and filter_axis:
            raise ValueError("Only one filter can be active at a time")
        if toggle_axis:
            view.filter_by(toggle_axis, True)
        elif filter_axis:
            view.filter_by(filter_axis, filter_value or "")
        if sort:
            view.sort_by(sort)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    view.search(q or "")
    return view.results()


def _found(record: Any) -> Any:
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return jsonable_encoder(record)


def _deleted(removed: bool) -> dict[str, bool]:  # noqa: FBT001
    return {"deleted": removed}


# Bags


@router.get("/bags", tags=["bags"])
async def list_bags(  # noqa: PLR0913
    request: Request,
    filter_axis: str | None = None,
    filter_value: str | None = None,
    favorites: bool = False,  # noqa: FBT001, FBT002
    q: str | None = None,
    sort: str | None = None,
) -> dict[str, object]:
    """Return bags matching the active filter, search and sort."""
    service = _container(request).bag_service
    bags = _query(
        service.store,
        BAG_QUERY,
        filter_axis=filter_axis,
        filter_value=filter_value,
        toggle_axis="favorites" if favorites else None,
        q=q,
        sort=sort,
    )
    return {"bags": jsonable_encoder(bags)}


@router.post("/bags", tags=["bags"], status_code=status.HTTP_201_CREATED)
async def create_bag(payload: BagInput, request: Request) -> dict[str, object]:
    """Create a bag."""
    bag = _container(request).bag_service.create_bag(**payload.model_dump())
    return jsonable_encoder(bag)


@router.get("/bags/stats", tags=["bags"])
async def bag_stats(request: Request) -> dict[str, object]:
    """Return collection statistics."""
    return jsonable_encoder(_container(request).bag_service.statistics())


@router.get("/bags/colors", tags=["bags"])
async def bag_colors(request: Request) -> dict[str, object]:
    """Return the distinct bag colors."""
    return {"colors": _container(request).bag_service.colors()}


@router.get("/bags/{bag_id}", tags=["bags"])
async def get_bag(bag_id: UUID, request: Request) -> dict[str, object]:
    """Return one bag."""
    return _found(_container(request).bag_service.store.get(bag_id))


@router.put("/bags/{bag_id}", tags=["bags"])
async def update_bag(
    bag_id: UUID, payload: BagInput, request: Request
) -> dict[str, object]:
    """Replace the editable fields of a bag."""
    service = _container(request).bag_service
    current = service.store.get(bag_id)
    if current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    service.update_bag(replace(current, **payload.model_dump()))
    return _found(service.store.get(bag_id))


@router.delete("/bags/{bag_id}", tags=["bags"])
async def delete_bag(bag_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a bag; deleting twice is harmless."""
    return _deleted(_container(request).bag_service.delete_bag(bag_id))


@router.post("/bags/{bag_id}/favorite", tags=["bags"])
async def toggle_bag_favorite(bag_id: UUID, request: Request) -> dict[str, object]:
    """Flip a bag's favorite flag."""
    return _found(_container(request).bag_service.toggle_favorite(bag_id))


@router.post("/bags/{bag_id}/use", tags=["bags"])
async def use_bag(bag_id: UUID, request: Request) -> dict[str, object]:
    """Mark a bag as carried now."""
    return _found(_container(request).bag_service.mark_as_used(bag_id))


# Notes


@router.get("/notes", tags=["notes"])
async def list_notes(
    request: Request,
    pinned: bool = False,  # noqa: FBT001, FBT002
    q: str | None = None,
    sort: str | None = None,
) -> dict[str, object]:
    """Return notes; without search or sort, pinned notes come first."""
    service = _container(request).note_service
    if not (pinned or q or sort):
        return {"notes": jsonable_encoder(service.list_notes())}
    notes = _query(
        service.store,
        NOTE_QUERY,
        filter_axis=None,
        filter_value=None,
        toggle_axis="pinned" if pinned else None,
        q=q,
        sort=sort,
    )
    return {"notes": jsonable_encoder(notes)}


@router.post("/notes", tags=["notes"], status_code=status.HTTP_201_CREATED)
async def create_note(payload: NoteInput, request: Request) -> dict[str, object]:
    """Create a note."""
    note = _container(request).note_service.create_note(**payload.model_dump())
    return jsonable_encoder(note)


@router.get("/notes/{note_id}", tags=["notes"])
async def get_note(note_id: UUID, request: Request) -> dict[str, object]:
    """Return one note."""
    return _found(_container(request).note_service.store.get(note_id))


@router.put("/notes/{note_id}", tags=["notes"])
async def update_note(
    note_id: UUID, payload: NoteInput, request: Request
) -> dict[str, object]:
    """Replace a note's title and content."""
    service = _container(request).note_service
    current = service.store.get(note_id)
    if current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    service.update_note(replace(current, **payload.model_dump()))
    return _found(service.store.get(note_id))


@router.delete("/notes/{note_id}", tags=["notes"])
async def delete_note(note_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a note."""
    return _deleted(_container(request).note_service.delete_note(note_id))


@router.post("/notes/{note_id}/pin", tags=["notes"])
async def toggle_note_pin(note_id: UUID, request: Request) -> dict[str, object]:
    """Pin or unpin a note."""
    return _found(_container(request).note_service.toggle_pin(note_id))


# Looks


@router.get("/looks", tags=["looks"])
async def list_looks(  # noqa: PLR0913
    request: Request,
    filter_axis: str | None = None,
    filter_value: str | None = None,
    favorites: bool = False,  # noqa: FBT001, FBT002
    q: str | None = None,
    sort: str | None = None,
) -> dict[str, object]:
    """Return looks, searchable by name or shade."""
    service = _container(request).look_service
    looks = _query(
        service.store,
        LOOK_QUERY,
        filter_axis=filter_axis,
        filter_value=filter_value,
        toggle_axis="favorites" if favorites else None,
        q=q,
        sort=sort,
    )
    return {"looks": jsonable_encoder(looks)}


@router.post("/looks", tags=["looks"], status_code=status.HTTP_201_CREATED)
async def create_look(payload: LookInput, request: Request) -> dict[str, object]:
    """Create a makeup look."""
    look = _container(request).look_service.create_look(**payload.model_dump())
    return jsonable_encoder(look)


@router.get("/looks/stats", tags=["looks"])
async def look_stats(request: Request) -> dict[str, object]:
    """Return look statistics."""
    return jsonable_encoder(_container(request).look_service.statistics())


@router.get("/looks/{look_id}", tags=["looks"])
async def get_look(look_id: UUID, request: Request) -> dict[str, object]:
    """Return one look."""
    return _found(_container(request).look_service.store.get(look_id))


@router.put("/looks/{look_id}", tags=["looks"])
async def update_look(
    look_id: UUID, payload: LookInput, request: Request
) -> dict[str, object]:
    """Replace the editable fields of a look."""
    service = _container(request).look_service
    current = service.store.get(look_id)
    if current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    fields = payload.model_dump()
    fields["main_shades"] = tuple(fields["main_shades"])
    fields["products_used"] = tuple(fields["products_used"])
    service.update_look(replace(current, **fields))
    return _found(service.store.get(look_id))


@router.delete("/looks/{look_id}", tags=["looks"])
async def delete_look(look_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a look."""
    return _deleted(_container(request).look_service.delete_look(look_id))


@router.post("/looks/{look_id}/favorite", tags=["looks"])
async def toggle_look_favorite(look_id: UUID, request: Request) -> dict[str, object]:
    """Flip a look's favorite flag."""
    return _found(_container(request).look_service.toggle_favorite(look_id))


# Products


@router.get("/products", tags=["products"])
async def list_products(
    request: Request,
    filter_axis: str | None = None,
    filter_value: str | None = None,
    q: str | None = None,
    sort: str | None = None,
) -> dict[str, object]:
    """Return products matching the active filter, search and sort."""
    service = _container(request).product_service
    products = _query(
        service.store,
        PRODUCT_QUERY,
        filter_axis=filter_axis,
        filter_value=filter_value,
        toggle_axis=None,
        q=q,
        sort=sort,
    )
    return {"products": jsonable_encoder(products)}


@router.post("/products", tags=["products"], status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductInput, request: Request) -> dict[str, object]:
    """Create a product."""
    service = _container(request).product_service
    product = service.create_product(**payload.model_dump())
    return jsonable_encoder(product)


@router.get("/products/stats", tags=["products"])
async def product_stats(request: Request) -> dict[str, object]:
    """Return shelf statistics."""
    return jsonable_encoder(_container(request).product_service.statistics())


@router.get("/products/locations", tags=["products"])
async def product_locations(request: Request) -> dict[str, object]:
    """Return storage locations with their products."""
    service = _container(request).product_service
    return {
        "locations": [
            {
                "name": location,
                "products": jsonable_encoder(service.products_in_location(location)),
            }
            for location in service.locations()
        ]
    }


@router.get("/products/{product_id}", tags=["products"])
async def get_product(product_id: UUID, request: Request) -> dict[str, object]:
    """Return one product."""
    return _found(_container(request).product_service.store.get(product_id))


@router.put("/products/{product_id}", tags=["products"])
async def update_product(
    product_id: UUID, payload: ProductInput, request: Request
) -> dict[str, object]:
    """Replace the editable fields of a product."""
    service = _container(request).product_service
    current = service.store.get(product_id)
    if current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    fields = payload.model_dump()
    fields["shades"] = tuple(fields["shades"])
    service.update_product(replace(current, **fields))
    return _found(service.store.get(product_id))


@router.delete("/products/{product_id}", tags=["products"])
async def delete_product(product_id: UUID, request: Request) -> dict[str, bool]:
    """Delete a product."""
    return _deleted(_container(request).product_service.delete_product(product_id))


@router.post("/products/{product_id}/use", tags=["products"])
async def use_product(product_id: UUID, request: Request) -> dict[str, object]:
    """Count one use of a product."""
    return _found(_container(request).product_service.record_use(product_id))


# Outfits and week plan


@router.get("/outfits", tags=["outfits"])
async def list_outfits(  # noqa: PLR0913
    request: Request,
    filter_axis: str | None = None,
    filter_value: str | None = None,
    favorites: bool = False,  # noqa: FBT001, FBT002
    q: str | None = None,
    sort: str | None = None,
) -> dict[str, object]:
    """Return outfits matching the active filter, search and sort."""
    service = _container(request).outfit_service
    outfits = _query(
        service.store,
        OUTFIT_QUERY,
        filter_axis=filter_axis,
        filter_value=filter_value,
        toggle_axis="favorites" if favorites else None,
        q=q,
        sort=sort,
    )
    return {"outfits": jsonable_encoder(outfits)}


@router.post("/outfits", tags=["outfits"], status_code=status.HTTP_201_CREATED)
async def create_outfit(payload: OutfitInput, request: Request) -> dict[str, object]:
    """Create an outfit."""
    outfit = _container(request).outfit_service.create_outfit(**payload.model_dump())
    return jsonable_encoder(outfit)


@router.get("/outfits/stats", tags=["outfits"])
async def outfit_stats(request: Request) -> dict[str, object]:
    """Return wardrobe statistics."""
    return jsonable_encoder(_container(request).outfit_service.statistics())


@router.get("/outfits/{outfit_id}", tags=["outfits"])
async def get_outfit(outfit_id: UUID, request: Request) -> dict[str, object]:
    """Return one outfit."""
    return _found(_container(request).outfit_service.store.get(outfit_id))


@router.put("/outfits/{outfit_id}", tags=["outfits"])
async def update_outfit(
    outfit_id: UUID, payload: OutfitInput, request: Request
) -> dict[str, object]:
    """Replace the editable fields of an outfit."""
    service = _container(request).outfit_service
    current = service.store.get(outfit_id)
    if current is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    service.update_outfit(replace(current, **payload.model_dump()))
    return _found(service.store.get(outfit_id))


@router.delete("/outfits/{outfit_id}", tags=["outfits"])
async def delete_outfit(outfit_id: UUID, request: Request) -> dict[str, bool]:
    """Delete an outfit and unplan it."""
    return _deleted(_container(request).outfit_service.delete_outfit(outfit_id))


@router.post("/outfits/{outfit_id}/favorite", tags=["outfits"])
async def toggle_outfit_favorite(
    outfit_id: UUID, request: Request
) -> dict[str, object]:
    """Flip an outfit's favorite flag."""
    return _found(_container(request).outfit_service.toggle_favorite(outfit_id))


@router.post("/outfits/{outfit_id}/worn", tags=["outfits"])
async def wear_outfit(outfit_id: UUID, request: Request) -> dict[str, object]:
    """Mark an outfit as worn now."""
    return _found(_container(request).outfit_service.mark_as_worn(outfit_id))


@router.get("/week-plan", tags=["outfits"])
async def get_week_plan(request: Request) -> dict[str, object]:
    """Return the planned outfit for each weekday."""
    plan = _container(request).outfit_service.week_plan()
    return {"days": jsonable_encoder(plan)}


@router.put("/week-plan/{day}", tags=["outfits"])
async def assign_week_day(
    day: Weekday, payload: PlanAssignment, request: Request
) -> dict[str, object]:
    """Plan an outfit for a weekday."""
    service = _container(request).outfit_service
    if not service.assign_day(day, payload.outfit_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"day": day, "outfit_id": str(payload.outfit_id)}


@router.delete("/week-plan/{day}", tags=["outfits"])
async def clear_week_day(day: Weekday, request: Request) -> dict[str, object]:
    """Clear the outfit planned for a weekday."""
    _container(request).outfit_service.clear_day(day)
    return {"day": day, "outfit_id": None}


# Journal


@router.get("/journal", tags=["journal"])
async def list_journal(request: Request) -> dict[str, object]:
    """Return day entries, most recent first."""
    return {"entries": jsonable_encoder(_container(request).journal_service.entries())}


@router.get("/journal/stats", tags=["journal"])
async def journal_stats(request: Request) -> dict[str, object]:
    """Return streaks and calendar counts."""
    return jsonable_encoder(_container(request).journal_service.statistics())


@router.get("/journal/{day}", tags=["journal"])
async def get_day(day: date, request: Request) -> dict[str, object]:
    """Return the entry for a day."""
    return _found(_container(request).journal_service.entry_for(day))


@router.post("/journal/{day}/habits", tags=["journal"])
async def toggle_day_habit(
    day: date, payload: HabitToggle, request: Request
) -> dict[str, object]:
    """Check or uncheck a habit for a day."""
    entry = _container(request).journal_service.toggle_habit(day, payload.habit)
    return {"entry": jsonable_encoder(entry)}


@router.put("/journal/{day}/note", tags=["journal"])
async def set_day_note(
    day: date, payload: DayNote, request: Request
) -> dict[str, object]:
    """Replace the note for a day."""
    entry = _container(request).journal_service.set_note(day, payload.note)
    return {"entry": jsonable_encoder(entry)}
