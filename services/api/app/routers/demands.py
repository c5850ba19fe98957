"""Demand endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException

from shared.schemas.demands import DemandCreate, DemandResponse

from .. import db

router = APIRouter()


@router.post("/demands", status_code=201, response_model=DemandResponse)
async def create_demand(body: DemandCreate):
    """Create a demand without going through a wizard session."""
    try:
        return db.create_demand(**body.model_dump())
    except db.DuplicateDemandError as exc:
        raise HTTPException(
            status_code=409,
            detail={"code": "DUPLICATE_DEMAND", "existing_id": exc.existing_id},
        )


@router.get("/demands", response_model=List[DemandResponse])
async def list_demands():
    return db.list_demands()


@router.get("/demands/{demand_id}", response_model=DemandResponse)
async def get_demand(demand_id: str):
    demand = db.get_demand(demand_id)
    if not demand:
        raise HTTPException(status_code=404, detail={"code": "DEMAND_NOT_FOUND"})
    return demand


@router.delete("/demands/{demand_id}")
async def delete_demand(demand_id: str):
    if not db.delete_demand(demand_id):
        raise HTTPException(status_code=404, detail={"code": "DEMAND_NOT_FOUND"})
    return {"status": "deleted", "demand_id": demand_id}
