from typing import Any, List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from app.api import deps
from app.db.mock_db import MemoryStore
from app.models.content import TeamMemberCreate, TeamMemberResponse, TeamMemberUpdate

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[TeamMemberResponse])
async def read_team(store: MemoryStore = Depends(deps.get_store)) -> Any:
    return store.team_members.all()


@router.get("/{member_id}", response_model=TeamMemberResponse)
async def read_team_member(member_id: int, store: MemoryStore = Depends(deps.get_store)) -> Any:
    member = store.team_members.get(member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Team member not found")
    return member


@admin_router.post("", response_model=TeamMemberResponse, status_code=status.HTTP_201_CREATED)
async def create_team_member(
    member_in: TeamMemberCreate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    return store.team_members.insert(member_in.model_dump())


@admin_router.put("/{member_id}", response_model=TeamMemberResponse)
async def update_team_member(
    member_id: int,
    update: TeamMemberUpdate,
    store: MemoryStore = Depends(deps.get_store),
) -> Any:
    member = store.team_members.update(member_id, update.changes())
    if not member:
        raise HTTPException(status_code=404, detail="Team member not found")
    return member


@admin_router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team_member(member_id: int, store: MemoryStore = Depends(deps.get_store)) -> Response:
    if not store.team_members.delete(member_id):
        raise HTTPException(status_code=404, detail="Team member not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
