"""Booth manager login, profile and paper stock."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from printbooth.database import get_db
from printbooth.dependencies import require_booth_manager
from printbooth.models.booth_manager import BoothManager
from printbooth.schemas.accounts import BoothManagerLogin, PaperCountUpdate
from printbooth.services.accounts import authenticate_booth_manager, update_paper_count
from printbooth.services.auth import create_access_token
from printbooth.utils.responses import respond_success

router = APIRouter(prefix="/booth-managers", tags=["booth-managers"])


@router.post("/login")
def login(data: BoothManagerLogin, db: Session = Depends(get_db)):
    manager = authenticate_booth_manager(db, data.email, data.password)
    if not manager:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if not manager.is_active:
        raise HTTPException(status_code=401, detail="Account is deactivated")
    token = create_access_token(manager.id)
    return respond_success(200, "Login successful", {"token": token, "booth_manager": manager.to_public_dict()})


@router.get("/profile")
def profile(manager: BoothManager = Depends(require_booth_manager)):
    return respond_success(data={"booth_manager": manager.to_public_dict()})


@router.put("/paper-count")
def paper_count(
    data: PaperCountUpdate,
    manager: BoothManager = Depends(require_booth_manager),
    db: Session = Depends(get_db),
):
    manager = update_paper_count(db, manager, data.loaded_paper, data.operation)
    return respond_success(
        200,
        "Paper count updated successfully",
        {"loaded_paper": manager.loaded_paper, "paper_capacity": manager.paper_capacity},
    )
