from fastapi import APIRouter

from app.schemas.common import HealthSchema

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthSchema)
def health():
    return HealthSchema()
