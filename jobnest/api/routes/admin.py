from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.core.auth_dependency import require_admin
from jobnest.services import admin_service

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/stats")
def site_stats(
    current_user: User = Depends(require_admin),
    db: Session = Depends(get_db)
):
    return admin_service.stats(db)
