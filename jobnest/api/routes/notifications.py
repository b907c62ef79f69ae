from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobnest.db.session import get_db
from jobnest.db.models.user import User
from jobnest.core.auth_dependency import get_current_user
from jobnest.schemas.notification import NotificationResponse, NotificationListResponse
from jobnest.services import notification_service

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=NotificationListResponse)
def list_notifications(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    notifications, unread = notification_service.list_notifications(db, current_user.id)
    return {"notifications": notifications, "unread_count": unread}


@router.post("/{notification_id}/read", response_model=NotificationResponse)
def mark_read(
    notification_id: int,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return notification_service.mark_read(db, current_user.id, notification_id)


@router.post("/mark-all-read")
def mark_all_read(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    updated = notification_service.mark_all_read(db, current_user.id)
    return {"message": "All notifications marked as read", "updated": updated}
