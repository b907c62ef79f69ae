"""
In-app notifications.

Rows are appended by workflow events and only ever flipped to read by
their recipient.
"""
import logging
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from jobnest.core.errors import NotFoundError
from jobnest.db.models.notification import Notification, NOTIFICATION_TYPES

logger = logging.getLogger(__name__)


def notify(
    db: Session,
    user_id: int,
    title: str,
    message: str,
    type: str = "info",
    related_application_id: Optional[int] = None,
) -> Notification:
    """
    Queue a notification on the session.

    The caller commits, so the notification lands in the same transaction as
    the event that produced it.
    """
    if type not in NOTIFICATION_TYPES:
        raise ValueError(f"Unknown notification type: {type}")

    notification = Notification(
        user_id=user_id,
        title=title,
        message=message,
        type=type,
        is_read=False,
        related_application_id=related_application_id,
    )
    db.add(notification)
    return notification


def list_notifications(db: Session, user_id: int) -> Tuple[List[Notification], int]:
    notifications = (
        db.query(Notification)
        .filter(Notification.user_id == user_id)
        .order_by(Notification.created_at.desc(), Notification.id.desc())
        .all()
    )
    unread = sum(1 for n in notifications if not n.is_read)
    return notifications, unread


def mark_read(db: Session, user_id: int, notification_id: int) -> Notification:
    notification = db.query(Notification).filter(
        Notification.id == notification_id,
        Notification.user_id == user_id,
    ).first()
    if not notification:
        raise NotFoundError("Notification not found")

    if not notification.is_read:
        notification.is_read = True
        db.commit()
        db.refresh(notification)
    return notification


def mark_all_read(db: Session, user_id: int) -> int:
    updated = (
        db.query(Notification)
        .filter(Notification.user_id == user_id, Notification.is_read.is_(False))
        .update({Notification.is_read: True}, synchronize_session=False)
    )
    db.commit()
    logger.debug(f"Notifications marked read: user_id={user_id}, count={updated}")
    return updated
