"""Notification endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user, get_db
from fintrack.core.exceptions import NotFoundError
from fintrack.models.user import User
from fintrack.repositories.notification import NotificationRepository
from fintrack.schemas.notification import NotificationResponse, NotificationUpdate

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get(
    "",
    response_model=list[NotificationResponse],
    summary="List notifications",
    description="Newest first.",
)
async def list_notifications(
    unread_only: bool = Query(False, description="When true, return only unread notifications."),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[NotificationResponse]:
    notifications = await NotificationRepository(db).list_for_user(current_user.id, unread_only)
    return [NotificationResponse.model_validate(n) for n in notifications]


@router.patch(
    "/{notification_id}",
    response_model=NotificationResponse,
    summary="Mark notification read or unread",
    responses={404: {"description": "Notification not found"}},
)
async def update_notification(
    notification_id: UUID,
    data: NotificationUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> NotificationResponse:
    repo = NotificationRepository(db)
    notification = await repo.get_by_user(current_user.id, notification_id)
    if notification is None:
        raise NotFoundError("NF_006", details={"notification_id": str(notification_id)})

    # update() skips None only, so False is applied.
    notification = await repo.update(notification, {"is_read": data.is_read})
    return NotificationResponse.model_validate(notification)
