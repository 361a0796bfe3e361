"""
Notification API routes.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..dependencies import get_notification_bus
from ..schemas import NotificationOut
from ...core.notifications import NotificationBus


router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=List[NotificationOut])
async def list_notifications(
    bus: NotificationBus = Depends(get_notification_bus)
) -> List[NotificationOut]:
    """Current notifications, oldest first."""
    return [NotificationOut(**n.to_dict()) for n in bus.notifications]


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def dismiss_notification(
    notification_id: str,
    bus: NotificationBus = Depends(get_notification_bus)
) -> None:
    if not bus.dismiss(notification_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found"
        )
