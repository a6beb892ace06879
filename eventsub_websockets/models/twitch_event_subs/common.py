from typing import Optional

from pydantic import BaseModel, ConfigDict


class EventSubModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Transport(EventSubModel):
    method: str
    session_id: Optional[str] = None
    callback: Optional[str] = None
    connected_at: Optional[str] = None
    disconnected_at: Optional[str] = None


class Subscription(EventSubModel):
    id: str
    type: str
    version: str
    status: str
    cost: int
    created_at: str
    transport: Optional[Transport] = None


class NotificationMetadata(EventSubModel):
    message_id: str
    message_type: str
    message_timestamp: str
    subscription_type: Optional[str] = None
    subscription_version: Optional[str] = None


class WebsocketMessage(EventSubModel):
    """Any frame received on the EventSub WebSocket, payload left untyped."""

    metadata: NotificationMetadata
    payload: Optional[dict] = None
