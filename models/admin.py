# models/admin.py
from pydantic import BaseModel
from typing import Optional
from datetime import datetime

class ModerationPayload(BaseModel):
    reason: Optional[str] = None

# Response for audit log item
class AuditItem(BaseModel):
    id: str
    actor_email: Optional[str] = None
    action: str
    resource_type: str
    resource_id: str
    before: Optional[dict] = None
    after: Optional[dict] = None
    reason: Optional[str] = None
    timestamp: Optional[datetime] = None
