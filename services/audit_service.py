# services/audit_service.py
from db.db_operation import mongo_conn
from datetime import datetime
from utils.logger import get_logger

logger = get_logger("Audit_Service")

async def record_audit(actor_email: str | None, action: str, resource_id: str, before: dict | None = None,
                       after: dict | None = None, reason: str | None = None, resource_type: str = "restaurant"):
    await mongo_conn.audit_logs.insert_one({
        "actor_email": actor_email,
        "action": action,
        "resource_type": resource_type,
        "resource_id": resource_id,
        "before": before,
        "after": after,
        "reason": reason,
        "timestamp": datetime.utcnow()
    })

async def list_audit_logs(skip: int = 0, limit: int = 50, resource_id: str | None = None):
    """
    Simple pagination for audit logs, newest first.
    """
    q = {}
    if resource_id:
        q["resource_id"] = resource_id
    cursor = mongo_conn.audit_logs.find(q).sort("timestamp", -1).skip(skip).limit(limit)
    items = await cursor.to_list(length=limit)
    return [
        {
            "id": str(a["_id"]),
            "actor_email": a.get("actor_email"),
            "action": a["action"],
            "resource_type": a["resource_type"],
            "resource_id": a["resource_id"],
            "before": a.get("before"),
            "after": a.get("after"),
            "reason": a.get("reason"),
            "timestamp": a.get("timestamp")
        } for a in items
    ]
