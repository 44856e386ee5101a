"""Audit trail for admin decisions on applications"""
import hashlib
import json
import logging
from typing import Any, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from foodhub.models.audit import Audit
from foodhub.core.enums import AuditAction

logger = logging.getLogger(__name__)


def hash_payload(payload: Any) -> str:
    if hasattr(payload, "model_dump"):
        payload_dict = payload.model_dump(exclude_unset=True)
    elif isinstance(payload, dict):
        payload_dict = payload
    else:
        payload_dict = {}

    payload_str = json.dumps(payload_dict, sort_keys=True, default=str)
    return hashlib.sha256(payload_str.encode()).hexdigest()


def log_audit(
    db: AsyncSession,
    user_id: int,
    action: AuditAction,
    payload: Optional[dict] = None
) -> Audit:
    """Stage an audit row in the caller's transaction.

    Nothing is flushed here: the row commits or rolls back together with the
    change it describes.
    """
    audit_record = Audit(
        user_id=int(user_id),
        action=str(action),
        payload_hash=hash_payload(payload or {}),
    )
    db.add(audit_record)
    logger.debug(f"Audit staged: action={action} user={user_id}")
    return audit_record
