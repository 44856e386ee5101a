"""Admin decisions on vendor, dish and review applications.

Approval materializes the live Vendor/Dish/Review record in the same
transaction as the status change, so a failed insert leaves the application
untouched.
"""
import logging
from typing import Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from foodhub.core.audit_log import log_audit
from foodhub.core.config import settings
from foodhub.core.enums import (
    AccountType,
    ApplicationDecision,
    ApplicationKind,
    ApplicationStatus,
    AuditAction,
)
from foodhub.core.exceptions import AlreadyDecided, ResourceNotFound, UnsupportedDecision
from foodhub.core.metrics import record_decision, track_db_operation
from foodhub.models.application import APPLICATION_MODELS, VendorApplication
from foodhub.models.base import utcnow
from foodhub.models.user import User
from foodhub.schemas.application import (
    DishApplicationCreate,
    ReviewApplicationCreate,
    VendorApplicationCreate,
)

logger = logging.getLogger(__name__)

# Statuses from which an admin may still decide
DECIDABLE_STATUSES = frozenset({ApplicationStatus.PENDING, ApplicationStatus.UNDER_REVIEW})

DECISION_STATUS = {
    ApplicationDecision.APPROVE: ApplicationStatus.APPROVED,
    ApplicationDecision.REJECT: ApplicationStatus.REJECTED,
    ApplicationDecision.REVIEW: ApplicationStatus.UNDER_REVIEW,
}

DECISION_AUDIT_ACTION = {
    ApplicationDecision.APPROVE: AuditAction.APPROVE_APPLICATION,
    ApplicationDecision.REJECT: AuditAction.REJECT_APPLICATION,
    ApplicationDecision.REVIEW: AuditAction.REVIEW_APPLICATION,
}

ApplicationCreate = Union[VendorApplicationCreate, DishApplicationCreate, ReviewApplicationCreate]


def _model_for(kind: Union[ApplicationKind, str]):
    return APPLICATION_MODELS[ApplicationKind(kind)]


def _submitted_table(db, payload) -> str:
    return _model_for(payload.kind).__tablename__


@track_db_operation("insert", _submitted_table)
async def submit_application(db: AsyncSession, payload: ApplicationCreate):
    """Create a pending application from a submission payload."""
    model = _model_for(payload.kind)
    application = model(
        **payload.model_dump(exclude={"kind"}),
        status=ApplicationStatus.PENDING,
    )
    db.add(application)
    await db.commit()
    await db.refresh(application)

    logger.info(f"{application.kind} application {application.id} submitted")
    return application


async def get_application(db: AsyncSession, kind: Union[ApplicationKind, str], application_id: int):
    model = _model_for(kind)
    res = await db.execute(select(model).where(model.id == application_id))
    application = res.scalars().first()
    if application is None:
        raise ResourceNotFound(f"{ApplicationKind(kind).value.capitalize()} application", application_id)
    return application


async def list_applications(
    db: AsyncSession,
    kind: Union[ApplicationKind, str],
    status: Optional[Union[ApplicationStatus, str]] = None,
    limit: int = 15,
    offset: int = 0,
) -> list:
    model = _model_for(kind)
    q = select(model)

    if status:
        q = q.where(model.status == ApplicationStatus(status))

    q = q.order_by(model.created_at.desc(), model.id.desc()).limit(limit).offset(offset)
    res = await db.execute(q)
    return list(res.scalars().all())


def _check_supported(application, decision: ApplicationDecision) -> None:
    if decision == ApplicationDecision.REVIEW and not application.supports_under_review:
        raise UnsupportedDecision(application.kind, decision)


def _check_still_open(application, decision: ApplicationDecision) -> None:
    if settings.ENFORCE_PENDING_DECISIONS and application.status not in DECIDABLE_STATUSES:
        raise AlreadyDecided(application.status, decision)


def _record_decision(db: AsyncSession, application, decision: ApplicationDecision, admin_id: int, notes: Optional[str]):
    application.status = DECISION_STATUS[decision]
    application.admin_notes = notes
    application.reviewed_at = utcnow()
    application.reviewed_by = admin_id
    db.add(application)

    log_audit(db, admin_id, DECISION_AUDIT_ACTION[decision], {
        "kind": str(application.kind),
        "application_id": application.id,
        "notes": notes,
    })


def _decided_table(db, application, *args) -> str:
    return application.__tablename__


@track_db_operation("update", _decided_table)
async def _decide(db: AsyncSession, application, decision: ApplicationDecision, admin_id: int, notes: Optional[str]):
    _check_supported(application, decision)

    kind = str(application.kind)
    application_id = application.id
    entity = None

    # Status is re-read under a row lock held until commit or rollback, so a
    # decision made meanwhile in another session is seen here.
    await db.refresh(application, with_for_update=True)
    try:
        _check_still_open(application, decision)
    except AlreadyDecided:
        await db.rollback()
        record_decision(kind, decision, "refused")
        logger.warning(f"{decision} of {kind} application {application_id} refused: already decided")
        raise

    try:
        _record_decision(db, application, decision, admin_id, notes)

        if decision == ApplicationDecision.APPROVE and application.is_approved():
            entity = application.build_entity()
            db.add(entity)

            if isinstance(application, VendorApplication):
                applicant = await db.get(User, application.user_id)
                if applicant is None:
                    raise ResourceNotFound("User", application.user_id)
                applicant.account_type = AccountType.VENDOR
                db.add(applicant)

        await db.commit()
    except Exception:
        await db.rollback()
        record_decision(kind, decision, "rolled_back")
        logger.error(f"{decision} of {kind} application {application_id} rolled back", exc_info=True)
        raise

    await db.refresh(application)
    if entity is not None:
        await db.refresh(entity)

    record_decision(kind, decision, "applied")
    logger.info(f"{kind} application {application_id}: {decision} by admin {admin_id}")
    return entity


async def approve(db: AsyncSession, application, admin_id: int, notes: Optional[str] = None):
    """Approve an application and return the live entity created from it."""
    return await _decide(db, application, ApplicationDecision.APPROVE, admin_id, notes)


async def reject(db: AsyncSession, application, admin_id: int, notes: Optional[str] = None) -> None:
    await _decide(db, application, ApplicationDecision.REJECT, admin_id, notes)


async def put_under_review(db: AsyncSession, application, admin_id: int, notes: Optional[str] = None) -> None:
    await _decide(db, application, ApplicationDecision.REVIEW, admin_id, notes)


DECISION_HANDLERS = {
    ApplicationDecision.APPROVE: approve,
    ApplicationDecision.REJECT: reject,
    ApplicationDecision.REVIEW: put_under_review,
}


async def decide_application(
    db: AsyncSession,
    kind: Union[ApplicationKind, str],
    application_id: int,
    decision: Union[ApplicationDecision, str],
    admin_id: int,
    notes: Optional[str] = None,
):
    """Load an application by id and apply an admin decision to it.

    Returns the created entity for approvals, None otherwise.
    """
    application = await get_application(db, kind, application_id)
    handler = DECISION_HANDLERS[ApplicationDecision(decision)]
    return await handler(db, application, admin_id, notes)
