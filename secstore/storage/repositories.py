"""
secstore Security Repository

Data access layer for the securities table, plus the SQL-backed
SecurityRegistry that native-id storages hydrate from.
"""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from secstore.core.base import SecurityRegistry
from secstore.core.exceptions import InvalidArgumentError, RegistryError
from secstore.core.models import Security, matches_criteria
from secstore.storage.database import get_session
from secstore.storage.models import SecurityRecord

logger = logging.getLogger(__name__)


# =============================================================================
# SECURITY REPOSITORY
# =============================================================================

class SecurityRepository:
    """Repository for security operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, security: Security) -> SecurityRecord:
        """Insert or update a security by security_id."""
        record = self.get_by_security_id(security.security_id)
        if record is None:
            record = SecurityRecord()
            self.session.add(record)
        record.apply(security)

        self.session.flush()
        logger.debug("Saved security %s", security.security_id)
        return record

    def get_by_security_id(self, security_id: str) -> Optional[SecurityRecord]:
        result = self.session.execute(
            select(SecurityRecord).where(SecurityRecord.security_id == security_id)
        )
        return result.scalar_one_or_none()

    def get_all(self) -> List[SecurityRecord]:
        result = self.session.execute(
            select(SecurityRecord).order_by(SecurityRecord.created_at, SecurityRecord.security_id)
        )
        return list(result.scalars().all())

    def find(self, criteria: Security) -> List[SecurityRecord]:
        """
        Partial-match search.

        Exact columns are filtered in SQL; the full rule (substring and
        case handling) is applied to the narrowed rows.
        """
        query = select(SecurityRecord)
        if criteria.security_id:
            query = query.where(func.lower(SecurityRecord.security_id) == criteria.security_id.lower())
        else:
            if criteria.board:
                query = query.where(func.lower(SecurityRecord.board) == criteria.board.lower())
            if criteria.security_type is not None:
                query = query.where(SecurityRecord.security_type == criteria.security_type.value)

        result = self.session.execute(query.order_by(SecurityRecord.security_id))
        return [r for r in result.scalars().all() if matches_criteria(r.to_security(), criteria)]

    def list_ids(self) -> List[str]:
        result = self.session.execute(
            select(SecurityRecord.security_id).order_by(SecurityRecord.security_id)
        )
        return list(result.scalars().all())


# =============================================================================
# SQL REGISTRY
# =============================================================================

class SqlSecurityRegistry(SecurityRegistry):
    """
    SecurityRegistry backed by the securities table.

    Each call runs in its own session. Returned Security objects are fresh
    copies built from the rows.
    """

    def securities(self) -> List[Security]:
        try:
            with get_session() as session:
                return [r.to_security() for r in SecurityRepository(session).get_all()]
        except SQLAlchemyError as e:
            logger.error("Failed to enumerate securities: %s", e)
            raise RegistryError("failed to enumerate securities") from e

    def save(self, security: Security) -> None:
        if security is None:
            raise InvalidArgumentError("security is required")
        if not security.security_id:
            raise InvalidArgumentError("security_id is required to save a security")

        try:
            with get_session() as session:
                SecurityRepository(session).save(security)
        except SQLAlchemyError as e:
            logger.error("Failed to save security %s: %s", security.security_id, e)
            raise RegistryError(f"failed to save security {security.security_id}") from e

    def lookup(self, criteria: Security) -> List[Security]:
        try:
            with get_session() as session:
                return [r.to_security() for r in SecurityRepository(session).find(criteria)]
        except SQLAlchemyError as e:
            logger.error("Security lookup failed: %s", e)
            raise RegistryError("security lookup failed") from e

    def get_security_ids(self) -> List[str]:
        try:
            with get_session() as session:
                return SecurityRepository(session).list_ids()
        except SQLAlchemyError as e:
            logger.error("Failed to list security ids: %s", e)
            raise RegistryError("failed to list security ids") from e
