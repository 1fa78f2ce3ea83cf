"""
secstore Database Models

SQLAlchemy model for the persistent security registry.
"""

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Uuid,
    func,
)
from sqlalchemy.orm import declarative_base

from secstore.core.enums import SecurityType
from secstore.core.models import Security

Base = declarative_base()


# =============================================================================
# SECURITY RECORD
# =============================================================================

class SecurityRecord(Base):
    """
    Stores every known security.

    This is the system of record; native-id caches are rebuilt from it on
    startup.
    """
    __tablename__ = "securities"

    # Primary key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Identification
    security_id = Column(String(100), unique=True, nullable=False, index=True)
    code = Column(String(50), nullable=False, default="", index=True)
    board = Column(String(50), nullable=False, default="", index=True)
    name = Column(String(200), nullable=False, default="")

    # Instrument details
    security_type = Column(String(20))
    currency = Column(String(10), nullable=False, default="")
    price_step = Column(Float)
    decimals = Column(Integer)

    # Adapter metadata (IG epic, IBKR conId, ...)
    extension_info = Column(JSON)

    __table_args__ = (
        Index("ix_securities_code_board", "code", "board"),
    )

    def apply(self, security: Security) -> None:
        """Copy field values from a Security."""
        self.security_id = security.security_id
        self.code = security.code or ""
        self.board = security.board or ""
        self.name = security.name or ""
        self.security_type = security.security_type.value if security.security_type else None
        self.currency = security.currency or ""
        self.price_step = security.price_step
        self.decimals = security.decimals
        self.extension_info = (
            dict(security.extension_info) if security.extension_info is not None else None
        )

    def to_security(self) -> Security:
        return Security(
            security_id=self.security_id,
            code=self.code or "",
            board=self.board or "",
            name=self.name or "",
            security_type=SecurityType(self.security_type) if self.security_type else None,
            currency=self.currency or "",
            price_step=self.price_step,
            decimals=self.decimals,
            extension_info=dict(self.extension_info) if self.extension_info is not None else None,
        )

    def __repr__(self):
        return f"<SecurityRecord {self.security_id}>"
