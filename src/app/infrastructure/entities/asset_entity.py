from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.shared.database.database import Base
from src.app.infrastructure.entities.client_entity import ClientEntity


class AssetEntity(Base):
    """SQLAlchemy model for Asset table."""
    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint("value > 0", name="ck_assets_value_positive"),
    )

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    value: Mapped[float] = mapped_column(Float, nullable=False)
    # RESTRICT: a client that still owns assets cannot be deleted
    client_id: Mapped[UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="RESTRICT"),
        nullable=False,
        index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )

    # Many-to-one only; ClientEntity has no collection so deletes never cascade or nullify
    client: Mapped[ClientEntity] = relationship(ClientEntity)
