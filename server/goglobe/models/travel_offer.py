"""Travel offer model definition."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..core.database import Base

if TYPE_CHECKING:
    from .property import Property


travel_properties = Table(
    "travel_properties",
    Base.metadata,
    Column("travel_offer_id", Integer, ForeignKey("travel_offers.id", ondelete="CASCADE"), primary_key=True),
    Column("property_id", Integer, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
)


class TravelOffer(Base):
    """A package trip sold by an agency."""

    __tablename__ = "travel_offers"

    # Primary key
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Foreign keys
    agency_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("agencies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True
    )
    city_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("cities.id", ondelete="CASCADE"), nullable=False, index=True
    )
    hotel_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )

    # Offer details
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    departure_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    return_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    person_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    is_feeding_included: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        nullable=False,
        server_default=func.now()
    )

    # Constraints
    __table_args__ = (
        CheckConstraint("person_count > 0", name="ck_travel_offer_person_count_positive"),
        CheckConstraint("price >= 0", name="ck_travel_offer_price_non_negative"),
        CheckConstraint("return_date >= departure_date", name="ck_travel_offer_dates_ordered"),
    )

    # Relationships
    properties: Mapped[list["Property"]] = relationship(
        "Property",
        secondary=travel_properties,
        lazy="selectin",
        order_by="Property.id"
    )

    def __repr__(self) -> str:
        return (
            f"<TravelOffer(id={self.id}, agency_id={self.agency_id}, "
            f"departure_date={self.departure_date}, price={self.price})>"
        )
