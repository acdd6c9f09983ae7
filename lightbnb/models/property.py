from sqlalchemy import Integer, String, ForeignKey, Text, Boolean, true
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db import Base

class Property(Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    thumbnail_photo_url: Mapped[str | None] = mapped_column(String(255))
    cover_photo_url: Mapped[str | None] = mapped_column(String(255))
    # Integer cents
    cost_per_night: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    parking_spaces: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bathrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    number_of_bedrooms: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    country: Mapped[str | None] = mapped_column(String(255))
    street: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(255), index=True)
    province: Mapped[str | None] = mapped_column(String(255))
    post_code: Mapped[str | None] = mapped_column(String(255))

    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=true())

    owner: Mapped["User"] = relationship(back_populates="properties")
    reservations: Mapped[list["Reservation"]] = relationship(back_populates="property", cascade="all, delete-orphan")
    reviews: Mapped[list["PropertyReview"]] = relationship(back_populates="property", cascade="all, delete-orphan")
