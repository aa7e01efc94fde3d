from sqlalchemy import CheckConstraint, Column, Date, Index, Integer, ForeignKey

from app.database import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("start_date <= end_date", name="ck_bookings_date_order"),
        Index("ix_bookings_vehicle_dates", "vehicle_id", "start_date", "end_date"),
    )
