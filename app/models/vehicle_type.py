from sqlalchemy import CheckConstraint, Column, Integer, String

from app.database import Base


class VehicleType(Base):
    __tablename__ = "vehicle_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    wheel_count = Column(Integer, nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("wheel_count IN (2, 4)", name="ck_vehicle_types_wheel_count"),
        CheckConstraint("name <> ''", name="ck_vehicle_types_name_not_empty"),
    )
