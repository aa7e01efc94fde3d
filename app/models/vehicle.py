from sqlalchemy import CheckConstraint, Column, Integer, String, ForeignKey

from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    model_name = Column(String, nullable=False)
    type_id = Column(Integer, ForeignKey("vehicle_types.id"), nullable=False, index=True)

    __table_args__ = (
        CheckConstraint("model_name <> ''", name="ck_vehicles_model_name_not_empty"),
    )
