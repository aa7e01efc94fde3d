from sqlalchemy import Column, Integer, String, UniqueConstraint

from app.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)

    # Renters are identified by name alone.
    __table_args__ = (
        UniqueConstraint("first_name", "last_name", name="uq_users_full_name"),
    )
