"""Person model - sample CRUD table."""
from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column
from musicare.models.base import Base


class Person(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(200), nullable=False)
    last_name: Mapped[str] = mapped_column(String(200), nullable=False)
