"""Import all models so SQLAlchemy metadata knows about them."""
from musicare.models.base import Base
from musicare.models.file_record import FileRecord
from musicare.models.person import Person

__all__ = ["Base", "FileRecord", "Person"]
