"""Document model for storing document records."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from docql.models.base import Base


class Document(Base):
    """A named document with an opaque file reference."""

    __tablename__ = "documents"
    # AUTOINCREMENT keeps ids monotonic: a deleted id is never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    file: Mapped[str] = mapped_column(String, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Document(id={self.id!r}, name={self.name!r})>"
