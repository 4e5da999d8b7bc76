"""SQLAlchemy models for the Roster service."""

from sqlalchemy import Index, Integer, String
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


class Player(Base):
    """Model for players on the roster."""

    __tablename__ = "players"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False, default="")
    # Stored as text, so ORDER BY number is a string ordering
    number: Mapped[str] = mapped_column(String, nullable=False, default="")
    position: Mapped[str] = mapped_column(String, nullable=False, default="")
    height: Mapped[str] = mapped_column(String, nullable=False, default="")
    weight: Mapped[str] = mapped_column(String, nullable=False, default="")
    age: Mapped[str] = mapped_column(String, nullable=False, default="")
    experience: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    college: Mapped[str] = mapped_column(String, nullable=False, default="")

    __table_args__ = (
        Index("idx_players_position", "position"),
    )

    def __repr__(self) -> str:
        return f"<Player(id={self.id}, name='{self.name}', number='{self.number}')>"
