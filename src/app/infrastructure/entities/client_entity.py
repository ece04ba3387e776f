from datetime import date, datetime
from sqlalchemy import Date, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.shared.database.database import Base


class ClientEntity(Base):
    """SQLAlchemy model for the clientes table."""
    __tablename__ = "clientes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("nombre", String(100))
    last_name: Mapped[str] = mapped_column("apellido", String(100))
    age: Mapped[int] = mapped_column("edad", Integer)
    birth_date: Mapped[date] = mapped_column("fecha_nacimiento", Date)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
