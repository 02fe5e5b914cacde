"""Student ORM - one row per registered identity subject.

Invariants:
    - id is the identity-service subject id (not generated here)
    - email is set once at registration and never updated through the API
    - Never deleted

Design Decisions:
    - Personal fields (ic_number, phone_number, address, emergency_contact) are opaque Text:
      clients may store ciphertext, this service neither encrypts nor decrypts
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class Student(TimestampMixin, Base):
    """Registered student profile."""
    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Opaque, possibly pre-encrypted
    ic_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    phone_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    emergency_contact: Mapped[str | None] = mapped_column(Text, nullable=True)

    date_of_birth: Mapped[str | None] = mapped_column(String(32), nullable=True)
    program: Mapped[str | None] = mapped_column(String(200), nullable=True)
    enrollment_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
