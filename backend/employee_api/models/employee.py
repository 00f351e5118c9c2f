"""
Employee Directory — Employee SQLAlchemy Model
================================================

What:  ORM model for the `employees` table.
Who:   Used by EmployeeRepository for queries and by Alembic for migrations.

Table Design:
    - Integer autoincrement id: assigned by the store on first flush and never
      changed afterwards. Ascending id is the insertion order every listing uses.
    - name: lookup key but NOT unique; duplicate names resolve to the lowest id.
    - email: optional and NOT unique at the storage layer. Uniqueness is a
      service-level check (EmployeeService.exists) made before save.
    - created_at: UTC, timezone-aware.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base


class Employee(Base):
    """
    A single employee record.

    Lifecycle:
        1. Constructed without an id: Employee(name="bob")
        2. Saved through the repository; the flush assigns id and created_at
        3. Read back by id, by name, or as part of the full listing
    There is no update or delete path in the service; delete_all() on the
    repository exists for test teardown.
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name; lookup key, duplicates allowed",
    )

    email: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        default=None,
        comment="Contact email; uniqueness enforced by the service, not the table",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this record was inserted (UTC)",
    )

    __table_args__ = (
        Index("idx_employees_name", "name"),
        Index("idx_employees_email", "email"),
    )

    def __init__(self, name: str, email: Optional[str] = None, **kwargs):
        # Positional name mirrors how callers build records: Employee("bob")
        super().__init__(name=name, email=email, **kwargs)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, name='{self.name}', email={self.email!r})>"
