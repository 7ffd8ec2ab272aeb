"""SQLAlchemy models for run history."""

from datetime import datetime
from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class UnitRun(Base):
    """One real run of a unit, successful or not."""

    __tablename__ = "unit_runs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    group = Column(String(16), nullable=False)  # e.g. "2015"
    unit = Column(Integer, nullable=False)

    # ok, failed, unregistered, unavailable
    status = Column(String(16), nullable=False)

    part1 = Column(Text, nullable=True)
    part1_ms = Column(Integer, nullable=True)
    part2 = Column(Text, nullable=True)
    part2_ms = Column(Integer, nullable=True)

    # None when no trial ran
    trial_passed = Column(Boolean, nullable=True)
    error = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("ix_unit_runs_group_unit", "group", "unit"),
    )

    def __repr__(self):
        return f"<UnitRun {self.group}-{self.unit} {self.status}>"
