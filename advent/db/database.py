"""Database connection, session management and the run history store."""

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, List, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from ..config import DB_PATH
from .models import Base, UnitRun

if TYPE_CHECKING:
    from ..runner import UnitOutcome


def make_engine(db_path: Path = DB_PATH) -> Engine:
    """Create a SQLite engine, creating the parent directory if needed."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{db_path}", echo=False)


def init_db(engine: Engine) -> None:
    """Initialize database tables."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def session_scope(factory: sessionmaker) -> Iterator[Session]:
    """Context manager for database sessions."""
    db = factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def _millis(delta) -> Optional[int]:
    return None if delta is None else int(delta.total_seconds() * 1000)


class RunHistory:
    """Records every unit run and answers simple queries over them."""

    def __init__(self, db_path: Path = DB_PATH):
        self.engine = make_engine(db_path)
        init_db(self.engine)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    def close(self) -> None:
        self.engine.dispose()

    def record(self, group: str, outcome: "UnitOutcome") -> UnitRun:
        result = outcome.result
        row = UnitRun(
            group=group,
            unit=outcome.number,
            status=outcome.status,
            part1=result.part1 if result else None,
            part1_ms=_millis(result.part1_time) if result else None,
            part2=result.part2 if result else None,
            part2_ms=_millis(result.part2_time) if result else None,
            trial_passed=outcome.trial.passed if outcome.trial else None,
            error=outcome.error,
        )
        with session_scope(self.SessionLocal) as db:
            db.add(row)
        return row

    def recent(
        self,
        limit: int = 20,
        group: Optional[str] = None,
        unit: Optional[int] = None,
    ) -> List[UnitRun]:
        """Most recent runs first."""
        with session_scope(self.SessionLocal) as db:
            query = db.query(UnitRun)
            if group is not None:
                query = query.filter(UnitRun.group == group)
            if unit is not None:
                query = query.filter(UnitRun.unit == unit)
            return query.order_by(UnitRun.created_at.desc(), UnitRun.id.desc()).limit(limit).all()

    def best(self, group: str, unit: int) -> Optional[UnitRun]:
        """Fastest successful run of a unit."""
        with session_scope(self.SessionLocal) as db:
            return (
                db.query(UnitRun)
                .filter(
                    UnitRun.group == group,
                    UnitRun.unit == unit,
                    UnitRun.status == "ok",
                )
                .order_by((UnitRun.part1_ms + UnitRun.part2_ms).asc())
                .first()
            )
