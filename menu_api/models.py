from sqlalchemy import (
    BigInteger,
    Column,
    Integer,
    String,
    DateTime,
    func,
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class MenuItem(Base):
    """A dish on the restaurant menu. Names are unique (case-sensitive)."""
    __tablename__ = "menu_items"

    # AUTOINCREMENT on SQLite so ids of deleted rows are never handed out again;
    # SQLite only aliases the rowid for an INTEGER (not BIGINT) primary key
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True, index=True, autoincrement=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItem id={self.id} name={self.name!r}>"
