from sqlalchemy import Boolean, Column, Integer, Text

from ..database import Base


class Todo(Base):
    # Table and column names follow the existing schema, hence the camelCase column.
    __tablename__ = "Todo"
    # Ids are never handed out twice, including on SQLite.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(Text, nullable=False)
    is_completed = Column("isCompleted", Boolean, nullable=False, default=False, server_default="0")

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "isCompleted": bool(self.is_completed)}
