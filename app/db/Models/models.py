from sqlalchemy import Column, Index, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

class URLMapping(Base):
    __tablename__ = "url"

    id = Column(Integer, primary_key=True)
    alias = Column(String, unique=True, nullable=False)
    url = Column(String, nullable=False)

    # AUTOINCREMENT keeps ids monotonic, deleted ids are never handed out again
    __table_args__ = (
        Index("idx_alias", "alias"),
        {"sqlite_autoincrement": True},
    )

    def __repr__(self):
        return f"<URLMapping id={self.id} alias={self.alias!r}>"
