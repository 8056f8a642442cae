from database import Base
from sqlalchemy import BigInteger, Column, Integer, Text

# SQLite only autoincrements a column declared exactly INTEGER PRIMARY KEY
BigIntId = BigInteger().with_variant(Integer, "sqlite")


class ShortenedUrl(Base):
    __tablename__ = "url"

    id = Column(BigIntId, primary_key=True, autoincrement=True)
    url = Column(Text, nullable=False)
    visit = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<ShortenedUrl(id={self.id}, url='{self.url}')>"
