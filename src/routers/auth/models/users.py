from sqlalchemy import Column, Integer, String, TIMESTAMP, func

from src.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    code = Column(String(4), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True)
    created_at = Column(TIMESTAMP, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name})>"
