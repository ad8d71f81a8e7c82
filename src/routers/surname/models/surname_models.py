from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from src.database import Base


class Assembly(Base):
    __tablename__ = "assembly_vandan"

    id = Column(Integer, primary_key=True, autoincrement=True)
    assembly_id = Column(Integer, nullable=False, unique=True, index=True)
    assembly_name = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Assembly(assembly_id={self.assembly_id}, assembly_name={self.assembly_name})>"


class SurnameCount(Base):
    __tablename__ = "tbl_all_surname"

    id = Column(Integer, primary_key=True, autoincrement=True)
    surname = Column(String(255), nullable=True)
    surname_caste = Column(String(255), nullable=True, index=True)
    surname_category = Column(String(255), nullable=True, index=True)
    surname_similar = Column(String(255), nullable=True, index=True)
    assembly_no = Column(Integer, ForeignKey("assembly_vandan.assembly_id"), nullable=False, index=True)
    count_num = Column(Integer, nullable=False, default=0)
    updation_date = Column(DateTime(timezone=False), server_default=func.now(), nullable=True)

    def __repr__(self):
        return f"<SurnameCount(surname={self.surname}, assembly_no={self.assembly_no}, count_num={self.count_num})>"
