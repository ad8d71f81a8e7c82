from sqlalchemy import Column, Integer, Numeric, String

from src.database import Base


class BjpResult(Base):
    __tablename__ = "bjp_results_paper"

    id = Column(Integer, primary_key=True, autoincrement=True)
    election_year = Column(Integer, nullable=False, index=True)
    election_type = Column(String(50), nullable=False, index=True)
    total_seats = Column(Integer, nullable=True)
    seats_contested = Column(Integer, nullable=True)
    seats_won = Column(Integer, nullable=True)
    vote_percent = Column(Numeric(5, 2), nullable=True)

    def __repr__(self):
        return f"<BjpResult(election_year={self.election_year}, election_type={self.election_type})>"
