from sqlalchemy import Column, Integer, String, UniqueConstraint

from src.database import Base


class ElectionResult(Base):
    """Seats won per tracked party, one row per (position, year, election)."""

    __tablename__ = "election_results_col"
    __table_args__ = (
        UniqueConstraint("position", "electionyear", "electionname", name="uq_position_year_election"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(String(20), nullable=False, index=True)
    electionyear = Column(Integer, nullable=False)
    electionname = Column(String(10), nullable=False)  # AC / PE

    bjp_seat = Column(Integer, nullable=True)
    inc_seat = Column(Integer, nullable=True)
    bsp_seat = Column(Integer, nullable=True)
    jccj_seat = Column(Integer, nullable=True)
    ggp_seat = Column(Integer, nullable=True)
    cpi_seat = Column(Integer, nullable=True)
    aap_seat = Column(Integer, nullable=True)
    other_seat = Column(Integer, nullable=True)

    def __repr__(self):
        return (
            f"<ElectionResult(position={self.position}, electionyear={self.electionyear}, "
            f"electionname={self.electionname})>"
        )


class AssemblyPaper(Base):
    __tablename__ = "assembly_paper"

    id = Column(Integer, primary_key=True, autoincrement=True)
    assembly_id = Column(Integer, nullable=False, unique=True, index=True)
    assembly_name = Column(String(255), nullable=False)


class PartyPositionMixin:
    """Columns shared by the AC and PE party-position tables; one party label per mapped year."""

    id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)
    ac_no = Column(Integer, nullable=False, index=True)

    ele_ae_2008 = Column(String(20), nullable=True)
    ele_pe_2009 = Column(String(20), nullable=True)
    ele_ae_2013 = Column(String(20), nullable=True)
    ele_pe_2014 = Column(String(20), nullable=True)
    ele_ae_2018 = Column(String(20), nullable=True)
    ele_pe_2019 = Column(String(20), nullable=True)

    def __repr__(self):
        return f"<{type(self).__name__}(position={self.position}, ac_no={self.ac_no})>"


class PartyPositionAC(PartyPositionMixin, Base):
    __tablename__ = "tbl_result_party_position"


class PartyPositionPE(PartyPositionMixin, Base):
    __tablename__ = "tbl_result_party_position_pe"
