import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from main import app
from src.database import Base, Database
from src.routers.auth.models import User
from src.routers.bjp_results.models import BjpResult
from src.routers.election_results.models import (
    AssemblyPaper,
    ElectionResult,
    PartyPositionAC,
    PartyPositionPE,
)
from src.routers.surname.models import Assembly, SurnameCount
from src.utils.jwt import create_access_token


@pytest.fixture()
def database():
    db = Database("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(db.engine)
    yield db
    Base.metadata.drop_all(db.engine)
    db.close()


@pytest.fixture()
def session(database):
    session = database.get_session()
    yield session
    session.close()


@pytest.fixture()
def client(database):
    # Entering the client as a context manager would run the lifespan, which
    # connects to the configured PostgreSQL server; tests attach SQLite instead.
    app.state.database = database
    yield TestClient(app)
    del app.state.database


@pytest.fixture()
def user(session):
    user = User(name="manish", code="1234", email="manish@example.com")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture()
def auth_headers(user):
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def surname_data(session):
    session.add_all([
        Assembly(assembly_id=1, assembly_name="Raipur"),
        Assembly(assembly_id=2, assembly_name="Bilaspur"),
        Assembly(assembly_id=3, assembly_name="Durg"),
    ])
    rows = [
        # surname, caste, category, similar, assembly, count
        ("Sahu", "Sahu", "OBC", "Sahu", 1, 500),
        ("Sahoo", "Sahu", "OBC", "Sahu", 1, 100),
        ("Verma", "Kurmi", "OBC", "Verma", 1, 300),
        ("Sharma", "Brahmin", "General", "Sharma", 1, 200),
        ("Netam", "Gond", "ST", "Netam", 1, 150),
        ("Unknown", None, "", None, 1, 50),
        ("Sahu", "Sahu", "OBC", "Sahu", 2, 400),
        ("Sharma", "Brahmin", "General", "Sharma", 2, 250),
        ("Markam", "Gond", "ST", "Markam", 2, 120),
        ("Verma", "Kurmi", "OBC", "Verma", 3, 80),
        ("Sahu", "Sahu", "OBC", "Sahu", 3, 70),
    ]
    session.add_all([
        SurnameCount(
            surname=surname,
            surname_caste=caste,
            surname_category=category,
            surname_similar=similar,
            assembly_no=assembly_no,
            count_num=count,
        )
        for surname, caste, category, similar, assembly_no, count in rows
    ])
    session.commit()


@pytest.fixture()
def paged_surnames(session):
    session.add(Assembly(assembly_id=9, assembly_name="Kanker"))
    session.add_all([
        SurnameCount(
            surname=f"S{i:02d}",
            surname_caste="Caste",
            surname_category="Category",
            surname_similar=f"S{i:02d}",
            assembly_no=9,
            count_num=i,
        )
        for i in range(1, 26)
    ])
    session.add(SurnameCount(surname="Elsewhere", assembly_no=8, count_num=1000))
    session.commit()


@pytest.fixture()
def election_data(session):
    session.add_all([
        ElectionResult(position="1", electionyear=2008, electionname="AC",
                       bjp_seat=50, inc_seat=38, bsp_seat=2, aap_seat=0),
        ElectionResult(position="1", electionyear=2009, electionname="PE",
                       bjp_seat=10, inc_seat=1),
        ElectionResult(position="1", electionyear=2013, electionname="AC",
                       bjp_seat=49, inc_seat=39, bsp_seat=1),
        ElectionResult(position="1", electionyear=2018, electionname="ac",
                       bjp_seat=15, inc_seat=68, bsp_seat=2, jccj_seat=5),
        ElectionResult(position="2", electionyear=2013, electionname="AC",
                       bjp_seat=45, inc_seat=None),
    ])
    session.add_all([
        AssemblyPaper(assembly_id=1, assembly_name="Raipur"),
        AssemblyPaper(assembly_id=2, assembly_name="Bilaspur"),
    ])
    session.add_all([
        PartyPositionAC(position=1, ac_no=2, ele_ae_2008="BJP", ele_ae_2013="INC"),
        PartyPositionAC(position=1, ac_no=1, ele_ae_2008="bjp", ele_ae_2013="BJP"),
        PartyPositionAC(position=1, ac_no=3, ele_ae_2008="INC"),
        PartyPositionAC(position=2, ac_no=4, ele_ae_2008="BJP"),
        PartyPositionPE(position=1, ac_no=1, ele_pe_2009="BJP", ele_ae_2008="INC"),
        PartyPositionPE(position=1, ac_no=2, ele_pe_2009="INC"),
    ])
    session.commit()


@pytest.fixture()
def bjp_data(session):
    session.add_all([
        BjpResult(election_year=2008, election_type="Assembly", total_seats=90,
                  seats_contested=90, seats_won=50, vote_percent=40.33),
        BjpResult(election_year=2003, election_type="Assembly", total_seats=90,
                  seats_contested=90, seats_won=50, vote_percent=39.26),
        BjpResult(election_year=2009, election_type="Parliament", total_seats=11,
                  seats_contested=11, seats_won=10, vote_percent=45.03),
    ])
    session.commit()
