"""
Pytest 配置和共享 fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from app.database import Base, get_db
from app.models.entities import (
    User, Session, Enrollment, Address, TicketType, Ticket, TicketStatus,
    Payment, Hotel, Room
)
from app.security.auth import get_password_hash, create_access_token
from app.main import app

HOTEL_IMAGE = (
    "https://dynamic-media-cdn.tripadvisor.com/media/photo-o/27/a4/49/a4/"
    "cheval-blanc-st-tropez.jpg?w=700&h=-1&s=1"
)


@pytest.fixture(scope="function")
def db_engine():
    """创建内存数据库引擎"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """创建数据库会话"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============== 用户与认证 Fixtures ==============

@pytest.fixture
def sample_user(db_session):
    """创建测试用户"""
    user = User(email="user@drivent.com", password=get_password_hash("123456"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def user_token(db_session, sample_user):
    """为测试用户创建会话并返回 token"""
    token = create_access_token(sample_user.id)
    db_session.add(Session(user_id=sample_user.id, token=token))
    db_session.commit()
    return token


@pytest.fixture
def auth_headers(user_token):
    """返回带认证的请求头"""
    return {"Authorization": f"Bearer {user_token}"}


# ============== 报名与门票 Fixtures ==============

@pytest.fixture
def sample_enrollment(db_session, sample_user):
    """创建报名及地址"""
    enrollment = Enrollment(
        name="Maria Silva",
        cpf="12345678909",
        birthday=datetime(1995, 5, 17),
        phone="(21) 98999-9999",
        user_id=sample_user.id,
    )
    db_session.add(enrollment)
    db_session.flush()
    db_session.add(Address(
        cep="22041-001",
        street="Avenida Atlântica",
        city="Rio de Janeiro",
        state="RJ",
        number="1702",
        neighborhood="Copacabana",
        enrollment_id=enrollment.id,
    ))
    db_session.commit()
    db_session.refresh(enrollment)
    return enrollment


@pytest.fixture
def make_ticket_type(db_session):
    """票种工厂"""
    def _make(is_remote=False, includes_hotel=True, price=600):
        ticket_type = TicketType(
            name="Presencial + Hotel" if includes_hotel else "Ingresso",
            price=price,
            is_remote=is_remote,
            includes_hotel=includes_hotel,
        )
        db_session.add(ticket_type)
        db_session.commit()
        db_session.refresh(ticket_type)
        return ticket_type
    return _make


@pytest.fixture
def make_ticket(db_session, sample_enrollment):
    """门票工厂（已支付的门票同时创建支付记录）"""
    def _make(ticket_type, status=TicketStatus.PAID):
        ticket = Ticket(
            ticket_type_id=ticket_type.id,
            enrollment_id=sample_enrollment.id,
            status=status,
        )
        db_session.add(ticket)
        db_session.flush()
        if status == TicketStatus.PAID:
            db_session.add(Payment(
                ticket_id=ticket.id,
                value=ticket_type.price,
                card_issuer="VISA",
                card_last_digits="4242",
            ))
        db_session.commit()
        db_session.refresh(ticket)
        return ticket
    return _make


@pytest.fixture
def eligible_ticket(make_ticket_type, make_ticket):
    """已支付、线下、含酒店的门票"""
    return make_ticket(make_ticket_type(is_remote=False, includes_hotel=True))


# ============== 酒店 Fixtures ==============

@pytest.fixture
def sample_hotel(db_session):
    """创建测试酒店"""
    hotel = Hotel(name="Cheval Blanc St-Tropez", image=HOTEL_IMAGE)
    db_session.add(hotel)
    db_session.commit()
    db_session.refresh(hotel)
    return hotel


@pytest.fixture
def sample_room(db_session, sample_hotel):
    """创建301房间"""
    room = Room(name="301", capacity=4, hotel_id=sample_hotel.id)
    db_session.add(room)
    db_session.commit()
    db_session.refresh(room)
    return room
