import pytest

from shop import create_app
from shop.constants import ItemSellStatus, Role
from shop.extensions import db
from shop.models import Item, Member

PASSWORD = 'password123'


@pytest.fixture
def app():
    """Fresh app with an empty in-memory database per test.

    The app context is not held open while the test runs, so each test client
    request gets its own context (and its own Flask-Login user cache).
    """
    app = create_app('testing')
    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    """For model-level tests that never go through the test client."""
    with app.app_context():
        yield app


@pytest.fixture
def create_member(app):
    def _create_member(email='member@shopmail.com', role=Role.USER, name='Test Member',
                       address='12 Elm Street', password=PASSWORD):
        with app.app_context():
            member = Member(email=email, name=name, address=address, role=role)
            member.set_password(password)
            db.session.add(member)
            db.session.commit()
            return member.id
    return _create_member


@pytest.fixture
def create_item(app):
    def _create_item(item_nm='Test Item', price=10000, stock_number=100,
                     item_detail='Test item detail', item_sell_status=ItemSellStatus.SELL):
        with app.app_context():
            item = Item(item_nm=item_nm, price=price, stock_number=stock_number,
                        item_detail=item_detail, item_sell_status=item_sell_status)
            db.session.add(item)
            db.session.commit()
            return item.id
    return _create_item


@pytest.fixture
def login(client):
    def _login(email, password=PASSWORD):
        return client.post('/members/login', data={'email': email, 'password': password})
    return _login
