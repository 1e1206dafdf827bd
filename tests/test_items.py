"""Item query helpers and admin item pages."""

from datetime import datetime, timedelta

import pytest

from shop.constants import ItemSellStatus, Role
from shop.exceptions import OutOfStockError
from shop.extensions import db
from shop.models import Item

ITEM_FORM = {
    'item_nm': 'New Item',
    'price': '15000',
    'item_detail': 'A brand new item',
    'stock_number': '30',
    'item_sell_status': 'SELL',
}


@pytest.fixture
def items(app_ctx):
    """Ten items named 'Test Item 1'..'Test Item 10' priced 10001..10010."""
    for i in range(1, 11):
        db.session.add(Item(
            item_nm=f'Test Item {i}',
            price=10000 + i,
            item_detail=f'Test item detail {i}',
            stock_number=100,
            item_sell_status=ItemSellStatus.SELL if i <= 5 else ItemSellStatus.SOLD_OUT
        ))
    db.session.commit()


class TestItemQueries:
    def test_find_by_item_nm(self, items):
        found = Item.find_by_item_nm('Test Item 1')

        assert [item.item_nm for item in found] == ['Test Item 1']

    def test_find_by_item_nm_or_item_detail(self, items):
        found = Item.find_by_item_nm_or_item_detail('Test Item 1', 'Test item detail 5')

        assert sorted(item.item_nm for item in found) == ['Test Item 1', 'Test Item 5']

    def test_find_by_price_less_than(self, items):
        found = Item.find_by_price_less_than(10005)

        assert len(found) == 4
        assert all(item.price < 10005 for item in found)

    def test_find_by_price_less_than_order_by_price_desc(self, items):
        found = Item.find_by_price_less_than_order_by_price_desc(10005)

        assert [item.price for item in found] == [10004, 10003, 10002, 10001]

    def test_find_by_item_detail(self, items):
        found = Item.find_by_item_detail('detail 1')

        # 'detail 1' and 'detail 10', most expensive first
        assert [item.item_nm for item in found] == ['Test Item 10', 'Test Item 1']

    def test_search_by_sell_status(self, items):
        found = Item.search(sell_status='SOLD_OUT').all()

        assert len(found) == 5
        assert all(item.item_sell_status == ItemSellStatus.SOLD_OUT for item in found)

    def test_search_by_name_newest_first(self, items):
        found = Item.search(search_by='item_nm', search_query='Item 1').all()

        assert [item.item_nm for item in found] == ['Test Item 10', 'Test Item 1']

    def test_search_by_created_by(self, items):
        for item in Item.query.filter(Item.price > 10007):
            item.created_by = 'manager@shopmail.com'
        db.session.commit()

        found = Item.search(search_by='created_by', search_query='manager').all()

        assert [item.item_nm for item in found] == ['Test Item 10', 'Test Item 9', 'Test Item 8']
        assert Item.search(search_by='created_by', search_query='nobody').all() == []

    def test_search_by_date_window(self, items):
        old = Item.query.filter_by(item_nm='Test Item 1').one()
        old.reg_time = datetime.utcnow() - timedelta(days=10)
        db.session.commit()

        found = Item.search(search_date_type='1w').all()

        assert len(found) == 9
        assert old not in found
        assert len(Item.search(search_date_type='all').all()) == 10

    def test_search_main(self, items):
        assert len(Item.search_main('Test Item').all()) == 10
        assert [i.item_nm for i in Item.search_main('Item 7').all()] == ['Test Item 7']


class TestStock:
    def test_remove_stock(self, app_ctx):
        item = Item(item_nm='Stocked', price=1000, item_detail='detail', stock_number=5)

        item.remove_stock(3)

        assert item.stock_number == 2

    def test_remove_stock_beyond_available(self, app_ctx):
        item = Item(item_nm='Stocked', price=1000, item_detail='detail', stock_number=2)

        with pytest.raises(OutOfStockError):
            item.remove_stock(3)
        assert item.stock_number == 2

    def test_add_stock(self, app_ctx):
        item = Item(item_nm='Stocked', price=1000, item_detail='detail', stock_number=2)

        item.add_stock(5)

        assert item.stock_number == 7


class TestItemAccess:
    def test_item_form_as_admin(self, client, create_member, login):
        create_member(email='admin@shopmail.com', role=Role.ADMIN)
        login('admin@shopmail.com')

        response = client.get('/admin/item/new')

        assert response.status_code == 200

    def test_item_form_as_user_is_forbidden(self, client, create_member, login):
        create_member(email='user@shopmail.com', role=Role.USER)
        login('user@shopmail.com')

        response = client.get('/admin/item/new')

        assert response.status_code == 403

    def test_item_form_anonymous_is_unauthorized(self, client):
        response = client.get('/admin/item/new')

        assert response.status_code == 401

    def test_protected_page_anonymous_is_unauthorized(self, client):
        assert client.get('/orders').status_code == 401

    def test_public_pages(self, client, create_item):
        item_id = create_item()

        assert client.get('/').status_code == 200
        assert client.get(f'/item/{item_id}').status_code == 200
        assert client.get('/members/login').status_code == 200


class TestItemAdmin:
    @pytest.fixture
    def admin_client(self, client, create_member, login):
        create_member(email='admin@shopmail.com', role=Role.ADMIN)
        login('admin@shopmail.com')
        return client

    def test_register_item(self, app, admin_client):
        response = admin_client.post('/admin/item/new', data=ITEM_FORM)

        assert response.status_code == 302
        with app.app_context():
            item = Item.query.filter_by(item_nm='New Item').one()
            assert item.price == 15000
            assert item.stock_number == 30
            assert item.created_by == 'admin@shopmail.com'
            assert item.modified_by == 'admin@shopmail.com'

    def test_register_item_validation_error(self, app, admin_client):
        response = admin_client.post('/admin/item/new', data=dict(ITEM_FORM, item_nm=''))

        assert response.status_code == 200
        assert b'Item name is required' in response.data
        with app.app_context():
            assert Item.query.count() == 0

    def test_edit_item(self, app, admin_client, create_item):
        item_id = create_item()

        assert admin_client.get(f'/admin/item/{item_id}').status_code == 200
        response = admin_client.post(f'/admin/item/{item_id}',
                                     data=dict(ITEM_FORM, item_sell_status='SOLD_OUT'))

        assert response.status_code == 302
        with app.app_context():
            item = db.session.get(Item, item_id)
            assert item.item_nm == 'New Item'
            assert item.item_sell_status == ItemSellStatus.SOLD_OUT
            assert item.modified_by == 'admin@shopmail.com'

    def test_edit_unknown_item(self, admin_client):
        response = admin_client.get('/admin/item/999')

        assert response.status_code == 404
        assert b'This item does not exist.' in response.data

    def test_item_management_list(self, admin_client, create_item):
        create_item(item_nm='Listed Item')

        response = admin_client.get('/admin/items?search_by=item_nm&search_query=Listed')

        assert response.status_code == 200
        assert b'Listed Item' in response.data


def test_item_detail_not_found(client):
    assert client.get('/item/999').status_code == 404


def test_main_page_search(client, create_item):
    create_item(item_nm='Blue Shirt')
    create_item(item_nm='Red Hat')

    response = client.get('/?search_query=Shirt')

    assert b'Blue Shirt' in response.data
    assert b'Red Hat' not in response.data
