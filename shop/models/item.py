"""Item model and its query helpers."""

from datetime import datetime, timedelta
from shop.constants import ItemSellStatus
from shop.exceptions import OutOfStockError
from shop.extensions import db
from .base import AuditMixin

# Registration-date windows accepted by Item.search()
SEARCH_DATE_WINDOWS = {
    '1d': timedelta(days=1),
    '1w': timedelta(weeks=1),
    '1m': timedelta(days=30),
    '6m': timedelta(days=182),
}


class Item(AuditMixin, db.Model):
    """Product for sale."""
    __tablename__ = 'item'
    
    id = db.Column(db.Integer, primary_key=True)
    item_nm = db.Column(db.String(50), nullable=False)
    price = db.Column(db.Integer, nullable=False)
    stock_number = db.Column(db.Integer, nullable=False, default=0)
    item_detail = db.Column(db.Text, nullable=False)
    item_sell_status = db.Column(db.Enum(ItemSellStatus), nullable=False, default=ItemSellStatus.SELL)
    
    # Relationships
    cart_items = db.relationship('CartItem', back_populates='item', lazy='dynamic')
    order_items = db.relationship('OrderItem', back_populates='item', lazy='dynamic')
    
    @classmethod
    def find_by_item_nm(cls, item_nm):
        return cls.query.filter_by(item_nm=item_nm).all()
    
    @classmethod
    def find_by_item_nm_or_item_detail(cls, item_nm, item_detail):
        return cls.query.filter(
            db.or_(cls.item_nm == item_nm, cls.item_detail == item_detail)
        ).all()
    
    @classmethod
    def find_by_price_less_than(cls, price):
        return cls.query.filter(cls.price < price).all()
    
    @classmethod
    def find_by_price_less_than_order_by_price_desc(cls, price):
        return cls.query.filter(cls.price < price).order_by(cls.price.desc()).all()
    
    @classmethod
    def find_by_item_detail(cls, item_detail):
        """Items whose detail contains the given text, most expensive first."""
        return cls.query.filter(
            cls.item_detail.contains(item_detail, autoescape=True)
        ).order_by(cls.price.desc()).all()
    
    @classmethod
    def search(cls, search_date_type=None, sell_status=None, search_by=None, search_query=None):
        """
        Admin item search.
        
        Args:
            search_date_type: 'all' or one of SEARCH_DATE_WINDOWS keys
            sell_status: an ItemSellStatus name, or empty for any status
            search_by: 'item_nm' or 'created_by'
            search_query: substring to look for in the search_by column
        
        Returns a query ordered newest first, ready for pagination.
        """
        query = cls.query
        
        window = SEARCH_DATE_WINDOWS.get(search_date_type)
        if window:
            query = query.filter(cls.reg_time > datetime.utcnow() - window)
        
        if sell_status:
            query = query.filter(cls.item_sell_status == ItemSellStatus[sell_status])
        
        if search_query:
            if search_by == 'created_by':
                query = query.filter(cls.created_by.contains(search_query, autoescape=True))
            else:
                query = query.filter(cls.item_nm.contains(search_query, autoescape=True))
        
        return query.order_by(cls.id.desc())
    
    @classmethod
    def search_main(cls, search_query=None):
        """Main page listing, optionally filtered by name."""
        query = cls.query
        if search_query:
            query = query.filter(cls.item_nm.contains(search_query, autoescape=True))
        return query.order_by(cls.id.desc())
    
    def update_item(self, form):
        """Copy editable fields from an ItemForm."""
        self.item_nm = form.item_nm.data
        self.price = form.price.data
        self.stock_number = form.stock_number.data
        self.item_detail = form.item_detail.data
        self.item_sell_status = ItemSellStatus[form.item_sell_status.data]
    
    def remove_stock(self, count):
        """Take count units out of stock."""
        rest_stock = self.stock_number - count
        if rest_stock < 0:
            raise OutOfStockError(
                f'Not enough stock. (current stock: {self.stock_number})'
            )
        self.stock_number = rest_stock
    
    def add_stock(self, count):
        self.stock_number += count
    
    def __repr__(self):
        return f'<Item {self.item_nm}>'
