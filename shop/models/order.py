"""Order models."""

from datetime import datetime
from shop.constants import OrderStatus
from shop.exceptions import OrderCancelError
from shop.extensions import db
from .base import AuditMixin


class Order(AuditMixin, db.Model):
    """Order model."""
    __tablename__ = 'orders'
    
    id = db.Column(db.Integer, primary_key=True)
    member_id = db.Column(db.Integer, db.ForeignKey('member.id'), nullable=False)
    order_date = db.Column(db.DateTime, default=datetime.utcnow)
    order_status = db.Column(db.Enum(OrderStatus), nullable=False, default=OrderStatus.ORDER)
    
    # Relationships
    member = db.relationship('Member', back_populates='orders')
    order_items = db.relationship('OrderItem', back_populates='order', cascade='all, delete-orphan')
    
    @classmethod
    def create_order(cls, member, order_items):
        """Build an order from order items whose stock is already taken."""
        order = cls(
            member=member,
            order_status=OrderStatus.ORDER,
            order_date=datetime.utcnow()
        )
        for order_item in order_items:
            order.add_order_item(order_item)
        return order

    @classmethod
    def place_order(cls, member, item_counts):
        """
        Create an order for (item, count) pairs and add it to the session.

        Raises OutOfStockError if any item lacks stock; the caller must roll
        back the session, since earlier items may already have been reduced.
        """
        order_items = [OrderItem.create_order_item(item, count) for item, count in item_counts]
        order = cls.create_order(member, order_items)
        db.session.add(order)
        return order

    def add_order_item(self, order_item):
        self.order_items.append(order_item)
    
    @property
    def total_price(self):
        return sum(order_item.total_price for order_item in self.order_items)
    
    def can_cancel(self):
        """Check if order can be cancelled."""
        return self.order_status == OrderStatus.ORDER
    
    def cancel_order(self):
        """Cancel the order and put every item back in stock."""
        if not self.can_cancel():
            raise OrderCancelError('This order has already been cancelled.')
        self.order_status = OrderStatus.CANCEL
        for order_item in self.order_items:
            order_item.cancel()
    
    def validate_owner(self, member):
        return self.member_id == member.id
    
    def __repr__(self):
        return f'<Order {self.id}>'


class OrderItem(AuditMixin, db.Model):
    """Order item model."""
    __tablename__ = 'order_item'
    
    id = db.Column(db.Integer, primary_key=True)
    item_id = db.Column(db.Integer, db.ForeignKey('item.id'), nullable=False)
    order_id = db.Column(db.Integer, db.ForeignKey('orders.id'), nullable=False)
    order_price = db.Column(db.Integer, nullable=False)  # Snapshot of item price
    count = db.Column(db.Integer, nullable=False)
    
    order = db.relationship('Order', back_populates='order_items')
    item = db.relationship('Item', back_populates='order_items')
    
    @classmethod
    def create_order_item(cls, item, count):
        """Snapshot the item price and take count units out of stock."""
        item.remove_stock(count)
        return cls(item=item, count=count, order_price=item.price)
    
    @property
    def total_price(self):
        return self.order_price * self.count
    
    def cancel(self):
        self.item.add_stock(self.count)
    
    def __repr__(self):
        return f'<OrderItem {self.item_id} x {self.count}>'
