"""Cart models."""

from shop.extensions import db
from .base import AuditMixin


class Cart(AuditMixin, db.Model):
    """Shopping cart, one per member."""
    __tablename__ = 'cart'
    
    id = db.Column(db.Integer, primary_key=True)
    member_id = db.Column(db.Integer, db.ForeignKey('member.id'), unique=True, nullable=False)
    
    # Relationships
    member = db.relationship('Member', back_populates='cart')
    cart_items = db.relationship('CartItem', back_populates='cart', lazy='dynamic', cascade='all, delete-orphan')
    
    @staticmethod
    def create_cart(member):
        return Cart(member=member)
    
    @classmethod
    def get_or_create(cls, member):
        """Return the member's cart, creating it on first use."""
        cart = cls.query.filter_by(member_id=member.id).first()
        if cart is None:
            cart = cls.create_cart(member)
            db.session.add(cart)
            db.session.flush()
        return cart
    
    def add_item(self, item, count):
        """Add count units of item, merging with an existing line."""
        cart_item = self.cart_items.filter_by(item_id=item.id).first()
        if cart_item:
            cart_item.add_count(count)
        else:
            cart_item = CartItem.create_cart_item(self, item, count)
            db.session.add(cart_item)
        db.session.flush()
        return cart_item
    
    @property
    def total_price(self):
        return sum(cart_item.total_price for cart_item in self.cart_items)
    
    def __repr__(self):
        return f'<Cart member={self.member_id}>'


class CartItem(AuditMixin, db.Model):
    """A line in a cart."""
    __tablename__ = 'cart_item'
    
    id = db.Column(db.Integer, primary_key=True)
    cart_id = db.Column(db.Integer, db.ForeignKey('cart.id'), nullable=False)
    item_id = db.Column(db.Integer, db.ForeignKey('item.id'), nullable=False)
    count = db.Column(db.Integer, nullable=False)
    
    cart = db.relationship('Cart', back_populates='cart_items')
    item = db.relationship('Item', back_populates='cart_items')
    
    @staticmethod
    def create_cart_item(cart, item, count):
        return CartItem(cart=cart, item=item, count=count)
    
    def add_count(self, count):
        self.count += count
    
    def update_count(self, count):
        self.count = count
    
    def is_owned_by(self, member):
        return self.cart.member_id == member.id
    
    @property
    def total_price(self):
        return self.item.price * self.count
    
    def __repr__(self):
        return f'<CartItem {self.item_id} x {self.count}>'
