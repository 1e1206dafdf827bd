"""Database models package."""

from .member import Member
from .item import Item
from .cart import Cart, CartItem
from .order import Order, OrderItem

__all__ = [
    'Member',
    'Item',
    'Cart',
    'CartItem',
    'Order',
    'OrderItem',
]
