"""Enumerations stored by name in the database."""

import enum


class Role(str, enum.Enum):
    USER = 'USER'
    ADMIN = 'ADMIN'


class ItemSellStatus(str, enum.Enum):
    SELL = 'SELL'
    SOLD_OUT = 'SOLD_OUT'


class OrderStatus(str, enum.Enum):
    ORDER = 'ORDER'
    CANCEL = 'CANCEL'
