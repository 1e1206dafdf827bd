"""Item registration form."""

from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, TextAreaField, SelectField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange
from shop.constants import ItemSellStatus


class ItemForm(FlaskForm):
    item_nm = StringField('Item Name', validators=[
        DataRequired(message='Item name is required'),
        Length(max=50)
    ])
    price = IntegerField('Price', validators=[
        InputRequired(message='Price is required'),
        NumberRange(min=0, message='Price cannot be negative')
    ])
    item_detail = TextAreaField('Item Detail', validators=[
        DataRequired(message='Item detail is required')
    ])
    stock_number = IntegerField('Stock', validators=[
        InputRequired(message='Stock is required'),
        NumberRange(min=0, max=99999, message='Stock must be between 0 and 99999')
    ])
    item_sell_status = SelectField('Sell Status', choices=[
        (ItemSellStatus.SELL.name, 'On sale'),
        (ItemSellStatus.SOLD_OUT.name, 'Sold out'),
    ], default=ItemSellStatus.SELL.name)
    
    def populate_from(self, item):
        """Fill the form fields from an existing item."""
        self.item_nm.data = item.item_nm
        self.price.data = item.price
        self.item_detail.data = item.item_detail
        self.stock_number.data = item.stock_number
        self.item_sell_status.data = item.item_sell_status.name
