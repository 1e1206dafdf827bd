"""Cart routes."""

from flask import Blueprint, render_template, request, jsonify, current_app
from flask_login import login_required, current_user
from shop.exceptions import OutOfStockError
from shop.extensions import db
from shop.models import Cart, CartItem, Item, Order

cart_bp = Blueprint('cart', __name__)


def _owned_cart_item_or_error(cart_item_id):
    """Return (cart_item, None) or (None, error response)."""
    cart_item = db.session.get(CartItem, cart_item_id)
    if cart_item is None:
        return None, (jsonify({'success': False, 'message': 'Cart item not found'}), 404)
    if not cart_item.is_owned_by(current_user):
        return None, (jsonify({'success': False,
                               'message': 'You do not have permission to modify this cart item.'}), 403)
    return cart_item, None


@cart_bp.route('/cart', methods=['POST'])
@login_required
def add_to_cart():
    """Add an item to the cart."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    item_id = data.get('item_id')
    count = data.get('count')
    
    if not isinstance(count, int) or count < 1:
        return jsonify({'success': False, 'message': 'Add at least one item.'}), 400
    
    item = db.session.get(Item, item_id) if isinstance(item_id, int) else None
    if item is None:
        return jsonify({'success': False, 'message': 'Item not found'}), 404
    
    cart = Cart.get_or_create(current_user._get_current_object())
    cart_item = cart.add_item(item, count)
    db.session.commit()
    
    return jsonify({'success': True, 'cart_item_id': cart_item.id})


@cart_bp.route('/cart')
@login_required
def view_cart():
    """View shopping cart."""
    cart = Cart.query.filter_by(member_id=current_user.id).first()
    cart_items = cart.cart_items.order_by(CartItem.reg_time.desc()).all() if cart else []
    cart_total = sum(item.total_price for item in cart_items)
    
    return render_template('cart/cartList.html',
                         cart_items=cart_items,
                         cart_total=cart_total)


@cart_bp.route('/cartItem/<int:cart_item_id>', methods=['PATCH'])
@login_required
def update_cart_item(cart_item_id):
    """Change the count of a cart line."""
    count = request.args.get('count', type=int)
    if count is None or count < 1:
        return jsonify({'success': False, 'message': 'Add at least one item.'}), 400
    
    cart_item, error = _owned_cart_item_or_error(cart_item_id)
    if error:
        return error
    
    cart_item.update_count(count)
    db.session.commit()
    
    return jsonify({'success': True, 'cart_item_id': cart_item.id})


@cart_bp.route('/cartItem/<int:cart_item_id>', methods=['DELETE'])
@login_required
def delete_cart_item(cart_item_id):
    """Remove a line from the cart."""
    cart_item, error = _owned_cart_item_or_error(cart_item_id)
    if error:
        return error
    
    db.session.delete(cart_item)
    db.session.commit()
    
    return jsonify({'success': True, 'cart_item_id': cart_item_id})


@cart_bp.route('/cart/orders', methods=['POST'])
@login_required
def order_cart_items():
    """Order the selected cart lines as a single order."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    cart_item_ids = data.get('cart_item_ids')
    
    if not isinstance(cart_item_ids, list) or not cart_item_ids:
        return jsonify({'success': False, 'message': 'Select at least one item to order.'}), 400
    if not all(isinstance(i, int) and not isinstance(i, bool) for i in cart_item_ids):
        return jsonify({'success': False, 'message': 'Invalid cart item id.'}), 400
    
    cart_items = []
    # A repeated id selects the same line once
    for cart_item_id in dict.fromkeys(cart_item_ids):
        cart_item, error = _owned_cart_item_or_error(cart_item_id)
        if error:
            return error
        cart_items.append(cart_item)
    
    try:
        order = Order.place_order(current_user._get_current_object(), [(ci.item, ci.count) for ci in cart_items])
    except OutOfStockError as e:
        db.session.rollback()
        current_app.logger.warning('Cart order rejected for %s: %s', current_user.email, e)
        return jsonify({'success': False, 'message': str(e)}), 400
    
    for cart_item in cart_items:
        db.session.delete(cart_item)
    db.session.commit()
    
    current_app.logger.info('Member %s ordered %d cart items (order %s)',
                            current_user.email, len(cart_items), order.id)
    return jsonify({'success': True, 'order_id': order.id})
