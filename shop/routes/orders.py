"""Order routes."""

from flask import Blueprint, render_template, request, jsonify, current_app
from flask_login import login_required, current_user
from shop.exceptions import OutOfStockError, OrderCancelError
from shop.extensions import db
from shop.models import Item, Order

orders_bp = Blueprint('orders', __name__)


@orders_bp.route('/order', methods=['POST'])
@login_required
def order():
    """Order a single item directly from its detail page."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    item_id = data.get('item_id')
    count = data.get('count')
    
    if not isinstance(count, int) or count < 1:
        return jsonify({'success': False, 'message': 'Order at least one item.'}), 400
    
    item = db.session.get(Item, item_id) if isinstance(item_id, int) else None
    if item is None:
        return jsonify({'success': False, 'message': 'Item not found'}), 404
    
    try:
        order = Order.place_order(current_user._get_current_object(), [(item, count)])
    except OutOfStockError as e:
        db.session.rollback()
        current_app.logger.warning('Order rejected for %s: %s', current_user.email, e)
        return jsonify({'success': False, 'message': str(e)}), 400
    
    db.session.commit()
    
    current_app.logger.info('Member %s placed order %s', current_user.email, order.id)
    return jsonify({'success': True, 'order_id': order.id})


@orders_bp.route('/orders')
@login_required
def order_history():
    """Order history."""
    page = request.args.get('page', 1, type=int)
    
    orders_query = Order.query.filter_by(
        member_id=current_user.id
    ).order_by(Order.order_date.desc(), Order.id.desc())
    
    pagination = orders_query.paginate(
        page=page,
        per_page=current_app.config.get('ORDERS_PER_PAGE', 4),
        error_out=False
    )
    
    return render_template('order/orderHist.html',
                         orders=pagination.items,
                         pagination=pagination)


@orders_bp.route('/order/<int:order_id>/cancel', methods=['POST'])
@login_required
def cancel_order(order_id):
    """Cancel an order."""
    order = db.session.get(Order, order_id)
    if order is None:
        return jsonify({'success': False, 'message': 'Order not found'}), 404
    
    if not order.validate_owner(current_user):
        return jsonify({'success': False,
                        'message': 'You do not have permission to cancel this order.'}), 403
    
    try:
        order.cancel_order()
    except OrderCancelError as e:
        return jsonify({'success': False, 'message': str(e)}), 400
    
    db.session.commit()
    
    current_app.logger.info('Member %s cancelled order %s', current_user.email, order.id)
    return jsonify({'success': True, 'order_id': order.id})
