"""Item routes: admin registration/management and public detail."""

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import login_required
from shop.constants import ItemSellStatus
from shop.extensions import db
from shop.forms.item import ItemForm
from shop.models import Item
from shop.utils.decorators import admin_required

items_bp = Blueprint('items', __name__)


@items_bp.route('/admin/item/new', methods=['GET', 'POST'])
@login_required
@admin_required
def item_form():
    """Register a new item."""
    form = ItemForm()
    if form.validate_on_submit():
        item = Item(
            item_nm=form.item_nm.data,
            price=form.price.data,
            stock_number=form.stock_number.data,
            item_detail=form.item_detail.data,
            item_sell_status=ItemSellStatus[form.item_sell_status.data]
        )
        db.session.add(item)
        db.session.commit()
        
        current_app.logger.info('Item %s registered (id=%s)', item.item_nm, item.id)
        flash(f'{item.item_nm} registered.', 'success')
        return redirect(url_for('main.index'))
    
    return render_template('item/itemForm.html', form=form)


@items_bp.route('/admin/item/<int:item_id>', methods=['GET', 'POST'])
@login_required
@admin_required
def item_edit(item_id):
    """Edit an existing item."""
    item = db.session.get(Item, item_id)
    if item is None:
        return render_template('item/itemForm.html', form=ItemForm(),
                               error_message='This item does not exist.'), 404
    
    form = ItemForm()
    if form.validate_on_submit():
        item.update_item(form)
        db.session.commit()
        
        current_app.logger.info('Item %s updated', item.id)
        flash(f'{item.item_nm} updated.', 'success')
        return redirect(url_for('main.index'))
    
    if request.method == 'GET':
        form.populate_from(item)
    
    return render_template('item/itemForm.html', form=form, item=item)


@items_bp.route('/admin/items')
@login_required
@admin_required
def item_manage():
    """Admin item list with search filters."""
    page = request.args.get('page', 1, type=int)
    search_date_type = request.args.get('search_date_type', 'all')
    sell_status = request.args.get('search_sell_status', '')
    search_by = request.args.get('search_by', 'item_nm')
    search_query = request.args.get('search_query', '')
    
    if sell_status and sell_status not in ItemSellStatus.__members__:
        sell_status = ''
    
    query = Item.search(search_date_type, sell_status, search_by, search_query)
    pagination = query.paginate(
        page=page,
        per_page=current_app.config.get('ITEMS_PER_PAGE', 6),
        error_out=False
    )
    
    return render_template('item/itemMng.html',
                         items=pagination.items,
                         pagination=pagination,
                         search_date_type=search_date_type,
                         search_sell_status=sell_status,
                         search_by=search_by,
                         search_query=search_query)


@items_bp.route('/item/<int:item_id>')
def item_detail(item_id):
    """Public item detail page."""
    item = db.get_or_404(Item, item_id)
    return render_template('item/itemDtl.html', item=item)
