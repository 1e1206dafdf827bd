"""Main public routes."""

from flask import Blueprint, render_template, request, current_app
from shop.models import Item

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Homepage listing items, with name search."""
    page = request.args.get('page', 1, type=int)
    search_query = request.args.get('search_query', '')
    
    pagination = Item.search_main(search_query).paginate(
        page=page,
        per_page=current_app.config.get('ITEMS_PER_PAGE', 6),
        error_out=False
    )
    
    return render_template('main/index.html',
                         items=pagination.items,
                         pagination=pagination,
                         search_query=search_query)
