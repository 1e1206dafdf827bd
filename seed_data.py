"""Seed script to populate database with sample data."""

from shop import create_app
from shop.constants import ItemSellStatus, Role
from shop.extensions import db
from shop.models import Member, Item


def seed_database():
    """Seed the database with sample data."""
    app = create_app()
    
    with app.app_context():
        # Create tables
        db.create_all()
        
        # Check if already seeded
        if Member.query.filter_by(email='admin@shop.com').first():
            print('Database already seeded!')
            return
        
        print('Seeding database...')
        
        # Create Admin
        admin = Member(
            email='admin@shop.com',
            name='Admin User',
            address='1 Market Street',
            role=Role.ADMIN
        )
        admin.set_password('admin1234')
        db.session.add(admin)
        
        # Create sample members
        members_data = [
            {'email': 'john@example.com', 'name': 'John Doe', 'address': '12 Elm Street', 'password': 'user1234'},
            {'email': 'jane@example.com', 'name': 'Jane Smith', 'address': '34 Oak Avenue', 'password': 'user1234'},
        ]
        for data in members_data:
            member = Member(
                email=data['email'],
                name=data['name'],
                address=data['address'],
                role=Role.USER
            )
            member.set_password(data['password'])
            db.session.add(member)
        
        # Create sample items
        items_data = [
            {'item_nm': 'Linen Shirt', 'price': 39000, 'stock_number': 50, 'item_detail': 'Breathable linen shirt for summer.'},
            {'item_nm': 'Denim Jacket', 'price': 89000, 'stock_number': 20, 'item_detail': 'Classic washed denim jacket.'},
            {'item_nm': 'Wool Scarf', 'price': 25000, 'stock_number': 100, 'item_detail': 'Soft merino wool scarf.'},
            {'item_nm': 'Canvas Sneakers', 'price': 59000, 'stock_number': 35, 'item_detail': 'Everyday low-top canvas sneakers.'},
            {'item_nm': 'Leather Belt', 'price': 32000, 'stock_number': 0, 'item_detail': 'Full-grain leather belt.',
             'item_sell_status': ItemSellStatus.SOLD_OUT},
        ]
        for data in items_data:
            db.session.add(Item(**data))
        
        db.session.commit()
        print('Database seeded successfully!')
        print('\nTest Accounts:')
        print('  Admin: admin@shop.com / admin1234')
        print('  Member: john@example.com / user1234')


if __name__ == '__main__':
    seed_database()
