#!/usr/bin/env python3
"""
Script to create an admin member, or promote an existing member to admin.
Uses the database configured for the current FLASK_CONFIG.
"""

from shop import create_app
from shop.constants import Role
from shop.extensions import db
from shop.models import Member


def create_admin_member(email, password, name, address=''):
    """
    Create an admin member.
    
    Args:
        email: Admin email address
        password: Admin password (will be hashed)
        name: Admin full name
        address: Admin address (optional)
    """
    member = Member.query.filter_by(email=email).first()
    if member is not None:
        print(f"Member with email {email} already exists!")
        print(f"   Current role: {member.role.value}")
        
        # Ask if they want to update to admin
        update = input("Do you want to update this member to admin role? (yes/no): ").lower()
        if update == 'yes':
            member.role = Role.ADMIN
            db.session.commit()
            print(f"Member {email} updated to admin role!")
        return
    
    admin = Member(email=email, name=name, address=address, role=Role.ADMIN)
    admin.set_password(password)
    Member.save_member(admin)
    
    print("Admin member created successfully!")
    print(f"   Email: {email}")
    print(f"   Name: {name}")
    print("   Role: ADMIN")
    print("\nYou can now log in with these credentials at /members/login")


def main():
    print("=" * 60)
    print("Shop - Admin Member Creation")
    print("=" * 60)
    print()
    
    # Get admin details from user input
    print("Enter admin member details:")
    email = input("Email: ").strip().lower()
    password = input("Password: ").strip()
    name = input("Full Name: ").strip()
    address = input("Address (optional): ").strip()
    
    print()
    print("Creating admin member with:")
    print(f"  Email: {email}")
    print(f"  Name: {name}")
    print(f"  Address: {address if address else 'Not provided'}")
    print()
    
    confirm = input("Proceed? (yes/no): ").lower()
    if confirm != 'yes':
        print("Admin creation cancelled.")
        return
    
    app = create_app()
    with app.app_context():
        db.create_all()
        create_admin_member(email, password, name, address)


if __name__ == '__main__':
    main()
