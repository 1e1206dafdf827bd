"""Member model."""

from flask_login import UserMixin
from shop.constants import Role
from shop.exceptions import DuplicateMemberError
from shop.extensions import db, bcrypt
from .base import AuditMixin


class Member(UserMixin, AuditMixin, db.Model):
    """Shop member, either a regular user or an administrator."""
    __tablename__ = 'member'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password = db.Column(db.String(255), nullable=False)
    address = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role), nullable=False, default=Role.USER)
    
    # Relationships
    cart = db.relationship('Cart', back_populates='member', uselist=False, cascade='all, delete-orphan')
    orders = db.relationship('Order', back_populates='member', lazy='dynamic')
    
    @classmethod
    def create_member(cls, form):
        """Build a new USER member from a validated MemberForm."""
        member = cls(
            name=form.name.data,
            email=form.email.data.lower(),
            address=form.address.data,
            role=Role.USER
        )
        member.set_password(form.password.data)
        return member
    
    @classmethod
    def validate_duplicate_member(cls, email):
        """Raise DuplicateMemberError if the email is already taken."""
        if cls.query.filter_by(email=email.lower()).first() is not None:
            raise DuplicateMemberError()
    
    @classmethod
    def save_member(cls, member):
        """Persist a new member after the duplicate check."""
        cls.validate_duplicate_member(member.email)
        db.session.add(member)
        db.session.commit()
        return member
    
    def set_password(self, password):
        """Hash and set the password."""
        self.password = bcrypt.generate_password_hash(password).decode('utf-8')
    
    def check_password(self, password):
        """Check if password matches."""
        return bcrypt.check_password_hash(self.password, password)
    
    def is_admin(self):
        """Check if member is admin."""
        return self.role == Role.ADMIN
    
    def __repr__(self):
        return f'<Member {self.email}>'
