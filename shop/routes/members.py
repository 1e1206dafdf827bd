"""Member registration and authentication routes."""

from urllib.parse import urlsplit
from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from flask_login import login_user, logout_user, current_user
from shop.exceptions import DuplicateMemberError
from shop.forms.member import LoginForm, MemberForm
from shop.models import Member

members_bp = Blueprint('members', __name__)


def _is_safe_next(target):
    """Only follow relative, same-site redirect targets."""
    parts = urlsplit(target)
    return not parts.scheme and not parts.netloc and target.startswith('/')


@members_bp.route('/new', methods=['GET', 'POST'])
def member_form():
    """Member registration."""
    form = MemberForm()
    if form.validate_on_submit():
        member = Member.create_member(form)
        try:
            Member.save_member(member)
        except DuplicateMemberError as e:
            current_app.logger.info('Registration rejected for %s: %s', member.email, e)
            return render_template('member/memberForm.html', form=form, error_message=str(e))
        
        current_app.logger.info('Registered member %s', member.email)
        flash('Registration successful! Please log in.', 'success')
        return redirect(url_for('main.index'))
    
    return render_template('member/memberForm.html', form=form)


@members_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Member login."""
    if current_user.is_authenticated:
        return redirect(url_for('main.index'))
    
    form = LoginForm()
    if form.validate_on_submit():
        member = Member.query.filter_by(email=form.email.data.lower()).first()
        
        if member and member.check_password(form.password.data):
            login_user(member, remember=form.remember.data)
            current_app.logger.info('Member %s logged in', member.email)
            
            next_page = request.args.get('next')
            if next_page and _is_safe_next(next_page):
                return redirect(next_page)
            return redirect(url_for('main.index'))
        
        current_app.logger.warning('Failed login for %s', form.email.data)
        return redirect(url_for('members.login_error'))
    
    return render_template('member/memberLoginForm.html', form=form)


@members_bp.route('/login/error')
def login_error():
    """Login page redisplayed after a failed attempt."""
    form = LoginForm()
    return render_template('member/memberLoginForm.html', form=form,
                           login_error_msg='Please check your email or password.')


@members_bp.route('/logout')
def logout():
    """Member logout."""
    if current_user.is_authenticated:
        current_app.logger.info('Member %s logged out', current_user.email)
        logout_user()
        flash('You have been logged out.', 'info')
    return redirect(url_for('main.index'))
