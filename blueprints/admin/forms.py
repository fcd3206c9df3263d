"""
Administration forms using Flask-WTF.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField
from wtforms.validators import DataRequired, Email, Length, Optional

from models.user import USER_STATUSES
from utils.forms import strip_filter
from utils.validators import CellNumber


class RoleForm(FlaskForm):
    """Create or edit a role (permissions are sent as a matrix alongside)."""

    name = StringField('Role Name', filters=[strip_filter], validators=[
        DataRequired(message='Role name is required'),
        Length(max=50, message='Role name must not exceed 50 characters')
    ])

    description = TextAreaField('Description', filters=[strip_filter], validators=[
        Optional(),
        Length(max=500, message='Description must not exceed 500 characters')
    ])


class UserForm(FlaskForm):
    """Create or edit an administered user."""

    username = StringField('Username', filters=[strip_filter], validators=[
        DataRequired(message='Username must be at least 3 characters'),
        Length(min=3, max=50, message='Username must be 3 to 50 characters')
    ])

    email = StringField('Email', filters=[strip_filter], validators=[
        DataRequired(message='Invalid email address'),
        Email(message='Invalid email address')
    ])

    full_name = StringField('Full Name', filters=[strip_filter], validators=[
        DataRequired(message='Full name is required'),
        Length(min=2, max=100, message='Full name is required')
    ])

    cell_number = StringField('Cell Number', filters=[strip_filter], validators=[
        DataRequired(message='Cell number must be at least 10 digits'),
        CellNumber(10)
    ])

    role = StringField('Role', filters=[strip_filter], validators=[
        DataRequired(message='Role is required')
    ])

    status = SelectField('Status', choices=[(s, s) for s in USER_STATUSES])
