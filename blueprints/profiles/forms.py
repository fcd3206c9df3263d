"""
Personnel profile form using Flask-WTF.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, SelectField
from wtforms.validators import DataRequired, Email, Length

from models.personnel import PERSONNEL_TYPES
from utils.forms import strip_filter
from utils.validators import USPhone


class PersonnelForm(FlaskForm):
    """Create or edit a personnel profile."""

    first_name = StringField('First Name', filters=[strip_filter], validators=[
        DataRequired(message='First name must be at least 2 characters'),
        Length(min=2, max=50, message='First name must be at least 2 characters')
    ])

    last_name = StringField('Last Name', filters=[strip_filter], validators=[
        DataRequired(message='Last name must be at least 2 characters'),
        Length(min=2, max=50, message='Last name must be at least 2 characters')
    ])

    email = StringField('Email', filters=[strip_filter], validators=[
        DataRequired(message='Invalid email address'),
        Email(message='Invalid email address')
    ])

    phone = StringField('Phone', filters=[strip_filter], validators=[
        DataRequired(message='Invalid phone number format'),
        USPhone(message='Invalid phone number format')
    ])

    profile_type = SelectField('Profile Type', choices=[(t, t) for t in PERSONNEL_TYPES])
