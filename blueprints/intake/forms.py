"""
Intake forms using Flask-WTF.
Field rules for the application and user registration wizards.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, SelectField
from wtforms.validators import DataRequired, Email, Length, Optional

from utils.forms import strip_filter
from utils.validators import USPhone, MinimumAge, ISODate

PHONE_TYPES = ['Mobile', 'Home', 'Work']
CONTACT_METHODS = ['Email', 'Phone', 'Either']


class ApplicationForm(FlaskForm):
    """New PSP application."""

    first_name = StringField('First Name', filters=[strip_filter], validators=[
        DataRequired(message='First name is required'),
        Length(min=2, max=50, message='First name must be 2 to 50 characters')
    ])

    middle_name = StringField('Middle Name', filters=[strip_filter], validators=[
        Optional(),
        Length(max=50, message='Middle name must not exceed 50 characters')
    ])

    last_name = StringField('Last Name', filters=[strip_filter], validators=[
        DataRequired(message='Last name is required'),
        Length(min=2, max=50, message='Last name must be 2 to 50 characters')
    ])

    suffix = StringField('Suffix', filters=[strip_filter], validators=[
        Optional(),
        Length(max=10, message='Suffix must not exceed 10 characters')
    ])

    email = StringField('Email', filters=[strip_filter], validators=[
        DataRequired(message='Email is required'),
        Email(message='Please enter a valid email address')
    ])

    phone = StringField('Phone', filters=[strip_filter], validators=[
        DataRequired(message='Phone is required'),
        USPhone()
    ])

    phone_type = SelectField('Phone Type', choices=[(t, t) for t in PHONE_TYPES])

    home_address = StringField('Home Address', filters=[strip_filter], validators=[
        DataRequired(message='Home address is required'),
        Length(min=10, message='Please enter a complete home address')
    ])

    mailing_address = StringField('Mailing Address', filters=[strip_filter], validators=[
        Optional()
    ])

    date_of_birth = StringField('Date of Birth', filters=[strip_filter], validators=[
        DataRequired(message='Date of birth is required'),
        MinimumAge(18, message='You must be at least 18 years old to apply')
    ])


class RegistrationForm(ApplicationForm):
    """User registration: application fields plus employment details."""

    date_of_birth = StringField('Date of Birth', filters=[strip_filter], validators=[
        DataRequired(message='Date of birth is required'),
        MinimumAge(18, message='You must be at least 18 years old to register')
    ])

    best_contact_method = SelectField('Best Contact Method',
                                      choices=[(m, m) for m in CONTACT_METHODS])

    current_employer = StringField('Current Employer', filters=[strip_filter], validators=[
        DataRequired(message='Employer name is required'),
        Length(min=2, message='Employer name is required')
    ])

    employer_phone = StringField('Employer Phone', filters=[strip_filter], validators=[
        DataRequired(message='Employer phone is required'),
        USPhone()
    ])

    employer_email = StringField('Employer Email', filters=[strip_filter], validators=[
        DataRequired(message='Employer email is required'),
        Email(message='Please enter a valid email address')
    ])

    business_address = StringField('Business Address', filters=[strip_filter], validators=[
        DataRequired(message='Business address is required'),
        Length(min=10, message='Please enter a complete business address')
    ])

    title = StringField('Title', filters=[strip_filter], validators=[
        DataRequired(message='Job title is required'),
        Length(min=2, message='Job title is required')
    ])

    employment_start_date = StringField('Employment Start Date', filters=[strip_filter], validators=[
        DataRequired(message='Employment start date is required'),
        ISODate()
    ])
