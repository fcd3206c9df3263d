"""
Training forms using Flask-WTF.
"""

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, IntegerField, SelectField, BooleanField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional

from models.reservation import FACILITY_TYPES, FACILITY_TYPE_LABELS
from models.scheduled_class import MAX_ATTENDEES_LIMIT
from models.training_class import DURATION_TYPES
from utils.forms import strip_filter


class ClassForm(FlaskForm):
    """Create or edit a training class."""

    name = StringField('Class Name', filters=[strip_filter], validators=[
        DataRequired(message='Class name must be at least 3 characters'),
        Length(min=3, max=100, message='Class name must be 3 to 100 characters')
    ])

    description = TextAreaField('Description', filters=[strip_filter], validators=[
        DataRequired(message='Description must be at least 10 characters'),
        Length(min=10, max=1000, message='Description must be 10 to 1000 characters')
    ])

    duration = IntegerField('Duration', validators=[
        InputRequired(message='Duration must be at least 1'),
        NumberRange(min=1, max=1000, message='Duration must be between 1 and 1000')
    ])

    duration_type = SelectField('Duration Type', choices=[(t, t.title()) for t in DURATION_TYPES])

    prerequisites = StringField('Prerequisites', filters=[strip_filter], validators=[
        Optional()
    ])

    requires_dorm_room = BooleanField('Requires Dorm Room')


class ScheduleForm(FlaskForm):
    """Schedule a session of a training class."""

    class_id = StringField('Class', filters=[strip_filter], validators=[
        DataRequired(message='Please select a class')
    ])

    facility_type = SelectField('Facility Type',
                                choices=[(t, FACILITY_TYPE_LABELS[t]) for t in FACILITY_TYPES])

    max_attendees = IntegerField('Max Attendees', validators=[
        InputRequired(message='Must have at least 1 attendee'),
        NumberRange(min=1, max=MAX_ATTENDEES_LIMIT,
                    message=f'Max attendees must be between 1 and {MAX_ATTENDEES_LIMIT}')
    ])
