"""
Form binding helpers shared by the module forms.
"""

from werkzeug.datastructures import MultiDict


def strip_filter(value):
    """WTForms filter trimming surrounding whitespace."""
    return value.strip() if isinstance(value, str) else value


def _form_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return value if isinstance(value, str) else str(value)


def bind_form(form_class, data: dict, **kwargs):
    """
    Bind a plain dict (e.g. a JSON body) to a FlaskForm.

    CSRF is checked by CSRFProtect at request level, so the bound form
    never expects a token. Lists and None values are not form input and
    are skipped.
    """
    values = MultiDict({
        key: _form_value(value)
        for key, value in (data or {}).items()
        if value is not None and not isinstance(value, (list, dict))
    })
    return form_class(formdata=values, meta={'csrf': False}, **kwargs)
