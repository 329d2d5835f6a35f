from wtforms.validators import StopValidation, ValidationError


def whole_number(form, field):
    # IntegerField truncates 3.5 and accepts true/false from JSON bodies
    raw = field.raw_data[0] if field.raw_data else None
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValidationError("Not a valid integer value.")


def string_value(form, field):
    """Reject non-string JSON values before Length/Email see them.

    JSON bodies reach the form with their types intact, so ``{"title": 42}``
    leaves an int in ``field.data``. Missing and null values are left to
    DataRequired/Optional.
    """
    raw = field.raw_data[0] if field.raw_data else None
    if raw is not None and not isinstance(raw, str):
        field.data = None
        raise StopValidation("Not a valid string value.")
