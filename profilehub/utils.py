"""Small request-input helpers shared by the routes and the stores."""

from profilehub.errors import ValidationError

# Range of a 32-bit INTEGER column, the narrowest of the supported databases
DB_INT_MIN = -2 ** 31
DB_INT_MAX = 2 ** 31 - 1


def parse_int(value, field):
    """Coerce form or query text to an int, raising ValidationError when it isn't one."""
    text = '' if value is None else str(value).strip()
    if not text:
        raise ValidationError(f'{field} not provided')
    try:
        return int(text)
    except ValueError:
        raise ValidationError(f'{field} must be a whole number') from None


def fits_db_integer(value):
    return DB_INT_MIN <= value <= DB_INT_MAX


def parse_db_int(value, field):
    """Like ``parse_int`` but also rejects values an INTEGER column cannot hold."""
    number = parse_int(value, field)
    if not fits_db_integer(number):
        raise ValidationError(f'{field} is out of range')
    return number
