"""Password strength rule."""

import string


def check_password(password: str) -> bool:
    """True if the password has a lower-case letter, an upper-case letter, a digit and a special character."""
    lower = upper = digit = special = False
    for char in password:
        if char in string.ascii_lowercase:
            lower = True
        elif char in string.ascii_uppercase:
            upper = True
        elif char in string.digits:
            digit = True
        else:
            special = True
    return lower and upper and digit and special