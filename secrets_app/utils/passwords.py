import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes; bcrypt>=5 refuses anything longer.
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash password with bcrypt (salted, cost factor ``rounds``).

    Args:
        password: Plain text password, at most MAX_PASSWORD_BYTES in UTF-8
        rounds: bcrypt work factor (log2 iterations)

    Returns:
        Bcrypt hash string

    Raises:
        ValueError: If the password is longer than MAX_PASSWORD_BYTES
    """
    if password_too_long(password):
        raise ValueError(f"password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Verify password against bcrypt hash with constant-time comparison.

    Returns False for anything that is not a bcrypt hash, which includes the
    placeholder stored for Google-only accounts, and for passwords bcrypt
    cannot hash.
    """
    if password_too_long(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Invalid salt / not a bcrypt hash
        return False
