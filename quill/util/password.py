"""Password hashing utilities.

bcrypt embeds a random salt and the work factor in every digest, so a digest
is all that needs to be stored.
"""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt work factor (log2 rounds)

    Returns:
        bcrypt digest as a string
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt digest.

    Comparison happens inside bcrypt in constant time. A malformed digest
    is treated as a mismatch.

    Args:
        password: Plaintext password
        password_hash: Stored bcrypt digest

    Returns:
        True if the password matches
    """
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except (ValueError, TypeError):
        return False
