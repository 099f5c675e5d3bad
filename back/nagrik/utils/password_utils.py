# Third-party imports
import bcrypt


def get_password_hash(secret: str) -> str:
    """
    Hash a short secret (one-time codes) with bcrypt.
    """
    hashed = bcrypt.hashpw(password=secret.encode("utf-8"), salt=bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_secret: str, hashed_secret: str) -> bool:
    """
    Verify a plain secret against its bcrypt hash.
    """
    return bcrypt.checkpw(password=plain_secret.encode("utf-8"), hashed_password=hashed_secret.encode("utf-8"))
