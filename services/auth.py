# services/auth.py
import logging

from flask_jwt_extended import create_access_token
from passlib.context import CryptContext

from models.admin import Admin
from utils.database import Database, store_errors
from utils.errors import InvalidCredentials

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin123"

# bcrypt verifies hashes written by the previous Node deployment (bcryptjs)
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    if not hashed:
        return False
    try:
        return pwd_context.verify(password, hashed)
    except ValueError:
        # unknown / malformed hash in the admins collection
        return False


def verify_and_update(password: str, hashed: str):
    """Returns (valid, new_hash); new_hash is set when a deprecated scheme matched."""
    if not hashed:
        return False, None
    try:
        return pwd_context.verify_and_update(password, hashed)
    except ValueError:
        return False, None


class AuthService:
    def __init__(self, db: Database):
        self.db = db

    def login(self, username: str, password: str):
        """
        Check the credentials and issue a signed token for the admin.
        Returns (admin, token). Must run inside a Flask app context.
        """
        with store_errors():
            self.db.connect()
            admin = Admin.objects(username=username).first()

        valid, new_hash = verify_and_update(password, admin.password_hash) if admin else (False, None)
        if not valid:
            logger.warning("Failed login for %r", username)
            raise InvalidCredentials()
        if new_hash:
            with store_errors():
                admin.update(set__password_hash=new_hash)
            logger.info("Password hash of %s upgraded to pbkdf2_sha256", admin.username)

        token = create_access_token(
            identity=str(admin.id),
            additional_claims={"id": str(admin.id), "username": admin.username},
        )
        logger.info("Admin %s logged in", admin.username)
        return admin, token

    def ensure_bootstrap_admin(self) -> bool:
        """Create the default admin once. Returns True if it was created."""
        with store_errors():
            self.db.connect()
            if Admin.objects(username=DEFAULT_ADMIN_USERNAME).first():
                return False
            Admin(
                username=DEFAULT_ADMIN_USERNAME,
                password_hash=hash_password(DEFAULT_ADMIN_PASSWORD),
            ).save()

        logger.warning(
            "Default admin %r created. Change its password after the first login!",
            DEFAULT_ADMIN_USERNAME,
        )
        return True
