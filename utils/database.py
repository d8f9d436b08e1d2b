import logging
from contextlib import contextmanager

from mongoengine import connect, disconnect
from mongoengine.connection import DEFAULT_CONNECTION_NAME, get_db
from mongoengine.errors import OperationError
from pymongo.errors import PyMongoError

from utils.errors import DatabaseConnectionError, StoreError

logger = logging.getLogger(__name__)


class Database:
    """
    Owns the single MongoDB connection of the app.
    The connection is opened on the first connect() and reused afterwards.
    Documents in models/ use mongoengine's default alias, so does this class.
    """

    alias = DEFAULT_CONNECTION_NAME

    def __init__(self, uri: str, name: str, **client_kwargs):
        self.uri = uri
        self.name = name
        self.client_kwargs = client_kwargs
        self._db = None

    def connect(self):
        if self._db is not None:
            return self._db

        logger.info("Connecting to MongoDB...")
        try:
            connect(db=self.name, host=self.uri, alias=self.alias, **self.client_kwargs)
            db = get_db(self.alias)
            # mongoengine connects lazily, make sure the server answers
            db.command("ping")
        except Exception as e:
            logger.error("Error connecting to MongoDB: %s", e)
            disconnect(self.alias)
            raise DatabaseConnectionError() from e

        self._db = db
        logger.info("Connected to MongoDB: %s", self._db.name)
        return self._db

    def collection(self, name: str):
        return self.connect()[name]

    def close(self):
        if self._db is None:
            return
        disconnect(self.alias)
        self._db = None
        logger.info("MongoDB connection closed")


@contextmanager
def store_errors():
    """Re-raise driver failures as StoreError, keeping the driver's message."""
    try:
        yield
    except (PyMongoError, OperationError) as e:
        raise StoreError(str(e)) from e
