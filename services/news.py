# services/news.py
import datetime
import logging

from bson import ObjectId

from models.news import News
from utils.database import Database, store_errors
from utils.errors import BadId

logger = logging.getLogger(__name__)

COLLECTION = News._meta["collection"]


def _iso_now():
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_json(doc: dict) -> dict:
    return {**doc, "_id": str(doc["_id"])}


def parse_id(raw_id: str) -> ObjectId:
    if not raw_id or not ObjectId.is_valid(raw_id):
        raise BadId(f"Invalid news id: {raw_id}")
    return ObjectId(raw_id)


class NewsService:
    """
    CRUD over the news collection.

    At most one item carries display=True: a write that sets it first clears
    the flag on every item. Clearing and writing are two separate store
    operations, so concurrent writers can briefly leave zero or two items
    displayed.
    """

    def __init__(self, db: Database):
        self.db = db

    def list(self) -> list:
        with store_errors():
            return [_to_json(doc) for doc in self.db.collection(COLLECTION).find()]

    def create(self, item: dict) -> str:
        with store_errors():
            self.db.connect()
            if item.get("display"):
                self._clear_display()
            # stored as sent, client keys never touch the document class
            doc = {**item, "display": bool(item.get("display")), "createdAt": _iso_now()}
            news_id = self.db.collection(COLLECTION).insert_one(doc).inserted_id
        logger.info("News %s created", news_id)
        return str(news_id)

    def update(self, raw_id: str, patch: dict):
        oid = parse_id(raw_id)
        if not patch:
            return
        with store_errors():
            self.db.connect()
            if patch.get("display"):
                self._clear_display()
            # a non-matching id updates nothing
            News.objects(id=oid).update_one(__raw__={"$set": patch})

    def delete(self, raw_id: str):
        oid = parse_id(raw_id)
        with store_errors():
            self.db.connect()
            News.objects(id=oid).delete()

    def _clear_display(self):
        News.objects.update(set__display=False)
