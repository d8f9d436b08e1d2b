# services/stoerer.py
import datetime

from models.stoerer import Stoerer
from utils.database import Database, store_errors


def _now():
    return datetime.datetime.now(datetime.timezone.utc)


class StoererService:
    def __init__(self, db: Database):
        self.db = db

    def get(self) -> dict:
        with store_errors():
            self.db.connect()
            stoerer = Stoerer.objects.first()
            if not stoerer:
                stoerer = Stoerer(line1="", line2="", is_active=False).save()
        return stoerer.public_view()

    def set(self, line1=None, line2=None, is_active=None):
        fields = {
            "line1": line1 or "",
            "line2": line2 or "",
            "is_active": bool(is_active),
            "updated_at": _now(),
        }
        with store_errors():
            self.db.connect()
            stoerer = Stoerer.objects.first()
            if stoerer:
                stoerer.update(**{f"set__{k}": v for k, v in fields.items()})
            else:
                Stoerer(**fields).save()

    def clear(self):
        # every document, in case more than one ever got inserted
        with store_errors():
            self.db.connect()
            Stoerer.objects.update(
                set__line1="",
                set__line2="",
                set__is_active=False,
                set__updated_at=_now(),
            )
