# models/stoerer.py
import datetime
from mongoengine import Document, StringField, BooleanField, DateTimeField


class Stoerer(Document):
    """
    Site-wide announcement banner. The collection is treated as a singleton:
    reads and updates go to the first document found.
    """
    line1 = StringField(default="")
    line2 = StringField(default="")
    is_active = BooleanField(default=False, db_field="isActive")
    updated_at = DateTimeField(db_field="updatedAt")

    meta = {"collection": "stoerer"}

    def public_view(self):
        # inactive banners never expose their content
        if not self.is_active:
            return {"line1": "", "line2": "", "isActive": False}
        return {"line1": self.line1 or "", "line2": self.line2 or "", "isActive": True}
