from mongoengine import Document, StringField, DateTimeField
import datetime


def _now():
    return datetime.datetime.now(datetime.timezone.utc)


class Admin(Document):
    username = StringField(required=True, unique=True)
    password_hash = StringField(required=True, db_field="password")  # passlib hash, never plain text
    created_at = DateTimeField(default=_now, db_field="createdAt")

    meta = {"collection": "admins"}
