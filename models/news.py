from mongoengine import DynamicDocument, BooleanField, StringField


class News(DynamicDocument):
    # any other field sent by the client is stored as a dynamic field
    display = BooleanField(default=False)
    created_at = StringField(db_field="createdAt")  # ISO-8601, set on insert

    meta = {"collection": "news"}

