import unittest

from models.stoerer import Stoerer
from tests.support import AppTestCase

EMPTY = {"line1": "", "line2": "", "isActive": False}


class PublicStoererTests(AppTestCase):
    def test_first_read_creates_inactive_banner(self):
        self.assertEqual(Stoerer.objects.count(), 0)
        response = self.client.get("/api/stoerer")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json, EMPTY)
        self.assertEqual(Stoerer.objects.count(), 1)

        self.client.get("/api/stoerer")
        self.assertEqual(Stoerer.objects.count(), 1)

    def test_inactive_banner_hides_content(self):
        Stoerer(line1="A", line2="B", is_active=False).save()
        self.assertEqual(self.client.get("/api/stoerer").json, EMPTY)


class AdminStoererTests(AppTestCase):
    def setUp(self):
        super().setUp()
        self.login()

    def test_update_requires_token(self):
        anonymous = self.app.test_client()
        response = anonymous.put("/api/admin/stoerer", json={"line1": "x"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(anonymous.delete("/api/admin/stoerer").status_code, 401)

    def test_set_active_banner(self):
        response = self.client.put(
            "/api/admin/stoerer", json={"line1": "Eilmeldung", "line2": "Mehr dazu", "isActive": True}
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json, {"message": "Störer erfolgreich aktualisiert"})
        self.assertEqual(
            self.client.get("/api/stoerer").json,
            {"line1": "Eilmeldung", "line2": "Mehr dazu", "isActive": True},
        )
        self.assertIsNotNone(Stoerer.objects.first().updated_at)

    def test_set_inactive_keeps_content_private(self):
        self.client.put("/api/admin/stoerer", json={"line1": "A", "line2": "B", "isActive": False})
        self.assertEqual(self.client.get("/api/stoerer").json, EMPTY)
        stored = Stoerer.objects.first()
        self.assertEqual((stored.line1, stored.line2), ("A", "B"))

    def test_missing_fields_default_to_empty(self):
        self.client.put("/api/admin/stoerer", json={"line1": "nur eine Zeile", "line2": None})
        stored = Stoerer.objects.first()
        self.assertEqual(stored.line1, "nur eine Zeile")
        self.assertEqual(stored.line2, "")
        self.assertFalse(stored.is_active)

    def test_update_targets_existing_singleton(self):
        self.client.get("/api/stoerer")
        self.client.put("/api/admin/stoerer", json={"line1": "A", "isActive": True})
        self.client.put("/api/admin/stoerer", json={"line1": "B", "isActive": True})
        self.assertEqual(Stoerer.objects.count(), 1)
        self.assertEqual(self.client.get("/api/stoerer").json["line1"], "B")

    def test_invalid_payload(self):
        response = self.client.put("/api/admin/stoerer", json={"line1": ["not", "a", "string"]})
        self.assertEqual(response.status_code, 400)

    def test_clear_resets_every_document(self):
        Stoerer(line1="A", line2="B", is_active=True).save()
        Stoerer(line1="C", line2="D", is_active=True).save()

        response = self.client.delete("/api/admin/stoerer")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json, {"message": "Störer erfolgreich gelöscht"})

        self.assertEqual(Stoerer.objects.count(), 2)
        for stoerer in Stoerer.objects:
            self.assertEqual((stoerer.line1, stoerer.line2, stoerer.is_active), ("", "", False))
        self.assertEqual(self.client.get("/api/stoerer").json, EMPTY)


if __name__ == "__main__":
    unittest.main()
