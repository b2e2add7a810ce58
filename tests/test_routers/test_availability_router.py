import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from main import app
from core.database import get_db
from auth.services.auth_service import get_current_active_user
from user.models import UserRole


class AvailabilityRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        self.user = Obj(id=7, company_id=None, role=UserRole.cleaner)
        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[get_current_active_user] = lambda: self.user

        self.client = TestClient(app)
        self.body = {"slots": [{"day_of_week": 1, "start_time": "09:00", "end_time": "13:00"}]}

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_active_user, None)

    @patch("availability.router.service.get_weekly_availability")
    @patch("availability.router.get_cleaner_in_scope")
    def test_get_weekly_pattern(self, mock_scope, mock_get):
        mock_get.return_value = [
            Obj(id=1, cleaner_id=10, day_of_week=1, start_time="09:00:00", end_time="13:00:00", is_available=True),
        ]
        resp = self.client.get("/api/cleaners/10/availability")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()[0]["day_of_week"], 1)

    @patch("availability.router.service.replace_weekly_availability")
    @patch("availability.router.get_cleaner")
    def test_cleaner_saves_own_pattern(self, mock_cleaner, mock_replace):
        mock_cleaner.return_value = Obj(id=10, company_id=1, user_id=7)
        mock_replace.return_value = [
            Obj(id=5, cleaner_id=10, day_of_week=1, start_time="09:00:00", end_time="13:00:00", is_available=True),
        ]
        resp = self.client.put("/api/cleaners/10/availability", json=self.body)
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(mock_replace.call_args.kwargs["cleaner_id"], 10)

    @patch("availability.router.service.replace_weekly_availability")
    @patch("availability.router.get_cleaner")
    def test_colleague_forbidden(self, mock_cleaner, mock_replace):
        mock_cleaner.return_value = Obj(id=11, company_id=1, user_id=8)
        resp = self.client.put("/api/cleaners/11/availability", json=self.body)
        self.assertEqual(resp.status_code, 403)
        mock_replace.assert_not_called()

    @patch("availability.router.get_cleaner")
    def test_unknown_cleaner_404(self, mock_cleaner):
        mock_cleaner.return_value = None
        resp = self.client.put("/api/cleaners/999/availability", json=self.body)
        self.assertEqual(resp.status_code, 404)

    @patch("availability.router.get_cleaner")
    def test_duplicate_days_422(self, mock_cleaner):
        body = {"slots": [
            {"day_of_week": 1, "start_time": "09:00", "end_time": "13:00"},
            {"day_of_week": 1, "start_time": "14:00", "end_time": "16:00"},
        ]}
        resp = self.client.put("/api/cleaners/10/availability", json=body)
        self.assertEqual(resp.status_code, 422)

    @patch("availability.router.get_cleaner")
    def test_day_out_of_range_422(self, mock_cleaner):
        body = {"slots": [{"day_of_week": 7, "start_time": "09:00", "end_time": "13:00"}]}
        resp = self.client.put("/api/cleaners/10/availability", json=body)
        self.assertEqual(resp.status_code, 422)

    @patch("availability.router.service.replace_weekly_availability")
    @patch("availability.router.get_cleaner")
    def test_integrity_error_409(self, mock_cleaner, mock_replace):
        mock_cleaner.return_value = Obj(id=10, company_id=1, user_id=7)
        mock_replace.side_effect = IntegrityError("stmt", "params", Exception("unique"))
        resp = self.client.put("/api/cleaners/10/availability", json=self.body)
        self.assertEqual(resp.status_code, 409)


if __name__ == "__main__":
    unittest.main()
