import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.exc import IntegrityError

from main import app
from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_company_admin, require_company_member


class WorkScheduleRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[require_company_member] = lambda: 1
        app.dependency_overrides[require_company_admin] = lambda: 1

        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(require_company_member, None)
        app.dependency_overrides.pop(require_company_admin, None)

    @patch("workschedule.router.service.get_company_schedule")
    def test_get_schedule(self, mock_get):
        mock_get.return_value = [
            Obj(id=1, company_id=1, day_of_week=1, start_time="08:00:00", end_time="17:00:00", is_work_day=True),
            Obj(id=2, company_id=1, day_of_week=6, start_time="08:00:00", end_time="12:00:00", is_work_day=False),
        ]
        resp = self.client.get("/api/companies/me/work-schedule")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual([d["is_work_day"] for d in resp.json()], [True, False])
        self.assertEqual(mock_get.call_args.args[1], 1)

    @patch("workschedule.router.service.replace_company_schedule")
    def test_put_schedule(self, mock_replace):
        mock_replace.return_value = [
            Obj(id=3, company_id=1, day_of_week=1, start_time="07:00:00", end_time="15:00:00", is_work_day=True),
        ]
        resp = self.client.put(
            "/api/companies/me/work-schedule",
            json={"slots": [{"day_of_week": 1, "start_time": "07:00", "end_time": "15:00"}]},
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(mock_replace.call_args.kwargs["company_id"], 1)

    @patch("workschedule.router.service.replace_company_schedule")
    def test_put_inverted_work_day_422(self, mock_replace):
        resp = self.client.put(
            "/api/companies/me/work-schedule",
            json={"slots": [{"day_of_week": 1, "start_time": "17:00", "end_time": "08:00"}]},
        )
        self.assertEqual(resp.status_code, 422)
        mock_replace.assert_not_called()

    @patch("workschedule.router.service.replace_company_schedule")
    def test_put_integrity_error_409(self, mock_replace):
        mock_replace.side_effect = IntegrityError("stmt", "params", Exception("unique"))
        resp = self.client.put(
            "/api/companies/me/work-schedule",
            json={"slots": [{"day_of_week": 1, "start_time": "07:00", "end_time": "15:00"}]},
        )
        self.assertEqual(resp.status_code, 409)

    def test_put_requires_admin(self):
        app.dependency_overrides.pop(require_company_admin, None)
        app.dependency_overrides[get_current_active_user] = lambda: Obj(id=7, role="cleaner", company_id=None)
        try:
            resp = self.client.put("/api/companies/me/work-schedule", json={"slots": []})
            self.assertEqual(resp.status_code, 403)
        finally:
            app.dependency_overrides.pop(get_current_active_user, None)


if __name__ == "__main__":
    unittest.main()
