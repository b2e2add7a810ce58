import unittest
from types import SimpleNamespace as Obj
from unittest.mock import patch
from fastapi.testclient import TestClient

from main import app
from core.database import get_db
from auth.services.auth_service import get_current_active_user
from authz.deps import require_company_admin, require_company_member


def _job(**kw):
    base = dict(
        id=1, company_id=1, cleaner_id=10, reference_code="HMC-001",
        scheduled_date="2025-06-09", start_time="09:00:00", duration_hours=2.0, status="assigned",
    )
    base.update(kw)
    return Obj(**base)


class AssignmentRouterTests(unittest.TestCase):
    def setUp(self):
        class FakeDB:
            def rollback(self): pass
        def _fake_db():
            yield FakeDB()

        app.dependency_overrides[get_db] = _fake_db
        app.dependency_overrides[get_current_active_user] = lambda: Obj(id=123, company_id=1, role="company_admin")
        app.dependency_overrides[require_company_member] = lambda: 1
        app.dependency_overrides[require_company_admin] = lambda: 1

        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_current_active_user, None)
        app.dependency_overrides.pop(require_company_member, None)
        app.dependency_overrides.pop(require_company_admin, None)

    # --- LIST ---

    @patch("assignment.router.service.get_company_assignments")
    def test_list_company_week(self, mock_list):
        mock_list.return_value = [_job(), _job(id=2, cleaner_id=11)]
        resp = self.client.get("/api/assignments?date_from=2025-06-09&date_to=2025-06-15")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(len(resp.json()), 2)
        self.assertFalse(mock_list.call_args.kwargs["include_cancelled"])

    @patch("assignment.router.service.get_assignments")
    @patch("assignment.router.get_cleaner_in_scope")
    def test_list_one_cleaner(self, mock_scope, mock_list):
        mock_list.return_value = [_job(status="cancelled_by_client")]
        resp = self.client.get(
            "/api/assignments?date_from=2025-06-09&date_to=2025-06-15&cleaner_id=10&include_cancelled=true"
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()[0]["status"], "cancelled_by_client")
        mock_scope.assert_called_once()
        self.assertTrue(mock_list.call_args.kwargs["include_cancelled"])

    def test_list_requires_range(self):
        resp = self.client.get("/api/assignments")
        self.assertEqual(resp.status_code, 422)

    # --- CONFLICTS ---

    @patch("assignment.router.service.find_conflicts")
    def test_conflicts(self, mock_conflicts):
        mock_conflicts.return_value = [
            Obj(cleaner_id=10, date="2025-06-09", pairs=[Obj(first_id=1, second_id=2)]),
        ]
        resp = self.client.get("/api/assignments/conflicts?date_from=2025-06-09&date_to=2025-06-15")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()[0]["pairs"], [{"first_id": 1, "second_id": 2}])

    # --- GET /{id} ---

    @patch("assignment.router.service.get_assignment")
    def test_get_assignment_200(self, mock_get):
        mock_get.return_value = _job(id=5)
        resp = self.client.get("/api/assignments/5")
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["id"], 5)

    @patch("assignment.router.service.get_assignment")
    def test_get_assignment_other_company_404(self, mock_get):
        mock_get.return_value = _job(id=5, company_id=2)
        resp = self.client.get("/api/assignments/5")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["detail"], "assignment not found")

    # --- POST ---

    @patch("assignment.router.service.create_assignment")
    def test_create_assignment_201(self, mock_create):
        mock_create.return_value = _job(id=9)
        resp = self.client.post("/api/assignments", json={
            "cleaner_id": 10, "scheduled_date": "2025-06-09", "start_time": "09:00", "duration_hours": 2,
        })
        self.assertEqual(resp.status_code, 201, resp.text)
        dto = mock_create.call_args.args[1]
        self.assertEqual(dto.company_id, 1)
        self.assertEqual(dto.duration_hours, 2)

    @patch("assignment.router.service.create_assignment")
    def test_create_zero_duration_422(self, mock_create):
        resp = self.client.post("/api/assignments", json={
            "cleaner_id": 10, "scheduled_date": "2025-06-09", "start_time": "09:00", "duration_hours": 0,
        })
        self.assertEqual(resp.status_code, 422)
        mock_create.assert_not_called()

    @patch("assignment.router.service.create_assignment")
    def test_create_rejects_company_id_in_payload(self, mock_create):
        resp = self.client.post("/api/assignments", json={
            "company_id": 2, "cleaner_id": 10, "scheduled_date": "2025-06-09", "start_time": "09:00", "duration_hours": 1,
        })
        self.assertEqual(resp.status_code, 422)


if __name__ == "__main__":
    unittest.main()
