"""API resource tests."""

from tests.api.conftest import as_user


def _tags(item: dict) -> set[int]:
    """Facility ids a serialized record exposes."""
    tags = set(item.get("facility_ids") or ())
    for key in ("facility_id", "primary_facility_id"):
        if item.get(key) is not None:
            tags.add(item[key])
    return tags


class TestAuthentication:
    def test_no_session_is_401(self, client) -> None:
        result = client.simulate_get("/api/staff")
        assert result.status_code == 401
        assert result.json == {"error": "Unauthorized"}

    def test_unknown_subject_is_401(self, client) -> None:
        result = client.simulate_get("/api/me", headers={"X-Test-Subject": "ghost"})
        assert result.status_code == 401

    def test_health_needs_no_session(self, client) -> None:
        assert client.simulate_get("/health").status_code == 200


class TestMe:
    def test_me_returns_permissions_and_facilities(self, client) -> None:
        result = client.simulate_get("/api/me", headers=as_user(3))
        assert result.status_code == 200
        body = result.json
        assert body["principal"]["id"] == 3
        assert body["principal"]["primary_facility_id"] == 1
        assert "assign_staff" in body["permissions"]
        assert "view_billing" not in body["permissions"]
        assert body["facilities"] == {"unrestricted": False, "facility_ids": [1]}
        assert body["impersonating"] is False
        assert body["original_principal"] is None

    def test_me_super_admin_unrestricted(self, client) -> None:
        body = client.simulate_get("/api/me", headers=as_user(1)).json
        assert body["facilities"]["unrestricted"] is True
        assert len(body["permissions"]) == 41


class TestRoles:
    def test_roles_list_defaults(self, client) -> None:
        result = client.simulate_get("/api/roles", headers=as_user(4))
        assert result.status_code == 200
        roles = {r["role"]: r for r in result.json["items"]}
        assert roles["employee"]["default_permissions"] == ["view_schedules", "view_staff"]
        assert len(roles["super_admin"]["default_permissions"]) == 41
        assert roles["supervisor"]["label"] == "Supervisor"


class TestScopedRecords:
    def test_supervisor_sees_facility_one_staff(self, client) -> None:
        result = client.simulate_get("/api/staff", headers=as_user(3))
        assert result.status_code == 200
        assert [s["id"] for s in result.json["items"]] == [1, 3]

    def test_super_admin_sees_all_shifts(self, client) -> None:
        result = client.simulate_get("/api/shifts", headers=as_user(1))
        assert [s["id"] for s in result.json["items"]] == [10, 11]

    def test_shift_templates_scoped(self, client) -> None:
        result = client.simulate_get("/api/shift-templates", headers=as_user(4))
        assert [t["id"] for t in result.json["items"]] == [21]
        assert result.json["items"][0]["start_time"] == "19:00"

    def test_missing_permission_is_403(self, client) -> None:
        result = client.simulate_get("/api/invoices", headers=as_user(3))
        assert result.status_code == 403
        assert result.json == {"error": "Permission denied"}

    def test_override_grants_invoices_but_drops_defaults(self, client) -> None:
        result = client.simulate_get("/api/invoices", headers=as_user(5))
        assert result.status_code == 200
        assert [i["amount"] for i in result.json["items"]] == ["1200.00", "980.50"]
        assert client.simulate_get("/api/staff", headers=as_user(5)).status_code == 403

    def test_single_record_in_scope(self, client) -> None:
        result = client.simulate_get("/api/shifts/10", headers=as_user(3))
        assert result.status_code == 200
        assert result.json["title"] == "ICU day"

    def test_single_record_out_of_scope_is_404(self, client) -> None:
        result = client.simulate_get("/api/shifts/11", headers=as_user(3))
        assert result.status_code == 404
        assert result.json == {"error": "Shift not found"}

    def test_out_of_scope_matches_missing(self, client) -> None:
        hidden = client.simulate_get("/api/staff/2", headers=as_user(3))
        missing = client.simulate_get("/api/staff/999", headers=as_user(3))
        assert hidden.status_code == missing.status_code == 404
        assert hidden.json == missing.json

    def test_multi_facility_staff_shows_only_visible_facility(self, client) -> None:
        staff = client.simulate_get("/api/staff", headers=as_user(3)).json["items"]
        assert {s["id"]: s["facility_ids"] for s in staff} == {1: [1], 3: [1]}
        single = client.simulate_get("/api/staff/3", headers=as_user(3)).json
        assert single["facility_ids"] == [1]

    def test_super_admin_sees_every_facility_of_staff(self, client) -> None:
        staff = client.simulate_get("/api/staff/3", headers=as_user(1)).json
        assert staff["facility_ids"] == [1, 2]

    def test_tags_in_responses_stay_inside_scope(self, client) -> None:
        scopes = {2: {1}, 3: {1}, 4: {2}, 5: {1, 2}}
        paths = (
            "/api/staff",
            "/api/shifts",
            "/api/shift-templates",
            "/api/invoices",
            "/api/facility-users",
        )
        for user, visible in scopes.items():
            for path in paths:
                result = client.simulate_get(path, headers=as_user(user))
                if result.status_code != 200:
                    continue
                for item in result.json["items"]:
                    assert _tags(item) <= visible, (user, path, item)

    def test_facility_filter_narrows_list(self, client) -> None:
        result = client.simulate_get("/api/shifts?facility_id=2", headers=as_user(1))
        assert result.status_code == 200
        assert [s["id"] for s in result.json["items"]] == [11]

        staff = client.simulate_get("/api/staff?facilityId=2", headers=as_user(1))
        assert [s["id"] for s in staff.json["items"]] == [2, 3]

    def test_facility_filter_inside_scope(self, client) -> None:
        result = client.simulate_get("/api/staff?facility_id=1", headers=as_user(3))
        assert result.status_code == 200
        assert [s["id"] for s in result.json["items"]] == [1, 3]

    def test_facility_filter_outside_scope_is_403(self, client) -> None:
        for path in ("/api/staff?facility_id=2", "/api/shifts?facilityId=2"):
            result = client.simulate_get(path, headers=as_user(3))
            assert result.status_code == 403
            assert "items" not in result.json

    def test_facility_filter_must_be_integer(self, client) -> None:
        result = client.simulate_get("/api/staff?facility_id=abc", headers=as_user(3))
        assert result.status_code == 400


class TestFacilityUsers:
    def test_list_scoped_to_facility(self, client) -> None:
        result = client.simulate_get("/api/facility-users", headers=as_user(2))
        assert result.status_code == 200
        assert [u["id"] for u in result.json["items"]] == [2, 3, 5]

    def test_list_requires_manage_facility_users(self, client) -> None:
        assert client.simulate_get("/api/facility-users", headers=as_user(3)).status_code == 403

    def test_multi_facility_user_shows_only_visible_facility(self, client) -> None:
        users = client.simulate_get("/api/facility-users", headers=as_user(2)).json["items"]
        colleague = next(u for u in users if u["id"] == 5)
        assert colleague["facility_ids"] == [1]
        assert colleague["primary_facility_id"] is None

    def test_patch_response_shows_only_visible_facility(self, client) -> None:
        result = client.simulate_patch(
            "/api/facility-users/5/permissions",
            headers=as_user(2),
            json={"permissions": ["view_staff"]},
        )
        assert result.status_code == 200
        assert result.json["facility_ids"] == [1]
        assert result.json["primary_facility_id"] is None

    def test_patch_permissions(self, client, people) -> None:
        result = client.simulate_patch(
            "/api/facility-users/3/permissions",
            headers=as_user(2),
            json={"permissions": ["view_schedules", "view_billing"]},
        )
        assert result.status_code == 200
        assert result.json["permissions"] == ["view_billing", "view_schedules"]
        assert result.json["permission_overrides"] == ["view_billing", "view_schedules"]
        staff = client.simulate_get("/api/invoices", headers=as_user(3))
        assert staff.status_code == 200

    def test_patch_null_restores_defaults(self, client) -> None:
        client.simulate_patch(
            "/api/facility-users/3/permissions",
            headers=as_user(2),
            json={"permissions": ["view_billing"]},
        )
        result = client.simulate_patch(
            "/api/facility-users/3/permissions",
            headers=as_user(2),
            json={"permissions": None},
        )
        assert result.status_code == 200
        assert result.json["permission_overrides"] is None
        assert "assign_staff" in result.json["permissions"]

    def test_patch_unknown_permission_is_400(self, client) -> None:
        result = client.simulate_patch(
            "/api/facility-users/3/permissions",
            headers=as_user(2),
            json={"permissions": ["launch_rockets"]},
        )
        assert result.status_code == 400

    def test_patch_malformed_body_is_400(self, client) -> None:
        for body in ({}, {"permissions": "view_staff"}, {"permissions": [1, 2]}):
            result = client.simulate_patch(
                "/api/facility-users/3/permissions", headers=as_user(2), json=body
            )
            assert result.status_code == 400

    def test_patch_other_facility_user_is_404(self, client) -> None:
        result = client.simulate_patch(
            "/api/facility-users/4/permissions",
            headers=as_user(2),
            json={"permissions": ["view_staff"]},
        )
        assert result.status_code == 404


class TestImpersonation:
    def test_admin_impersonates_and_stops(self, client) -> None:
        admin = as_user(1)

        started = client.simulate_post("/api/admin/impersonate/3", headers=admin)
        assert started.status_code == 201
        assert started.json["impersonating"] is True
        assert started.json["acting_principal"]["id"] == 3
        assert started.json["original_principal"]["id"] == 1

        me = client.simulate_get("/api/me", headers=admin).json
        assert me["principal"]["id"] == 3
        assert me["original_principal"]["id"] == 1
        assert me["facilities"]["facility_ids"] == [1]
        assert client.simulate_get("/api/invoices", headers=admin).status_code == 403
        shifts = client.simulate_get("/api/shifts", headers=admin).json["items"]
        assert [s["id"] for s in shifts] == [10]

        stopped = client.simulate_post("/api/admin/impersonate/stop", headers=admin)
        assert stopped.status_code == 200
        assert stopped.json == {"ok": True, "ended": True}
        assert client.simulate_get("/api/invoices", headers=admin).status_code == 200

    def test_stop_when_not_impersonating_is_200(self, client) -> None:
        result = client.simulate_post("/api/admin/impersonate/stop", headers=as_user(3))
        assert result.status_code == 200
        assert result.json == {"ok": True, "ended": False}

    def test_non_admin_cannot_impersonate(self, client) -> None:
        result = client.simulate_post("/api/admin/impersonate/4", headers=as_user(2))
        assert result.status_code == 403

    def test_nested_impersonation_is_403(self, client) -> None:
        admin = as_user(1)
        client.simulate_post("/api/admin/impersonate/3", headers=admin)
        result = client.simulate_post("/api/admin/impersonate/4", headers=admin)
        assert result.status_code == 403
        status = client.simulate_get("/api/admin/impersonate/status", headers=admin).json
        assert status["acting_principal"]["id"] == 3

    def test_unknown_target_is_404(self, client) -> None:
        result = client.simulate_post("/api/admin/impersonate/999", headers=as_user(1))
        assert result.status_code == 404

    def test_impersonation_is_per_session(self, client) -> None:
        client.simulate_post("/api/admin/impersonate/3", headers=as_user(1, "tab-a"))
        status = client.simulate_get(
            "/api/admin/impersonate/status", headers=as_user(1, "tab-b")
        ).json
        assert status["impersonating"] is False
        assert status["acting_principal"]["id"] == 1


class TestAuditLogs:
    def _record_activity(self, client) -> None:
        client.simulate_post("/api/admin/impersonate/3", headers=as_user(1))
        client.simulate_post("/api/admin/impersonate/stop", headers=as_user(1))
        client.simulate_post("/api/admin/impersonate/4", headers=as_user(1, "tab-b"))
        client.simulate_post("/api/admin/impersonate/stop", headers=as_user(1, "tab-b"))
        client.simulate_patch(
            "/api/facility-users/3/permissions",
            headers=as_user(2),
            json={"permissions": ["view_staff"]},
        )

    def test_super_admin_sees_all_entries(self, client) -> None:
        self._record_activity(client)
        result = client.simulate_get("/api/audit-logs", headers=as_user(1))
        assert result.status_code == 200
        items = result.json["items"]
        assert len(items) == 5
        assert {e["target_principal_id"] for e in items} == {3, 4}

    def test_entries_scoped_by_target_facilities(self, client) -> None:
        self._record_activity(client)
        result = client.simulate_get("/api/audit-logs", headers=as_user(2))
        assert result.status_code == 200
        items = result.json["items"]
        assert {e["target_principal_id"] for e in items} == {3}
        assert sorted(e["action"] for e in items) == [
            "impersonation.end",
            "impersonation.start",
            "permissions.update",
        ]

    def test_filter_by_action(self, client) -> None:
        self._record_activity(client)
        result = client.simulate_get(
            "/api/audit-logs?action=permissions.update", headers=as_user(1)
        )
        [entry] = result.json["items"]
        assert entry["actor_principal_id"] == 2
        assert entry["details"] == {"permissions": ["view_staff"]}

    def test_limit(self, client) -> None:
        self._record_activity(client)
        result = client.simulate_get("/api/audit-logs?limit=2", headers=as_user(1))
        assert len(result.json["items"]) == 2

    def test_requires_view_audit_logs(self, client) -> None:
        assert client.simulate_get("/api/audit-logs", headers=as_user(3)).status_code == 403

    def test_bad_filters_are_400(self, client) -> None:
        for query in ("action=launch", "limit=0", "limit=many"):
            result = client.simulate_get(f"/api/audit-logs?{query}", headers=as_user(1))
            assert result.status_code == 400
