"""HTTP tests for /views, /actions and /goals."""

import pytest


def _event(**extra):
    body = {"source": "web", "url": "/shop", "visitor": "v1"}
    body.update(extra)
    return body


class TestEventEndpoints:

    @pytest.mark.parametrize("path", ["/views", "/actions", "/goals"])
    def test_empty_list(self, client, path):
        assert client.get(path).json() == []

    def test_view_roundtrip(self, client):
        created = client.post("/views", json=_event(meta={"browser": "firefox"}))
        assert created.status_code == 201
        body = created.json()
        assert "action" not in body and "goal" not in body

        fetched = client.get(f"/views/{body['id']}").json()
        assert fetched["meta"] == {"browser": "firefox"}

    def test_action_requires_its_label(self, client):
        response = client.post("/actions", json=_event())
        assert response.status_code == 400
        assert response.json()["error"]["fields"] == [
            {"field": "action", "message": "action is required"}
        ]

    def test_action_label_returned(self, client):
        body = client.post("/actions", json=_event(action="add-to-cart")).json()
        assert body["action"] == "add-to-cart"

    def test_kinds_do_not_mix(self, client):
        view_id = client.post("/views", json=_event()).json()["id"]
        assert client.get(f"/actions/{view_id}").status_code == 404

    def test_put_replaces(self, client):
        goal_id = client.post("/goals", json=_event(goal="signup")).json()["id"]

        body = client.put(f"/goals/{goal_id}", json=_event(url="/done", goal="purchase")).json()

        assert (body["url"], body["goal"]) == ("/done", "purchase")

    def test_delete(self, client):
        view_id = client.post("/views", json=_event()).json()["id"]
        assert client.delete(f"/views/{view_id}").status_code == 200
        assert client.get(f"/views/{view_id}").status_code == 404

    def test_goal_details(self, client):
        client.post("/views", json=_event(url="/"))
        client.post("/views", json=_event(visitor="someone-else"))
        client.post("/actions", json=_event(action="add-to-cart"))
        goal_id = client.post("/goals", json=_event(url="/checkout", goal="purchase")).json()["id"]

        body = client.get(f"/goals/{goal_id}/details").json()

        assert body["goal"] == "purchase"
        assert [v["url"] for v in body["views"]] == ["/"]
        assert [a["action"] for a in body["actions"]] == ["add-to-cart"]

    def test_details_only_for_goals(self, client):
        view_id = client.post("/views", json=_event()).json()["id"]
        assert client.get(f"/views/{view_id}/details").status_code in (404, 405)
