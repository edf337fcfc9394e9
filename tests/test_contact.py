MESSAGE = {
    "name": "Robin",
    "email": "robin@example.com",
    "subject": "Delivery question",
    "message": "Do you ship to Canada?",
}


class TestContactMessages:
    def test_anyone_can_submit(self, client):
        resp = client.post("/api/contact", json=MESSAGE)
        assert resp.status_code == 201
        assert resp.json() == {"message": "Message received"}

    def test_invalid_email_rejected(self, client):
        resp = client.post("/api/contact", json={**MESSAGE, "email": "not-an-email"})
        assert resp.status_code == 422

    def test_admin_inbox(self, client, admin_headers):
        client.post("/api/contact", json=MESSAGE)
        client.post("/api/contact", json={**MESSAGE, "subject": "Returns"})

        messages = client.get("/api/admin/contact/messages", headers=admin_headers).json()["messages"]
        assert [m["subject"] for m in messages] == ["Returns", "Delivery question"]
        assert all(m["status"] == "unread" for m in messages)

    def test_mark_replied_and_delete(self, client, admin_headers):
        client.post("/api/contact", json=MESSAGE)
        message = client.get("/api/admin/contact/messages", headers=admin_headers).json()["messages"][0]

        resp = client.put(
            f"/api/admin/contact/messages/{message['id']}", json={"status": "replied"}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["status"] == "replied"

        assert client.delete(f"/api/admin/contact/messages/{message['id']}", headers=admin_headers).status_code == 200
        assert client.get("/api/admin/contact/messages", headers=admin_headers).json()["messages"] == []

    def test_unknown_status_rejected(self, client, admin_headers):
        client.post("/api/contact", json=MESSAGE)
        message = client.get("/api/admin/contact/messages", headers=admin_headers).json()["messages"][0]
        resp = client.put(
            f"/api/admin/contact/messages/{message['id']}", json={"status": "archived"}, headers=admin_headers
        )
        assert resp.status_code == 422

    def test_missing_message(self, client, admin_headers):
        resp = client.delete("/api/admin/contact/messages/12", headers=admin_headers)
        assert resp.status_code == 404

    def test_inbox_is_admin_only(self, client, user_headers):
        assert client.get("/api/admin/contact/messages", headers=user_headers).status_code == 403
        assert client.get("/api/admin/contact/messages").status_code == 401
