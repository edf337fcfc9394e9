from homedecor.services.category_service.models import slugify


def test_slugify():
    assert slugify("Wall  Décor & Art") == "wall-dcor-art"
    assert slugify("  Living Room ") == "living-room"


class TestCategories:
    def _create(self, client, headers, **payload):
        resp = client.post("/api/categories", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()["category"]

    def test_create_derives_slug(self, client, admin_headers):
        category = self._create(client, admin_headers, name="Living Room")
        assert category["slug"] == "living-room"
        assert category["parent_category"] is None

    def test_duplicate_name_is_rejected(self, client, admin_headers):
        self._create(client, admin_headers, name="Lighting")
        resp = client.post("/api/categories", json={"name": "Lighting"}, headers=admin_headers)
        assert resp.status_code == 400

    def test_child_reports_parent(self, client, admin_headers):
        parent = self._create(client, admin_headers, name="Furniture")
        child = self._create(client, admin_headers, name="Chairs", parent_category_id=parent["id"])
        assert child["parent_category"] == {"id": parent["id"], "name": "Furniture", "slug": "furniture"}

    def test_unknown_parent_is_rejected(self, client, admin_headers):
        resp = client.post(
            "/api/categories", json={"name": "Orphans", "parent_category_id": 99}, headers=admin_headers
        )
        assert resp.status_code == 400

    def test_inactive_hidden_by_default(self, client, admin_headers):
        self._create(client, admin_headers, name="Rugs")
        self._create(client, admin_headers, name="Archive", is_active=False)

        assert [c["name"] for c in client.get("/api/categories").json()["categories"]] == ["Rugs"]
        everything = client.get("/api/categories?include_inactive=true").json()["categories"]
        assert {c["name"] for c in everything} == {"Rugs", "Archive"}
        inactive = client.get("/api/categories?is_active=false").json()["categories"]
        assert [c["name"] for c in inactive] == ["Archive"]

    def test_cannot_be_own_parent(self, client, admin_headers):
        category = self._create(client, admin_headers, name="Mirrors")
        resp = client.put(
            f"/api/categories/{category['id']}",
            json={"parent_category_id": category["id"]},
            headers=admin_headers,
        )
        assert resp.status_code == 400

    def test_update(self, client, admin_headers):
        category = self._create(client, admin_headers, name="Vases")
        resp = client.put(
            f"/api/categories/{category['id']}", json={"description": "Ceramic and glass"}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["category"]["description"] == "Ceramic and glass"

    def test_null_name_rejected(self, client, admin_headers):
        category = self._create(client, admin_headers, name="Clocks")
        resp = client.put(f"/api/categories/{category['id']}", json={"name": None}, headers=admin_headers)
        assert resp.status_code == 422
        assert client.get(f"/api/categories/{category['id']}").json()["category"]["name"] == "Clocks"

    def test_null_parent_moves_to_top_level(self, client, admin_headers):
        parent = self._create(client, admin_headers, name="Textiles")
        child = self._create(client, admin_headers, name="Throws", parent_category_id=parent["id"])
        resp = client.put(
            f"/api/categories/{child['id']}", json={"parent_category_id": None}, headers=admin_headers
        )
        assert resp.status_code == 200
        assert resp.json()["category"]["parent_category"] is None

    def test_delete_rejected_while_children_exist(self, client, admin_headers):
        parent = self._create(client, admin_headers, name="Outdoor")
        child = self._create(client, admin_headers, name="Planters", parent_category_id=parent["id"])

        resp = client.delete(f"/api/categories/{parent['id']}", headers=admin_headers)
        assert resp.status_code == 400
        assert client.get(f"/api/categories/{parent['id']}").status_code == 200

        assert client.delete(f"/api/categories/{child['id']}", headers=admin_headers).status_code == 200
        assert client.delete(f"/api/categories/{parent['id']}", headers=admin_headers).status_code == 200
        assert client.get(f"/api/categories/{parent['id']}").status_code == 404

    def test_customer_cannot_create(self, client, user_headers):
        resp = client.post("/api/categories", json={"name": "Nope"}, headers=user_headers)
        assert resp.status_code == 403
