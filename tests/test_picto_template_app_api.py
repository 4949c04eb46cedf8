from sqlalchemy import select

from pictosigns.models import Template, app_users


# ---------- picto ----------


def test_picto_library_and_search(client, auth_headers):
    for tags in ("exit,door", "fire,extinguisher"):
        r = client.put("/picto", json={"tags": tags, "url": f"/pictos/{tags}.svg"}, headers=auth_headers)
        assert r.status_code == 204

    everything = client.get("/picto").json()
    assert [p["tags"] for p in everything["pictos"]] == ["exit,door", "fire,extinguisher"]
    assert everything["suggestion"] is None

    found = client.get("/picto", params={"search": "fire"}).json()
    assert [p["tags"] for p in found["pictos"]] == ["fire,extinguisher"]

    missed = client.get("/picto", params={"search": "dor"}).json()
    assert missed == {"pictos": [], "suggestion": "door"}


def test_picto_update_and_delete(client, auth_headers):
    client.put("/picto", json={"tags": "exit", "url": "/a.svg"}, headers=auth_headers)
    [picto] = client.get("/picto").json()["pictos"]

    client.put(
        "/picto",
        json={"id": picto["id"], "tags": "exit,left", "url": "/a.svg", "folderId": 3},
        headers=auth_headers,
    )
    [updated] = client.get("/picto").json()["pictos"]
    assert updated["tags"] == "exit,left"
    assert updated["folderId"] == 3

    assert client.delete(f"/picto/{picto['id']}", headers=auth_headers).status_code == 204
    assert client.get("/picto").json()["pictos"] == []


# ---------- template ----------


def test_new_template_starts_with_empty_config(client, auth_headers, db):
    r = client.put(
        "/template",
        json={"name": "Exit sign", "tags": "exit", "config": '{"layers": []}'},
        headers=auth_headers,
    )
    assert r.status_code == 204

    [template] = client.get("/template").json()
    assert template["name"] == "Exit sign"
    assert template["config"] == "{}"


def test_template_update_stores_config(client, auth_headers, db):
    db.add(Template(name="Exit sign", config="{}"))
    db.commit()
    template_id = db.scalars(select(Template.id)).one()

    client.put(
        "/template",
        json={"id": template_id, "name": "Exit sign", "config": '{"layers": [1]}'},
        headers=auth_headers,
    )
    assert client.get(f"/template/{template_id}").json()["config"] == '{"layers": [1]}'

    client.put("/template", json={"id": template_id, "name": "Exit sign"}, headers=auth_headers)
    assert client.get(f"/template/{template_id}").json()["config"] == "{}"


def test_templates_are_listed_by_name(client, auth_headers):
    for name in ("Warning", "Exit", "No smoking"):
        client.put("/template", json={"name": name}, headers=auth_headers)

    names = [t["name"] for t in client.get("/template").json()]

    assert names == ["Exit", "No smoking", "Warning"]


def test_template_zero_is_an_empty_default(client):
    body = client.get("/template/0").json()

    assert body == {
        "id": 0,
        "folderId": None,
        "name": "",
        "tags": "",
        "previewUrl": None,
        "config": None,
    }
    assert client.get("/template/99").status_code == 404


def test_delete_template(client, auth_headers):
    client.put("/template", json={"name": "Exit"}, headers=auth_headers)
    [template] = client.get("/template").json()

    assert client.delete(f"/template/{template['id']}", headers=auth_headers).status_code == 204
    assert client.get("/template").json() == []


# ---------- app ----------


def test_app_put_round_trips_links(client, auth_headers, admin):
    r = client.put(
        "/app",
        json={"name": "Shop A", "userIds": [admin.id], "materialIds": [3, 1, 3], "fontIds": [2]},
        headers=auth_headers,
    )
    assert r.status_code == 204

    [app] = client.get("/app", headers=auth_headers).json()
    assert app["name"] == "Shop A"
    assert app["userIds"] == [admin.id]
    assert app["materialIds"] == [1, 3]
    assert app["fontIds"] == [2]


def test_app_update_replaces_links(client, auth_headers):
    client.put("/app", json={"name": "Shop A", "materialIds": [1, 2]}, headers=auth_headers)
    app_id = client.get("/app", headers=auth_headers).json()[0]["id"]

    client.put(
        "/app",
        json={"id": app_id, "name": "Shop B", "materialIds": [5], "fontIds": [1]},
        headers=auth_headers,
    )

    [app] = client.get("/app", headers=auth_headers).json()
    assert app["id"] == app_id
    assert app["name"] == "Shop B"
    assert app["materialIds"] == [5]
    assert app["fontIds"] == [1]
    assert app["userIds"] == []


def test_delete_app_removes_links(client, auth_headers, admin, db):
    client.put("/app", json={"name": "Shop A", "userIds": [admin.id]}, headers=auth_headers)
    app_id = client.get("/app", headers=auth_headers).json()[0]["id"]

    assert client.delete(f"/app/{app_id}", headers=auth_headers).status_code == 204
    assert client.get("/app", headers=auth_headers).json() == []
    assert db.execute(select(app_users)).all() == []


def test_apps_are_admin_only(client):
    assert client.get("/app").status_code == 401
