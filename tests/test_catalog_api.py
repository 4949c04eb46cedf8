from sqlalchemy import select

from pictosigns.models import FixationCondition, Shape, User, material_shapes


def material_payload(**overrides):
    payload = {
        "id": 0,
        "title": "Dibond 3mm",
        "description": "Aluminium composite",
        "weight": 0.4,
        "fixedPrice": 12,
        "surfacePrice": 45,
        "manufacturingTime": 3,
        "dimensionIds": [],
        "discountIds": [],
        "fixationIds": [],
        "shapeIds": [],
        "badgeIds": [],
    }
    payload.update(overrides)
    return payload


# ---------- material ----------


def test_material_put_round_trips_association_ids(client, auth_headers):
    r = client.put(
        "/material",
        json=material_payload(shapeIds=[3, 1], discountIds=[2], badgeIds=[5]),
        headers=auth_headers,
    )
    assert r.status_code == 204
    assert r.content == b""

    [material] = client.get("/material").json()
    assert material["title"] == "Dibond 3mm"
    assert material["fixedPrice"] == 12
    assert material["shapeIds"] == [1, 3]
    assert material["discountIds"] == [2]
    assert material["badgeIds"] == [5]
    assert material["fixationIds"] == []


def test_material_update_replaces_links(client, auth_headers, db):
    client.put("/material", json=material_payload(shapeIds=[1, 2]), headers=auth_headers)
    material_id = client.get("/material").json()[0]["id"]

    r = client.put(
        "/material",
        json=material_payload(id=material_id, title="Dibond 4mm", shapeIds=[7]),
        headers=auth_headers,
    )

    assert r.status_code == 204
    [material] = client.get("/material").json()
    assert material["id"] == material_id
    assert material["title"] == "Dibond 4mm"
    assert material["shapeIds"] == [7]


def test_materials_are_listed_by_title(client, auth_headers):
    for title in ("Plexiglass", "Aluminium", "Forex"):
        client.put("/material", json=material_payload(title=title), headers=auth_headers)

    titles = [m["title"] for m in client.get("/material").json()]

    assert titles == ["Aluminium", "Forex", "Plexiglass"]


def test_material_zero_is_an_empty_default(client):
    r = client.get("/material/0")

    assert r.status_code == 200
    assert r.json()["id"] == 0
    assert r.json()["title"] == ""


def test_unknown_material_is_404(client):
    assert client.get("/material/42").status_code == 404


def test_delete_material_removes_links(client, auth_headers, db):
    client.put("/material", json=material_payload(shapeIds=[1]), headers=auth_headers)
    material_id = client.get("/material").json()[0]["id"]

    r = client.delete(f"/material/{material_id}", headers=auth_headers)

    assert r.status_code == 204
    assert client.get("/material").json() == []
    assert db.execute(select(material_shapes)).all() == []


# ---------- fixation ----------


def fixation_payload(**overrides):
    payload = {
        "id": 0,
        "name": "Spacer 15mm",
        "price": 2.5,
        "diameter": 15,
        "drillDiameter": 5,
        "conditions": [],
    }
    payload.update(overrides)
    return payload


def test_fixation_put_replaces_conditions(client, auth_headers, db):
    shape = Shape(url="/shapes/rect.svg")
    db.add(shape)
    db.commit()

    first = [
        {"shapeId": shape.id, "areaMin": 0, "areaMax": 1000, "posTl": True},
        {"shapeId": shape.id, "areaMin": 1000, "areaMax": 0, "posBr": True},
    ]
    client.put("/fixation", json=fixation_payload(conditions=first), headers=auth_headers)
    fixation_id = client.get("/fixation").json()[0]["id"]

    body = client.get(f"/fixation/{fixation_id}/conditions").json()
    assert body["fixation"]["name"] == "Spacer 15mm"
    assert [c["areaMin"] for c in body["conditions"]] == [0, 1000]
    assert [s["id"] for s in body["shapes"]] == [shape.id]

    second = [{"shapeId": shape.id, "areaMin": 50, "posCl": True, "posCr": True}]
    r = client.put(
        "/fixation",
        json=fixation_payload(id=fixation_id, price=3, conditions=second),
        headers=auth_headers,
    )
    assert r.status_code == 204

    body = client.get(f"/fixation/{fixation_id}/conditions").json()
    assert body["fixation"]["price"] == 3
    assert len(body["conditions"]) == 1
    assert body["conditions"][0]["areaMin"] == 50
    assert body["conditions"][0]["areaMax"] is None
    assert body["conditions"][0]["fixationId"] == fixation_id


def test_fixation_zero_conditions(client, db):
    db.add(Shape(url="/shapes/circle.svg"))
    db.commit()

    body = client.get("/fixation/0/conditions").json()

    assert body["fixation"]["id"] == 0
    assert body["conditions"] == []
    assert len(body["shapes"]) == 1


def test_delete_fixation_removes_conditions(client, auth_headers, db):
    conditions = [{"shapeId": 1, "areaMin": 0, "areaMax": 0, "posTl": True}]
    client.put("/fixation", json=fixation_payload(conditions=conditions), headers=auth_headers)
    fixation_id = client.get("/fixation").json()[0]["id"]

    assert client.delete(f"/fixation/{fixation_id}", headers=auth_headers).status_code == 204
    assert client.get("/fixation").json() == []
    assert db.scalars(select(FixationCondition)).all() == []


# ---------- flat resources ----------


def test_shape_crud(client, auth_headers):
    client.put("/shape", json={"id": 0, "url": "/shapes/a.svg", "tags": "round"}, headers=auth_headers)
    [shape] = client.get("/shape").json()

    client.put(
        "/shape",
        json={"id": shape["id"], "url": "/shapes/b.svg", "tags": "round", "folderId": 4},
        headers=auth_headers,
    )
    updated = client.get(f"/shape/{shape['id']}").json()

    assert updated["url"] == "/shapes/b.svg"
    assert updated["folderId"] == 4
    assert client.get("/shape/0").json()["url"] == ""

    client.delete(f"/shape/{shape['id']}", headers=auth_headers)
    assert client.get("/shape").json() == []


def test_discount_crud(client, auth_headers):
    r = client.put("/discount", json={"amount": 10, "quantity": 50}, headers=auth_headers)
    assert r.status_code == 204

    [discount] = client.get("/discount").json()
    assert discount == {"id": discount["id"], "amount": 10, "quantity": 50}

    client.delete(f"/discount/{discount['id']}", headers=auth_headers)
    assert client.get("/discount").json() == []


def test_discount_without_amount_is_malformed(client, auth_headers):
    r = client.put("/discount", json={"quantity": 50}, headers=auth_headers)

    assert r.status_code == 422
    assert r.text == "Malformed request"


def test_dimensions_are_listed_by_pos(client, auth_headers):
    for name, pos in (("A3", 2), ("A5", 0), ("A4", 1)):
        client.put(
            "/dimension",
            json={"name": name, "width": 100, "height": 100, "pos": pos},
            headers=auth_headers,
        )

    names = [d["name"] for d in client.get("/dimension").json()]

    assert names == ["A5", "A4", "A3"]


def test_badge_crud(client, auth_headers):
    client.put("/badge", json={"name": "New", "iconUrl": "/badges/new.svg"}, headers=auth_headers)

    [badge] = client.get("/badge").json()
    assert badge["iconUrl"] == "/badges/new.svg"

    client.delete(f"/badge/{badge['id']}", headers=auth_headers)
    assert client.get("/badge").json() == []


def test_fonts_are_admin_only(client, auth_headers):
    client.put("/font", json={"name": "Inter", "url": "/fonts/inter.woff2"}, headers=auth_headers)

    assert client.get("/font").status_code == 401
    [font] = client.get("/font", headers=auth_headers).json()
    assert font["name"] == "Inter"


# ---------- users ----------


def test_user_list_never_exposes_passwords(client, auth_headers):
    [user] = client.get("/user", headers=auth_headers).json()

    assert user["username"] == "admin"
    assert user["isAdmin"] is True
    assert "password" not in user


def test_new_user_can_sign_in(client, auth_headers):
    r = client.put(
        "/user",
        json={"username": "editor", "password": "hunter2"},
        headers=auth_headers,
    )
    assert r.status_code == 204

    r = client.post("/sign-in", json={"username": "editor", "password": "hunter2"})
    assert r.status_code == 200


def test_user_update_with_empty_password_keeps_hash(client, auth_headers, admin, db):
    old_hash = admin.password

    r = client.put(
        "/user",
        json={"id": admin.id, "username": "root", "password": "", "isAdmin": True},
        headers=auth_headers,
    )
    assert r.status_code == 204

    db.expire_all()
    user = db.get(User, admin.id)
    assert user.username == "root"
    assert user.password == old_hash
    assert client.post("/sign-in", json={"username": "root", "password": "s3cret!"}).status_code == 200
