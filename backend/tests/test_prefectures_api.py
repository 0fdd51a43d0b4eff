def _prefecture_payload(**overrides):
    payload = {"code": "28", "name": "兵庫県", "kana_name": "ヒョウゴケン", "kana_en": "hyogo-ken",
               "status": "published", "region_code": "06"}
    payload.update(overrides)
    return payload


def test_list_prefectures(client, prefectures):
    body = client.get("/api/prefectures").json()

    assert [p["code"] for p in body] == ["13", "14", "27"]
    assert body[0]["region"] == {"code": "03", "name": "関東"}
    assert body[1]["status_label"] == "停止"


def test_list_with_store_count_defaults_to_published(client, stores):
    body = client.get("/api/prefectures/with-store-count").json()
    assert [(p["code"], p["store_count"]) for p in body] == [("13", 2), ("14", 0), ("27", 0)]


def test_list_with_store_count_for_all_stores(client, stores):
    body = client.get("/api/prefectures/with-store-count", params={"store_status": "all"}).json()
    assert [(p["code"], p["store_count"]) for p in body] == [("13", 2), ("14", 0), ("27", 1)]


def test_list_with_store_count_rejects_unknown_status(client):
    response = client.get("/api/prefectures/with-store-count", params={"store_status": "closed"})
    assert response.status_code == 422


def test_find_by_code(client, prefectures):
    body = client.get("/api/prefectures/code/13").json()
    assert body["name"] == "東京都"
    assert body["status_label"] == "反映中"


def test_find_by_code_not_found(client):
    assert client.get("/api/prefectures/code/99").status_code == 404


def test_create_prefecture(client, auth_headers, regions):
    response = client.post("/api/prefectures", json=_prefecture_payload(), headers=auth_headers)

    assert response.status_code == 201
    assert response.json()["region"]["code"] == "06"


def test_create_prefecture_without_region(client, auth_headers):
    response = client.post("/api/prefectures", json=_prefecture_payload(region_code=None), headers=auth_headers)

    assert response.status_code == 201
    assert "region" not in response.json()


def test_create_prefecture_with_unknown_region(client, auth_headers, regions):
    response = client.post("/api/prefectures", json=_prefecture_payload(region_code="99"), headers=auth_headers)

    assert response.status_code == 404
    assert client.get("/api/prefectures/code/28").status_code == 404


def test_create_duplicate_prefecture(client, auth_headers, prefectures):
    response = client.post("/api/prefectures", json=_prefecture_payload(code="13"), headers=auth_headers)

    assert response.status_code == 409
    assert response.json()["fields"] == ["code"]
