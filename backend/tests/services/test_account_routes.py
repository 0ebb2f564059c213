"""Account Routes — verifies account management, role filter and the author delete guard."""


async def _create_account(client, name, email, role=0):
    res = await client.post("/api/v1/accounts", json={
        "name": name, "email": email, "password": "secret123", "role": role,
    })
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_account_normalizes_email_and_hides_password(client):
    body = await _create_account(client, "Jane Staff", "  Jane.Staff@FUNews.edu.vn ", role=2)
    assert body["email"] == "jane.staff@funews.edu.vn"
    assert body["role"] == 2
    assert "password" not in body
    assert "password_hash" not in body


async def test_duplicate_email_is_case_insensitive(client):
    await _create_account(client, "Dr. Smith", "dr.smith@funews.edu.vn")
    res = await client.post("/api/v1/accounts", json={
        "name": "Other", "email": "DR.SMITH@funews.edu.vn", "password": "secret123",
    })
    assert res.status_code == 409


async def test_filter_by_role_and_search(client):
    await _create_account(client, "System Admin", "admin@funews.edu.vn", role=1)
    await _create_account(client, "News Staff", "staff@funews.edu.vn", role=2)
    await _create_account(client, "Jane Staff", "jane.staff@funews.edu.vn", role=2)

    res = await client.get("/api/v1/accounts", params={"role": 2, "sort_by": "name"})
    assert [a["name"] for a in res.json()["items"]] == ["Jane Staff", "News Staff"]

    res = await client.get("/api/v1/accounts", params={"search": "ADMIN"})
    assert [a["name"] for a in res.json()["items"]] == ["System Admin"]


async def test_invalid_role_rejected(client):
    res = await client.post("/api/v1/accounts", json={
        "name": "Nobody", "email": "nobody@funews.edu.vn", "password": "secret123", "role": 7,
    })
    assert res.status_code == 400


async def test_update_account(client):
    account = await _create_account(client, "News Staff", "staff@funews.edu.vn", role=2)
    res = await client.put(f"/api/v1/accounts/{account['id']}", json={
        "name": "Senior Staff", "email": "staff@funews.edu.vn", "role": 1,
    })
    assert res.status_code == 200
    assert res.json()["name"] == "Senior Staff"
    assert res.json()["role"] == 1


async def test_author_cannot_be_deleted(client, auth_headers, create_category, create_article):
    category = await create_category("Academic")
    article = await create_article(category["id"])
    author_id = article["created_by_id"]

    res = await client.delete(f"/api/v1/accounts/{author_id}")
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "has_articles"

    res = await client.get(f"/api/v1/accounts/{author_id}/news-articles")
    assert [a["id"] for a in res.json()] == [article["id"]]


async def test_delete_account_without_articles(client):
    account = await _create_account(client, "Temp", "temp@funews.edu.vn")
    res = await client.delete(f"/api/v1/accounts/{account['id']}")
    assert res.status_code == 204
    res = await client.get(f"/api/v1/accounts/{account['id']}")
    assert res.status_code == 404
