"""News Article Routes — verifies authoring, category checks, tagging and listing.

Invariants:
    - Create/update require a bearer token and record the acting account
    - Articles cannot be filed under missing or inactive categories
    - Unknown tag ids are rejected before anything is written
"""


async def test_create_requires_token(client, create_category):
    category = await create_category("Academic")
    res = await client.post("/api/v1/news-articles", json={
        "title": "Untitled", "content": "Body", "category_id": category["id"],
    })
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_FAILED"


async def test_create_records_author_and_tags(client, create_category, create_tag, create_article):
    category = await create_category("Academic")
    exam = await create_tag("exam")
    deadline = await create_tag("deadline")

    article = await create_article(
        category["id"], title="Exam schedule", tag_ids=[deadline["id"], exam["id"]],
        headline="Finals week", source="Academic Office",
    )
    assert article["category_name"] == "Academic"
    assert article["created_by_name"] == "Test Author"
    assert article["updated_by_id"] is None
    assert article["modified_at"] is None
    assert article["tag_ids"] == sorted([exam["id"], deadline["id"]])
    assert article["tags_count"] == 2
    assert article["is_published"] is True


async def test_inactive_category_rejected(client, auth_headers, create_category):
    archive = await create_category("Archive", is_active=False)
    res = await client.post("/api/v1/news-articles", headers=auth_headers, json={
        "title": "Old news", "content": "Body", "category_id": archive["id"],
    })
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "inactive_category"


async def test_missing_category_rejected(client, auth_headers):
    res = await client.post("/api/v1/news-articles", headers=auth_headers, json={
        "title": "Lost", "content": "Body", "category_id": 404,
    })
    assert res.status_code == 404


async def test_unknown_tag_rejected(client, auth_headers, create_category):
    category = await create_category("Academic")
    res = await client.post("/api/v1/news-articles", headers=auth_headers, json={
        "title": "Tagged", "content": "Body", "category_id": category["id"], "tag_ids": [99],
    })
    assert res.status_code == 404
    res = await client.get("/api/v1/news-articles")
    assert res.json()["total"] == 0


async def test_update_sets_editor_and_replaces_tags(
    client, auth_headers, create_category, create_tag, create_article,
):
    academic = await create_category("Academic")
    research = await create_category("Research")
    exam = await create_tag("exam")
    event = await create_tag("event")
    article = await create_article(academic["id"], tag_ids=[exam["id"]])

    res = await client.put(f"/api/v1/news-articles/{article['id']}", headers=auth_headers, json={
        "title": "Revised", "content": "New body", "category_id": research["id"],
        "is_published": False, "tag_ids": [event["id"]],
    })
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Revised"
    assert body["category_name"] == "Research"
    assert body["updated_by_name"] == "Test Author"
    assert body["modified_at"] is not None
    assert body["tag_ids"] == [event["id"]]
    assert body["is_published"] is False


async def test_update_without_tag_ids_keeps_tags(
    client, auth_headers, create_category, create_tag, create_article,
):
    category = await create_category("Academic")
    exam = await create_tag("exam")
    article = await create_article(category["id"], tag_ids=[exam["id"]])

    res = await client.put(f"/api/v1/news-articles/{article['id']}", headers=auth_headers, json={
        "title": "Same tags", "content": "Body", "category_id": category["id"],
    })
    assert res.json()["tag_ids"] == [exam["id"]]


async def test_attach_is_idempotent_and_detach_missing_is_404(
    client, create_category, create_tag, create_article,
):
    category = await create_category("Academic")
    exam = await create_tag("exam")
    article = await create_article(category["id"])
    url = f"/api/v1/news-articles/{article['id']}/tags/{exam['id']}"

    assert (await client.put(url)).json()["tag_ids"] == [exam["id"]]
    assert (await client.put(url)).json()["tag_ids"] == [exam["id"]]
    assert (await client.delete(url)).status_code == 200
    assert (await client.delete(url)).status_code == 404


async def test_list_filters_and_search(client, create_category, create_article):
    academic = await create_category("Academic")
    sports = await create_category("Sports")
    await create_article(academic["id"], title="Registration opens")
    await create_article(sports["id"], title="Sports day", is_published=False)
    await create_article(sports["id"], title="Football final")

    res = await client.get("/api/v1/news-articles", params={"category_id": sports["id"]})
    assert res.json()["total"] == 2

    res = await client.get("/api/v1/news-articles", params={"is_published": "false"})
    assert [a["title"] for a in res.json()["items"]] == ["Sports day"]

    res = await client.get("/api/v1/news-articles", params={"search": "REGISTRATION"})
    assert [a["title"] for a in res.json()["items"]] == ["Registration opens"]

    res = await client.get("/api/v1/news-articles", params={"sort_by": "NewsTitle"})
    assert [a["title"] for a in res.json()["items"]] == [
        "Football final", "Registration opens", "Sports day",
    ]


async def test_created_date_range(client, create_category, create_article):
    category = await create_category("Academic")
    await create_article(category["id"])

    res = await client.get("/api/v1/news-articles", params={"created_from": "2000-01-01T00:00:00Z"})
    assert res.json()["total"] == 1
    res = await client.get("/api/v1/news-articles", params={"created_to": "2000-01-01T00:00:00Z"})
    assert res.json()["total"] == 0


async def test_category_article_listing(client, create_category, create_article):
    academic = await create_category("Academic")
    sports = await create_category("Sports")
    first = await create_article(academic["id"], title="First")
    await create_article(sports["id"], title="Elsewhere")
    second = await create_article(academic["id"], title="Second")

    res = await client.get(f"/api/v1/categories/{academic['id']}/news-articles")
    assert {a["id"] for a in res.json()} == {first["id"], second["id"]}

    res = await client.get("/api/v1/categories/999/news-articles")
    assert res.status_code == 404


async def test_delete_article_releases_category(client, create_category, create_tag, create_article):
    category = await create_category("Academic")
    exam = await create_tag("exam")
    article = await create_article(category["id"], tag_ids=[exam["id"]])

    assert (await client.delete(f"/api/v1/news-articles/{article['id']}")).status_code == 204
    assert (await client.get(f"/api/v1/news-articles/{article['id']}")).status_code == 404
    assert (await client.delete(f"/api/v1/tags/{exam['id']}")).status_code == 204
    assert (await client.delete(f"/api/v1/categories/{category['id']}")).status_code == 204
