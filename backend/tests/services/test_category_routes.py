"""Category Routes — verifies CRUD, guards and subtree listings over HTTP.

Invariants:
    - Guard rejections map to 400 with a reason; duplicates to 409; missing ids to 404
    - Updating a category to its own unchanged name succeeds
"""


async def test_academic_curriculum_scenario(client, create_category):
    academic = await create_category("Academic")
    curriculum = await create_category("Curriculum", parent_id=academic["id"])

    res = await client.put(f"/api/v1/categories/{academic['id']}", json={
        "name": "Academic", "parent_id": curriculum["id"],
    })
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "cycle"

    res = await client.delete(f"/api/v1/categories/{academic['id']}")
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "has_children"

    res = await client.delete(f"/api/v1/categories/{curriculum['id']}")
    assert res.status_code == 204
    res = await client.delete(f"/api/v1/categories/{academic['id']}")
    assert res.status_code == 204

    res = await client.get(f"/api/v1/categories/{academic['id']}")
    assert res.status_code == 404


async def test_self_parent_rejected(client, create_category):
    sports = await create_category("Sports")
    res = await client.put(f"/api/v1/categories/{sports['id']}", json={
        "name": "Sports", "parent_id": sports["id"],
    })
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "self_parent"


async def test_create_with_missing_parent_returns_404(client):
    res = await client.post("/api/v1/categories", json={"name": "Orphan", "parent_id": 999})
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_duplicate_name_is_case_insensitive(client, create_category):
    await create_category("Sports")
    res = await client.post("/api/v1/categories", json={"name": "SPORTS"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_VALUE"


async def test_update_to_own_name_succeeds(client, create_category):
    sports = await create_category("Sports")
    res = await client.put(f"/api/v1/categories/{sports['id']}", json={
        "name": "sports", "description": "Sports events",
    })
    assert res.status_code == 200
    assert res.json()["name"] == "sports"
    assert res.json()["description"] == "Sports events"


async def test_update_to_another_name_conflicts(client, create_category):
    await create_category("Academic")
    sports = await create_category("Sports")
    res = await client.put(f"/api/v1/categories/{sports['id']}", json={"name": "academic"})
    assert res.status_code == 409


async def test_delete_category_with_articles_rejected(client, create_category, create_article):
    academic = await create_category("Academic")
    await create_article(academic["id"])

    res = await client.delete(f"/api/v1/categories/{academic['id']}")
    assert res.status_code == 400
    assert res.json()["error"]["reason"] == "has_articles"


async def test_list_search_sort_and_paging(client, create_category):
    for name in ("Technology", "Academic", "Research", "Sports", "Student Life"):
        await create_category(name)

    res = await client.get("/api/v1/categories", params={
        "sort_by": "CategoryName", "page": 2, "page_size": 2,
    })
    body = res.json()
    assert res.status_code == 200
    assert [c["name"] for c in body["items"]] == ["Sports", "Student Life"]
    assert body["total"] == 5
    assert body["total_pages"] == 3
    assert body["has_next"] is True
    assert body["has_previous"] is True

    res = await client.get("/api/v1/categories", params={"search": "ACAD"})
    assert [c["name"] for c in res.json()["items"]] == ["Academic"]


async def test_list_filters(client, create_category):
    academic = await create_category("Academic")
    await create_category("Faculty News", parent_id=academic["id"])
    await create_category("Archive", is_active=False)

    res = await client.get("/api/v1/categories", params={"parent_id": academic["id"]})
    assert [c["name"] for c in res.json()["items"]] == ["Faculty News"]

    res = await client.get("/api/v1/categories", params={"is_active": "false"})
    assert [c["name"] for c in res.json()["items"]] == ["Archive"]

    res = await client.get("/api/v1/categories", params={"include_subcategories": "false"})
    assert [c["name"] for c in res.json()["items"]] == ["Academic", "Archive"]


async def test_subcategories_and_descendants(client, create_category):
    academic = await create_category("Academic")
    curriculum = await create_category("Curriculum Updates", parent_id=academic["id"])
    await create_category("Faculty News", parent_id=academic["id"])
    await create_category("Syllabus", parent_id=curriculum["id"])

    res = await client.get(f"/api/v1/categories/{academic['id']}/subcategories")
    assert [c["name"] for c in res.json()] == ["Curriculum Updates", "Faculty News"]

    res = await client.get(f"/api/v1/categories/{academic['id']}/descendants")
    names = [c["name"] for c in res.json()]
    assert names == ["Curriculum Updates", "Faculty News", "Syllabus"]
    syllabus = res.json()[-1]
    assert syllabus["parent_name"] == "Curriculum Updates"


async def test_subcategories_of_missing_category_returns_404(client):
    res = await client.get("/api/v1/categories/77/subcategories")
    assert res.status_code == 404


async def test_blank_name_is_validation_error(client):
    res = await client.post("/api/v1/categories", json={"name": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
