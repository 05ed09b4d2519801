"""Read endpoints — users and classified ads."""

from app.models.classified_ad import ClassifiedAd


def test_get_user_profile(client, owner):
    res = client.get(f"/api/v1/users/{owner.id}")

    assert res.status_code == 200
    assert res.json()["known_as"] == "Marko"


def test_get_unknown_user_returns_404(client, db):
    assert client.get("/api/v1/users/321").status_code == 404


def test_ad_detail_lists_main_photo_first(client, ad, stored_photo):
    extra = stored_photo(is_main=False)
    main = stored_photo(is_main=True)

    body = client.get(f"/api/v1/classified-ads/{ad.id}").json()

    assert [p["id"] for p in body["photos"]] == [main.id, extra.id]
    assert body["main_photo_url"] == main.url


def test_unknown_ad_returns_404(client, db):
    assert client.get("/api/v1/classified-ads/77").status_code == 404


def test_list_ads_paginates(client, db, owner, ad, stored_photo):
    stored_photo(is_main=True)
    db.add(ClassifiedAd(user_id=owner.id, title="Guitar"))
    db.commit()

    body = client.get("/api/v1/classified-ads", params={"limit": 1}).json()

    assert body["total"] == 2
    assert len(body["items"]) == 1
    assert body["has_more"] is True


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"
