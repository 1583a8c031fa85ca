"""
Integration tests for the v1 admin API and app, against in-memory SQLite (conftest).
"""
import pytest

from venturedesk.models.job import JobTag

JOB = {
    "id": "monad-protocol-engineer",
    "title": "Protocol Engineer",
    "company": "Monad",
    "link": "https://jobs.monad.xyz/protocol-engineer",
    "category": "portfolio",
    "remote": "Remote",
    "tags": ["protocol", "rust"],
    "featured": True,
}


def _headers(key):
    return {"X-API-Key": key}


def _create_job(client, key, **overrides):
    return client.post("/api/v1/jobs", json={**JOB, **overrides}, headers=_headers(key))


class TestApp:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        assert r.get_json() == {"status": "healthy"}


class TestAuth:
    def test_missing_key(self, client):
        r = client.post("/api/v1/jobs", json=JOB)
        assert r.status_code == 401
        assert r.get_json()["detail"] == "Missing API key"

    def test_invalid_key(self, client):
        r = _create_job(client, "vdk_not-a-key")
        assert r.status_code == 401
        assert r.get_json()["detail"] == "Invalid API key"

    def test_scoped_key_rejected_outside_scope(self, client, news_only_key):
        r = _create_job(client, news_only_key)
        assert r.status_code == 401
        assert r.get_json()["detail"] == "Insufficient permissions"

    def test_scoped_key_accepted_in_scope(self, client, news_only_key):
        r = client.post(
            "/api/v1/news/curated",
            json={
                "title": "Releasing Reth 1.0",
                "url": "https://www.paradigm.xyz/2024/06/reth-prod",
                "source": "Paradigm",
                "date": "2024-06-20T00:00:00",
                "category": "infrastructure",
            },
            headers=_headers(news_only_key),
        )
        assert r.status_code == 201
        assert r.get_json()["data"]["source"] == "Paradigm"

    def test_reads_are_public(self, client):
        assert client.get("/api/v1/jobs").status_code == 200


class TestJobsCrud:
    def test_create_and_get(self, client, api_key):
        r = _create_job(client, api_key)
        assert r.status_code == 201
        data = r.get_json()["data"]
        assert data["id"] == JOB["id"]
        assert data["tags"] == ["protocol", "rust"]
        assert data["created_at"]

        r = client.get(f"/api/v1/jobs/{JOB['id']}")
        assert r.status_code == 200
        assert r.get_json()["data"]["company"] == "Monad"

    def test_generated_id(self, client, api_key):
        payload = {k: v for k, v in JOB.items() if k != "id"}
        r = client.post("/api/v1/jobs", json=payload, headers=_headers(api_key))
        assert r.status_code == 201
        assert len(r.get_json()["data"]["id"]) == 32

    def test_duplicate_id_conflict(self, client, api_key):
        assert _create_job(client, api_key).status_code == 201
        r = _create_job(client, api_key)
        assert r.status_code == 409

    def test_invalid_payload(self, client, api_key):
        r = _create_job(client, api_key, category="friends")
        assert r.status_code == 422
        assert r.get_json()["detail"][0]["loc"] == ["category"]

    def test_empty_body(self, client, api_key):
        r = client.post("/api/v1/jobs", data="", headers=_headers(api_key))
        assert r.status_code == 400

    def test_create_with_json_array(self, client, api_key):
        r = client.post("/api/v1/jobs", json=["x"], headers=_headers(api_key))
        assert r.status_code == 400
        assert r.get_json()["detail"] == "Request body must be a JSON object"

    def test_update_with_json_array(self, client, api_key):
        _create_job(client, api_key)
        r = client.put(f"/api/v1/jobs/{JOB['id']}", json=["x"], headers=_headers(api_key))
        assert r.status_code == 400
        assert r.get_json()["detail"] == "Request body must be a JSON object"

    def test_get_missing(self, client):
        r = client.get("/api/v1/jobs/nope")
        assert r.status_code == 404
        assert r.get_json()["detail"] == "Job not found"

    def test_patch_updates_named_fields_only(self, client, api_key):
        _create_job(client, api_key)
        r = client.patch(
            f"/api/v1/jobs/{JOB['id']}",
            json={"salary": "$200k", "id": "renamed"},
            headers=_headers(api_key),
        )
        assert r.status_code == 200
        data = r.get_json()["data"]
        assert data["id"] == JOB["id"]
        assert data["salary"] == "$200k"
        assert data["title"] == JOB["title"]

    def test_patch_invalid_value(self, client, api_key):
        _create_job(client, api_key)
        r = client.patch(f"/api/v1/jobs/{JOB['id']}", json={"remote": "Mars"}, headers=_headers(api_key))
        assert r.status_code == 422

    def test_update_missing(self, client, api_key):
        r = client.put("/api/v1/jobs/nope", json={"title": "X"}, headers=_headers(api_key))
        assert r.status_code == 404

    def test_delete(self, client, api_key):
        _create_job(client, api_key)
        r = client.delete(f"/api/v1/jobs/{JOB['id']}", headers=_headers(api_key))
        assert r.status_code == 200
        assert r.get_json() == {"deleted": True, "id": JOB["id"]}
        assert client.get(f"/api/v1/jobs/{JOB['id']}").status_code == 404

    def test_delete_requires_key(self, client, api_key):
        _create_job(client, api_key)
        assert client.delete(f"/api/v1/jobs/{JOB['id']}").status_code == 401


class TestListing:
    @pytest.fixture
    def jobs(self, client, api_key):
        _create_job(client, api_key)
        _create_job(client, api_key, id="flashbots-mev", title="MEV Researcher", company="Flashbots",
                    category="network", featured=False)
        _create_job(client, api_key, id="world-designer", title="Brand Designer", company="World",
                    featured=False)

    def _ids(self, r):
        assert r.status_code == 200
        return [row["id"] for row in r.get_json()["data"]]

    def test_sort_by_title(self, client, jobs):
        r = client.get("/api/v1/jobs?sort=title")
        assert self._ids(r) == ["world-designer", "flashbots-mev", "monad-protocol-engineer"]

    def test_sort_descending(self, client, jobs):
        r = client.get("/api/v1/jobs?sort=-title")
        assert self._ids(r)[0] == "monad-protocol-engineer"

    def test_category_multi_select(self, client, jobs):
        assert self._ids(client.get("/api/v1/jobs?category=network")) == ["flashbots-mev"]
        assert len(self._ids(client.get("/api/v1/jobs?category=network,portfolio"))) == 3

    def test_featured_only(self, client, jobs):
        assert self._ids(client.get("/api/v1/jobs?featured=true")) == ["monad-protocol-engineer"]

    def test_text_search_is_case_insensitive(self, client, jobs):
        assert self._ids(client.get("/api/v1/jobs?q=flashbots")) == ["flashbots-mev"]

    def test_paging(self, client, jobs):
        r = client.get("/api/v1/jobs?sort=title&limit=1&offset=1")
        assert self._ids(r) == ["flashbots-mev"]
        assert r.get_json()["meta"] == {"limit": 1, "offset": 1}

    @pytest.mark.parametrize("query", ["limit=0", "limit=501", "limit=abc", "offset=-1", "sort=salary"])
    def test_bad_list_params(self, client, query):
        assert client.get(f"/api/v1/jobs?{query}").status_code == 422


class TestCandidates:
    def test_availability_keeps_legacy_flag_in_step(self, client, api_key):
        r = client.post(
            "/api/v1/candidates",
            json={"id": "ana", "name": "Ana Lima", "availability": "not-looking"},
            headers=_headers(api_key),
        )
        assert r.status_code == 201
        assert r.get_json()["data"]["available"] is False

        r = client.patch("/api/v1/candidates/ana", json={"availability": "open"}, headers=_headers(api_key))
        assert r.get_json()["data"]["available"] is True

    def test_filter_by_availability(self, client, api_key):
        for cid, status in (("a", "looking"), ("b", "open"), ("c", "not-looking")):
            client.post("/api/v1/candidates", json={"id": cid, "name": cid, "availability": status},
                        headers=_headers(api_key))
        r = client.get("/api/v1/candidates?availability=looking,open&sort=name")
        assert [row["id"] for row in r.get_json()["data"]] == ["a", "b"]


class TestPortfolio:
    def test_investment_tier_from_int(self, client, api_key):
        r = client.post("/api/v1/investments", json={"title": "Monad", "tier": 1}, headers=_headers(api_key))
        assert r.status_code == 201
        data = r.get_json()["data"]
        assert data["tier"] == "1"
        assert data["status"] == "active"

    def test_investments_default_sort_by_tier(self, client, api_key):
        for title, tier in (("Herodotus", 3), ("Monad", 1), ("Succinct", 2)):
            client.post("/api/v1/investments", json={"title": title, "tier": tier}, headers=_headers(api_key))
        r = client.get("/api/v1/investments")
        assert [row["title"] for row in r.get_json()["data"]] == ["Monad", "Succinct", "Herodotus"]

    def test_affiliation_requires_role(self, client, api_key):
        r = client.post("/api/v1/affiliations", json={"title": "World"}, headers=_headers(api_key))
        assert r.status_code == 422

    def test_featured_param_ignored_for_affiliations(self, client, api_key):
        client.post("/api/v1/affiliations", json={"title": "World", "role": "Engineer"}, headers=_headers(api_key))
        r = client.get("/api/v1/affiliations?featured=true")
        assert len(r.get_json()["data"]) == 1


class TestNews:
    def test_announcement_platform_filter(self, client, api_key):
        base = {"url": "https://example.com", "company": "Monad", "date": "2025-02-01T00:00:00", "category": "launch"}
        client.post("/api/v1/news/announcements", json={**base, "id": "a1", "title": "Mainnet", "platform": "x"},
                    headers=_headers(api_key))
        client.post("/api/v1/news/announcements", json={**base, "id": "a2", "title": "Docs", "platform": "blog"},
                    headers=_headers(api_key))

        r = client.get("/api/v1/news/announcements?platform=blog")
        assert [row["id"] for row in r.get_json()["data"]] == ["a2"]

    def test_curated_links_newest_first(self, client, api_key):
        for link_id, date in (("old", "2024-01-01T00:00:00"), ("new", "2025-01-01T00:00:00")):
            client.post(
                "/api/v1/news/curated",
                json={"id": link_id, "title": link_id, "url": "https://e.com", "source": "S",
                      "date": date, "category": "research"},
                headers=_headers(api_key),
            )
        r = client.get("/api/v1/news/curated")
        assert [row["id"] for row in r.get_json()["data"]] == ["new", "old"]


class TestReference:
    def test_labels(self, client):
        r = client.get("/api/v1/labels")
        assert r.status_code == 200
        data = r.get_json()
        assert data["availability"]["not-looking"] == "Not Currently Looking"
        assert data["experience"]["10+"] == "10+ years"
        assert data["skills"]["typescript"] == "TypeScript"
        assert data["news_categories"]["x_post"] == "X Post"

    def test_job_tags_sorted_by_label(self, client, session):
        session.add_all([JobTag(slug="zk", label="ZK"), JobTag(slug="ai", label="AI")])
        session.commit()

        r = client.get("/api/v1/job-tags")
        assert [row["slug"] for row in r.get_json()["data"]] == ["ai", "zk"]

    def test_empty_vocabularies(self, client):
        for path in ("/api/v1/job-roles", "/api/v1/investment-categories"):
            r = client.get(path)
            assert r.status_code == 200
            assert r.get_json() == {"data": []}
