"""
BirdRef Backend — Bird Route Tests
====================================

What:  End-to-end tests of the /birds endpoints over HTTP.
How:   HTTPX AsyncClient against the ASGI app; the store dependency is bound
       to a fresh SQLite database per test, so real SQL runs every time.

What we test:
    ✅ Create echoes the record; lookup returns an identical record
    ✅ Lookup omits unknown names and never errors on them
    ✅ List-all: 404 on empty table, 200 with every row otherwise
    ✅ Update: 200 on existing key, 404 (and no insert) on missing key
    ✅ Delete: count message + echo, second delete is 404
    ✅ Array validation and body validation both answer 400
    ✅ Store rejections answer 400 "Error: <detail>"
"""

import pytest

INVALID_BODY_MESSAGE = "Invalid or missing Bird - please refer to documentation"


async def lookup(client, names):
    return await client.request("GET", "/birds/", json={"birdNames": names})


async def delete(client, names):
    return await client.request("DELETE", "/birds/", json={"names": names})


class TestCreateBird:
    """POST /birds/"""

    @pytest.mark.asyncio
    async def test_create_echoes_record(self, test_client, sample_bird_data):
        response = await test_client.post("/birds/", json=sample_bird_data)

        assert response.status_code == 200
        assert response.json() == sample_bird_data

    @pytest.mark.asyncio
    async def test_created_record_round_trips_through_lookup(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await lookup(test_client, ["AmericanRobin"])

        assert response.status_code == 200
        assert response.json() == [sample_bird_data]

    @pytest.mark.asyncio
    async def test_optional_fields_default_to_null(self, test_client):
        body = {"formattedComName": "BlueJay", "comName": "Blue Jay"}

        response = await test_client.post("/birds/", json=body)

        assert response.status_code == 200
        data = response.json()
        assert data["formattedComName"] == "BlueJay"
        assert data["sciName"] is None
        assert data["learnMoreLink"] is None

    @pytest.mark.asyncio
    async def test_duplicate_key_is_store_rejection(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await test_client.post("/birds/", json=sample_bird_data)

        assert response.status_code == 400
        assert response.json()["error"] == "store_rejected"
        assert response.json()["message"].startswith("Error: ")

    @pytest.mark.asyncio
    async def test_missing_required_field_is_400(self, test_client):
        response = await test_client.post("/birds/", json={"formattedComName": "BlueJay"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert response.json()["message"] == INVALID_BODY_MESSAGE


class TestLookupBirds:
    """GET /birds/"""

    @pytest.mark.asyncio
    async def test_unknown_names_are_omitted(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await lookup(test_client, ["AmericanRobin", "NotARealBird"])

        assert response.status_code == 200
        birds = response.json()
        assert len(birds) == 1
        assert birds[0]["formattedComName"] == "AmericanRobin"

    @pytest.mark.asyncio
    async def test_returns_only_present_rows(self, test_client):
        for name in ("BlueJay", "NorthernCardinal", "MourningDove"):
            await test_client.post("/birds/", json={"formattedComName": name, "comName": name})

        response = await lookup(
            test_client, ["MourningDove", "Nope1", "BlueJay", "Nope2", "Nope3"]
        )

        assert response.status_code == 200
        assert sorted(b["formattedComName"] for b in response.json()) == ["BlueJay", "MourningDove"]

    @pytest.mark.asyncio
    async def test_no_matches_is_empty_array(self, test_client):
        response = await lookup(test_client, ["NotARealBird"])

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_empty_name_list_is_empty_array(self, test_client):
        response = await lookup(test_client, [])

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_missing_bird_names_is_400(self, test_client):
        response = await test_client.request("GET", "/birds/", json={"birds": ["AmericanRobin"]})

        assert response.status_code == 400
        assert response.json()["message"] == INVALID_BODY_MESSAGE
        assert response.json()["details"] == {"field": "birdNames"}

    @pytest.mark.asyncio
    async def test_non_array_bird_names_is_400(self, test_client):
        response = await test_client.request("GET", "/birds/", json={"birdNames": "AmericanRobin"})

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_no_body_is_400(self, test_client):
        response = await test_client.get("/birds/")

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_non_string_names_are_400(self, test_client):
        response = await lookup(test_client, ["AmericanRobin", 7])

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "birdNames"}

    @pytest.mark.asyncio
    async def test_store_rejection_is_400(self, test_client, sqlite_engine):
        async with sqlite_engine.begin() as conn:
            await conn.exec_driver_sql("DROP TABLE birds")

        response = await lookup(test_client, ["AmericanRobin"])

        assert response.status_code == 400
        assert response.json()["error"] == "store_rejected"
        assert response.json()["message"].startswith("Error: ")


class TestListAllBirds:
    """GET /birds/all"""

    @pytest.mark.asyncio
    async def test_empty_table_is_404(self, test_client):
        response = await test_client.get("/birds/all")

        assert response.status_code == 404
        assert response.json()["message"] == "No birds were found in the database"

    @pytest.mark.asyncio
    async def test_returns_every_row(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)
        await test_client.post("/birds/", json={"formattedComName": "BlueJay", "comName": "Blue Jay"})

        response = await test_client.get("/birds/all")

        assert response.status_code == 200
        names = {bird["formattedComName"] for bird in response.json()}
        assert names == {"AmericanRobin", "BlueJay"}

    @pytest.mark.asyncio
    async def test_store_failure_is_generic_500(self, test_client, sqlite_engine):
        async with sqlite_engine.begin() as conn:
            await conn.exec_driver_sql("DROP TABLE birds")

        response = await test_client.get("/birds/all")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "birds" not in body["message"]


class TestUpdateBird:
    """PUT /birds/{formattedComName}"""

    @pytest.mark.asyncio
    async def test_update_existing_bird(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)
        changes = {k: v for k, v in sample_bird_data.items() if k != "formattedComName"}
        changes["habitat"] = "Suburbs"

        response = await test_client.put("/birds/AmericanRobin", json=changes)

        assert response.status_code == 200
        assert response.json()["habitat"] == "Suburbs"
        assert response.json()["formattedComName"] == "AmericanRobin"

    @pytest.mark.asyncio
    async def test_omitted_fields_are_written_as_null(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await test_client.put("/birds/AmericanRobin", json={"comName": "Robin"})

        assert response.status_code == 200
        data = response.json()
        assert data["comName"] == "Robin"
        assert data["sciName"] is None
        assert data["sound"] is None

    @pytest.mark.asyncio
    async def test_missing_key_is_404_and_inserts_nothing(self, test_client):
        response = await test_client.put("/birds/NotARealBird", json={"comName": "Not Real"})

        assert response.status_code == 404
        assert response.json()["message"] == "No bird found with the provided name."

        lookup_response = await lookup(test_client, ["NotARealBird"])
        assert lookup_response.json() == []

    @pytest.mark.asyncio
    async def test_null_com_name_is_store_rejection(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await test_client.put("/birds/AmericanRobin", json={"sciName": "Turdus"})

        assert response.status_code == 400
        assert response.json()["message"].startswith("Error: ")


class TestDeleteBirds:
    """DELETE /birds/"""

    @pytest.mark.asyncio
    async def test_delete_present_bird(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await delete(test_client, ["AmericanRobin"])

        assert response.status_code == 200
        assert response.json() == {
            "message": "1 bird(s) deleted successfully.",
            "birdNames": ["AmericanRobin"],
        }

    @pytest.mark.asyncio
    async def test_delete_absent_bird_is_404_with_echo(self, test_client):
        response = await delete(test_client, ["AmericanRobin"])

        assert response.status_code == 404
        assert response.json()["message"] == "No birds found with the provided names."
        assert response.json()["birdNames"] == ["AmericanRobin"]

    @pytest.mark.asyncio
    async def test_second_delete_is_404(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        first = await delete(test_client, ["AmericanRobin"])
        second = await delete(test_client, ["AmericanRobin"])

        assert first.status_code == 200
        assert second.status_code == 404

    @pytest.mark.asyncio
    async def test_lookup_after_delete_is_empty(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)
        await delete(test_client, ["AmericanRobin"])

        response = await lookup(test_client, ["AmericanRobin"])

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_partial_delete_echoes_all_requested_names(self, test_client, sample_bird_data):
        await test_client.post("/birds/", json=sample_bird_data)

        response = await delete(test_client, ["AmericanRobin", "NotARealBird"])

        assert response.status_code == 200
        assert response.json()["message"] == "1 bird(s) deleted successfully."
        assert response.json()["birdNames"] == ["AmericanRobin", "NotARealBird"]

    @pytest.mark.asyncio
    async def test_empty_name_list_is_404(self, test_client):
        response = await delete(test_client, [])

        assert response.status_code == 404
        assert response.json()["birdNames"] == []

    @pytest.mark.asyncio
    async def test_missing_names_is_400(self, test_client):
        response = await test_client.request("DELETE", "/birds/", json={"birdNames": ["AmericanRobin"]})

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "names"}

    @pytest.mark.asyncio
    async def test_non_string_names_are_400(self, test_client):
        response = await delete(test_client, [None])

        assert response.status_code == 400
        assert response.json()["details"] == {"field": "names"}

    @pytest.mark.asyncio
    async def test_store_rejection_is_400(self, test_client, sqlite_engine):
        async with sqlite_engine.begin() as conn:
            await conn.exec_driver_sql("DROP TABLE birds")

        response = await delete(test_client, ["AmericanRobin"])

        assert response.status_code == 400
        assert response.json()["error"] == "store_rejected"
        assert response.json()["message"].startswith("Error: ")


class TestResponseHeaders:

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/birds/all")

        assert len(response.headers["X-Request-ID"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/birds/all", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
        assert response.json()["request_id"] == "trace-123"
