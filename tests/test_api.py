import pytest

UPLOAD = {
    "filename": "a1b2c3.png",
    "original_filename": "beach.png",
    "file_path": "/uploads/a1b2c3.png",
    "file_size": 204800,
    "mime_type": "image/png",
    "width": 1920,
    "height": 1080,
}
MASK = '{"type": "rect", "x": 10, "y": 20, "width": 100, "height": 50}'


async def rpc(client, procedure, payload=None):
    response = await client.post(f"/api/rpc/{procedure}", json=payload if payload is not None else {})
    assert response.status_code == 200
    return response.json()


async def upload(client):
    body = await rpc(client, "uploadImage", UPLOAD)
    assert body["success"] is True
    return body["data"]


class TestEnvelope:
    """Response envelope shared by all procedures"""

    @pytest.mark.asyncio
    async def test_success_envelope(self, client):
        body = await rpc(client, "uploadImage", UPLOAD)

        assert body["success"] is True
        assert body["data"]["id"] > 0
        assert body["data"]["mime_type"] == "image/png"
        assert "created_at" in body["data"]

    @pytest.mark.asyncio
    async def test_missing_row_is_success_with_null_data(self, client):
        for procedure, payload in [
            ("getImage", {"id": 999999}),
            ("getOperationResult", {"operation_id": 999999}),
            ("getProject", {"id": 999999}),
            ("updateProject", {"id": 999999, "name": "x"}),
        ]:
            body = await rpc(client, procedure, payload)
            assert body == {"success": True, "message": None, "data": None}, procedure

    @pytest.mark.asyncio
    async def test_missing_image_reported_as_not_found(self, client):
        body = await rpc(client, "removeObject", {"image_id": 999999, "mask_data": MASK})

        assert body["success"] is False
        assert body["data"] is None
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["resource_id"] == 999999
        assert body["message"] == "Image with id 999999 not found"

    @pytest.mark.asyncio
    async def test_invalid_input_reported_as_validation_error(self, client):
        body = await rpc(client, "uploadImage", {**UPLOAD, "file_size": 0})

        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"
        assert any("file_size" in detail["loc"] for detail in body["error"]["details"])

    @pytest.mark.asyncio
    async def test_missing_required_field(self, client):
        body = await rpc(client, "applyStyleTransfer", {"image_id": 1})

        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_explicit_null_name_rejected(self, client):
        body = await rpc(client, "updateProject", {"id": 1, "name": None})

        assert body["success"] is False
        assert body["error"]["code"] == "VALIDATION_ERROR"


class TestImageProcedures:

    @pytest.mark.asyncio
    async def test_upload_then_get(self, client):
        image = await upload(client)

        body = await rpc(client, "getImage", {"id": image["id"]})

        assert body["data"] == image


class TestOperationProcedures:

    @pytest.mark.asyncio
    async def test_each_operation_starts_pending(self, client):
        image = await upload(client)
        requests = [
            ("removeObject", {"image_id": image["id"], "mask_data": MASK}, "object_removal"),
            ("applyStyleTransfer", {"image_id": image["id"], "prompt": "watercolor"}, "style_transfer"),
            ("modifyImage", {"image_id": image["id"], "prompt": "add a boat"}, "image_modification"),
        ]

        for procedure, payload, operation_type in requests:
            body = await rpc(client, procedure, payload)
            operation = body["data"]
            assert operation["operation_type"] == operation_type
            assert operation["status"] == "pending"
            assert operation["result_image_path"] is None
            assert operation["error_message"] is None
            assert operation["processing_time"] is None

    @pytest.mark.asyncio
    async def test_parameters_stored_as_json_text(self, client):
        image = await upload(client)

        body = await rpc(client, "removeObject", {
            "image_id": image["id"],
            "mask_data": MASK,
            "parameters": {"inpaint_strength": 0.9, "guidance_scale": 10.0},
        })

        assert body["data"]["parameters"] == '{"inpaint_strength": 0.9, "guidance_scale": 10.0}'

    @pytest.mark.asyncio
    async def test_out_of_range_parameter(self, client):
        image = await upload(client)

        body = await rpc(client, "applyStyleTransfer", {
            "image_id": image["id"],
            "prompt": "watercolor",
            "parameters": {"num_inference_steps": 500},
        })

        assert body["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_list_and_get(self, client):
        image = await upload(client)
        first = (await rpc(client, "removeObject", {"image_id": image["id"], "mask_data": MASK}))["data"]
        second = (await rpc(client, "modifyImage", {"image_id": image["id"], "prompt": "add a boat"}))["data"]

        listed = (await rpc(client, "listOperations", {"image_id": image["id"]}))["data"]
        unfiltered = (await rpc(client, "listOperations"))["data"]
        fetched = (await rpc(client, "getOperationResult", {"operation_id": first["id"]}))["data"]

        assert [op["id"] for op in listed] == [second["id"], first["id"]]
        assert len(unfiltered) == 2
        assert fetched == first

    @pytest.mark.asyncio
    async def test_list_without_body_returns_every_operation(self, client):
        image = await upload(client)
        await rpc(client, "applyStyleTransfer", {"image_id": image["id"], "prompt": "watercolor"})

        response = await client.post("/api/rpc/listOperations")
        body = response.json()

        assert body["success"] is True
        assert [op["image_id"] for op in body["data"]] == [image["id"]]


class TestProjectProcedures:

    @pytest.mark.asyncio
    async def test_create_and_update(self, client):
        image = await upload(client)
        project = (await rpc(client, "createProject", {
            "name": "Beach retouch",
            "description": "Remove the tourists",
            "original_image_id": image["id"],
        }))["data"]

        assert project["current_image_path"] == image["file_path"]
        assert project["operations_history"] == "[]"

        updated = (await rpc(client, "updateProject", {"id": project["id"], "description": None}))["data"]

        assert updated["description"] is None
        assert updated["name"] == "Beach retouch"
        assert updated["updated_at"] > project["updated_at"]

    @pytest.mark.asyncio
    async def test_create_for_missing_image(self, client):
        body = await rpc(client, "createProject", {"name": "Orphan", "original_image_id": 999999})

        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_without_body_uses_defaults(self, client):
        image = await upload(client)
        await rpc(client, "createProject", {"name": "One", "original_image_id": image["id"]})

        response = await client.post("/api/rpc/listProjects")
        body = response.json()

        assert body["success"] is True
        assert body["data"]["total"] == 1
        assert [p["name"] for p in body["data"]["projects"]] == ["One"]

    @pytest.mark.asyncio
    async def test_list_limit_out_of_range(self, client):
        body = await rpc(client, "listProjects", {"limit": 101})

        assert body["error"]["code"] == "VALIDATION_ERROR"


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["status"] == "ok"

