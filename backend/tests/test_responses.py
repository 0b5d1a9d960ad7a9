import json

from notes_api.api.responses import CORS_HEADERS, client_error, failure, success
from notes_api.errors import AuthorizationMissing, StorageError, ValidationError


def test_success_and_failure_codes():
    assert success({"a": 1}).status_code == 200
    assert failure({"status": False}).status_code == 500


def test_body_is_serialized_json():
    env = success({"content": "héllo", "createdAt": 1})
    assert json.loads(env.body) == {"content": "héllo", "createdAt": 1}


def test_headers_are_the_same_for_every_outcome():
    envelopes = [
        success({}),
        failure({"status": False}),
        client_error(ValidationError("bad json at pos 3")),
        client_error(AuthorizationMissing("no sub")),
    ]
    for env in envelopes:
        assert env.headers == CORS_HEADERS


def test_headers_are_not_shared_between_envelopes():
    env = success({})
    env.headers["X-Extra"] = "1"
    assert "X-Extra" not in CORS_HEADERS
    assert "X-Extra" not in success({}).headers


def test_client_error_status_and_public_message():
    env = client_error(ValidationError("Expecting value: line 1 column 1"))
    assert env.status_code == 400
    assert json.loads(env.body) == {"status": False, "error": "Invalid request body"}

    env = client_error(AuthorizationMissing())
    assert env.status_code == 401


def test_storage_error_never_rendered_verbatim():
    env = client_error(StorageError("put", RuntimeError("disk /var/lib/notes full")))
    assert env.status_code == 500
    assert "disk" not in env.body


def test_to_dict_shape():
    assert success({"x": 1}).to_dict() == {
        "statusCode": 200,
        "headers": CORS_HEADERS,
        "body": '{"x": 1}',
    }
