from swarmconsole.errors import NotFoundError
from swarmconsole.handlers.envelope import ResponseEnvelope
from swarmconsole.utils.response_helpers import (
    resp_accepted,
    resp_created,
    resp_from_error,
    resp_ok,
    select_keys,
)


def test_bodyless_responses():
    assert resp_ok() == ResponseEnvelope(status=200)
    assert resp_ok() == resp_ok(None)
    assert resp_created().body is None
    assert resp_accepted().status == 202


def test_body_is_kept():
    assert resp_created({"id": "s1"}) == ResponseEnvelope(status=201, body={"id": "s1"})
    assert resp_ok([]).body == []


def test_resp_from_error():
    assert resp_from_error(NotFoundError("node doesn't exist")) == ResponseEnvelope(
        status=404, body={"error": "node doesn't exist"}
    )


def test_select_keys():
    assert select_keys({"id": "u1", "password": "hash"}, ["id", "email"]) == {"id": "u1"}
    assert select_keys(None, ["id"]) == {}
