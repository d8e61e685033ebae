import logging

import httpx
import pytest

from taf import (
    COMMENTS,
    USERS,
    CommentDto,
    DecodeError,
    HttpStatus,
    PathSubstitutionError,
    ResourceEndpoint,
    ResourceKind,
    UnexpectedStatusError,
    UserDto,
    ValidatedResponse,
)


def test_comment_crud_scenario(comments):
    created = comments.create(CommentDto(content="Hello"))
    assert created.id

    got = comments.get_by_id(created.id)
    assert got.content == "Hello"
    assert got == created

    comments.update(created.id, CommentDto(content="Updated"))
    assert comments.get_by_id(created.id).content == "Updated"

    everything = comments.get_all()
    assert any(c.content == "Updated" for c in everything)


def test_user_round_trip(users):
    created = users.create(UserDto(name="John Doe", email="john.doe@example.com"))
    assert users.get_by_id(created.id) == created


def test_update_is_observable(users):
    created = users.create(UserDto(name="John Doe", email="john.doe@example.com"))
    updated = users.update(created.id, UserDto(name="Jane Doe", email="jane@example.com"))
    assert updated.id == created.id
    got = users.get_by_id(created.id)
    assert (got.name, got.email) == ("Jane Doe", "jane@example.com")


def test_int_and_str_ids_are_equivalent(comments):
    created = comments.create(CommentDto(content="x"))
    assert comments.get_by_id(int(created.id)) == comments.get_by_id(created.id)


def test_get_all_matches_creates(comments):
    assert comments.get_all() == []
    made = [comments.create(CommentDto(content=f"c{i}")) for i in range(3)]
    assert comments.get_all() == made


def test_explicit_status_match_returns_response(comments):
    resp = comments.create_response(CommentDto(content="Hello"), HttpStatus.CREATED)
    assert isinstance(resp, ValidatedResponse)
    assert resp.status == 201
    cid = resp.extract(CommentDto).id

    assert comments.get_by_id_response(cid, HttpStatus.OK).status == 200
    assert comments.update_response(CommentDto(content="y"), cid, 200).status == 200
    assert comments.get_all_response(HttpStatus.OK).status == 200


def test_explicit_status_mismatch(comments):
    with pytest.raises(UnexpectedStatusError) as ei:
        comments.create_response(CommentDto(content="Hello"), HttpStatus.OK)
    assert (ei.value.expected, ei.value.actual) == (200, 201)


@pytest.mark.parametrize(
    "call, actual",
    [
        (lambda ep, cid: ep.get_by_id_response(cid, HttpStatus.NOT_FOUND), 200),
        (lambda ep, cid: ep.update_response(CommentDto(content="y"), cid, HttpStatus.CREATED), 200),
        (lambda ep, cid: ep.get_all_response(HttpStatus.NO_CONTENT), 200),
        (lambda ep, cid: ep.delete_response(cid, HttpStatus.NO_CONTENT), 200),
        (lambda ep, cid: ep.get_by_id_response("999", HttpStatus.OK), 404),
    ],
)
def test_every_explicit_variant_reports_both_codes(comments, call, actual):
    cid = comments.create(CommentDto(content="Hello")).id
    with pytest.raises(UnexpectedStatusError) as ei:
        call(comments, cid)
    assert ei.value.actual == actual
    assert ei.value.expected != actual
    assert str(ei.value.expected) in str(ei.value)


def test_missing_resource(users):
    with pytest.raises(UnexpectedStatusError) as ei:
        users.get_by_id("999")
    assert ei.value.expected == 200
    assert ei.value.actual == 404
    assert users.get_by_id_response("999", HttpStatus.NOT_FOUND).json()["detail"][
        "error_code"
    ] == "not_found"


def test_update_missing_resource(users):
    with pytest.raises(UnexpectedStatusError) as ei:
        users.update("41", UserDto(name="a", email="b"))
    assert ei.value.actual == 404


def test_invalid_body_rejected_by_server(users):
    resp = users.create_response({"name": "no email"}, HttpStatus.UNPROCESSABLE_ENTITY)
    assert resp.status == 422


def test_delete(comments):
    created = comments.create(CommentDto(content="bye"))
    comments.delete(created.id)
    comments.get_by_id_response(created.id, HttpStatus.NOT_FOUND)
    with pytest.raises(UnexpectedStatusError):
        comments.delete(created.id)


def test_item_template_needs_an_id(comments):
    with pytest.raises(PathSubstitutionError):
        comments.client.get(COMMENTS.item_path)


def test_empty_id_fails_before_sending(mock_transport):
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json=[])

    endpoint = ResourceEndpoint(mock_transport(handler), COMMENTS)
    for op in (
        lambda: endpoint.get_by_id(""),
        lambda: endpoint.update("", CommentDto(content="x")),
        lambda: endpoint.delete(""),
    ):
        with pytest.raises(PathSubstitutionError):
            op()
    assert sent == []


def test_malformed_payload_raises_decode_error(mock_transport):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": 1, "name": "only a name"})

    endpoint = ResourceEndpoint(mock_transport(handler), USERS)
    with pytest.raises(DecodeError) as ei:
        endpoint.get_by_id("1")
    assert ei.value.target == "UserDto"
    assert "only a name" in ei.value.excerpt


def test_operations_are_logged(comments, caplog):
    caplog.set_level(logging.INFO, logger="taf")
    created = comments.create(CommentDto(content="Hello"))
    comments.get_by_id(created.id)

    events = [(r.getMessage(), r.event) for r in caplog.records if r.name == "taf"]
    assert events == [
        ("comment.create", "resource_create"),
        ("comment.get", "resource_get"),
    ]
    get_record = [r for r in caplog.records if r.name == "taf"][-1]
    assert get_record.resource == "comment"
    assert get_record.resource_id == created.id


def test_endpoint_uses_config_logger(api):
    from taf import HttpTransport, TransportConfig

    logger = logging.getLogger("suite.custom")
    transport = HttpTransport(TransportConfig(logger=logger), client=api)
    endpoint = ResourceEndpoint(transport, COMMENTS)
    assert endpoint.logger is logger
    assert endpoint.client.logger is logger


def test_resource_kind_layout():
    assert USERS.collection_path == "/users"
    assert USERS.item_path == "/users/{user_id}"
    assert COMMENTS.model is CommentDto


@pytest.mark.parametrize(
    "collection, item",
    [("/posts", "/posts"), ("/posts/{id}", "/posts/{id}"), ("/posts", "/posts/{a}/{b}")],
)
def test_resource_kind_rejects_bad_templates(collection, item):
    with pytest.raises(ValueError):
        ResourceKind("post", CommentDto, collection, item)
