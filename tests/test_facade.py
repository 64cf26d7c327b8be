from datetime import datetime, timezone
from urllib.parse import parse_qsl, urlsplit

import pytest

from etherpad_lite_client import HttpVerb, hours_from_now, to_unix_seconds


def sent_args(call):
    raw = urlsplit(call.url).query if call.verb is HttpVerb.GET else call.body
    return dict(parse_qsl(raw))


CASES = [
    ("create_group", (), "createGroup", "POST", {}),
    ("create_group_if_not_exists_for", ("team",), "createGroupIfNotExistsFor", "POST", {"groupMapper": "team"}),
    ("delete_group", ("g.1",), "deleteGroup", "POST", {"groupID": "g.1"}),
    ("list_pads", ("g.1",), "listPads", "GET", {"groupID": "g.1"}),
    ("create_group_pad", ("g.1", "notes"), "createGroupPad", "POST", {"groupID": "g.1", "padName": "notes"}),
    ("create_group_pad", ("g.1", "notes", "hi"), "createGroupPad", "POST",
     {"groupID": "g.1", "padName": "notes", "text": "hi"}),
    ("create_author", (), "createAuthor", "POST", {}),
    ("create_author", ("Ada",), "createAuthor", "POST", {"name": "Ada"}),
    ("create_author_if_not_exists_for", ("u7",), "createAuthorIfNotExistsFor", "POST", {"authorMapper": "u7"}),
    ("create_author_if_not_exists_for", ("u7", "Ada"), "createAuthorIfNotExistsFor", "POST",
     {"authorMapper": "u7", "name": "Ada"}),
    ("list_pads_of_author", ("a.1",), "listPadsOfAuthor", "GET", {"authorID": "a.1"}),
    ("list_authors_of_pad", ("p",), "listAuthorsOfPad", "GET", {"padID": "p"}),
    ("create_session", ("g.1", "a.1", 1700000000), "createSession", "POST",
     {"groupID": "g.1", "authorID": "a.1", "validUntil": "1700000000"}),
    ("delete_session", ("s.1",), "deleteSession", "POST", {"sessionID": "s.1"}),
    ("get_session_info", ("s.1",), "getSessionInfo", "GET", {"sessionID": "s.1"}),
    ("list_sessions_of_group", ("g.1",), "listSessionsOfGroup", "GET", {"groupID": "g.1"}),
    ("list_sessions_of_author", ("a.1",), "listSessionsOfAuthor", "GET", {"authorID": "a.1"}),
    ("get_text", ("p",), "getText", "GET", {"padID": "p"}),
    ("get_text", ("p", 3), "getText", "GET", {"padID": "p", "rev": "3"}),
    ("set_text", ("p", "hello"), "setText", "POST", {"padID": "p", "text": "hello"}),
    ("get_html", ("p",), "getHTML", "GET", {"padID": "p"}),
    ("get_html", ("p", 0), "getHTML", "GET", {"padID": "p", "rev": "0"}),
    ("set_html", ("p", "<b>x</b>"), "setHTML", "POST", {"padID": "p", "html": "<b>x</b>"}),
    ("create_pad", ("p",), "createPad", "POST", {"padID": "p"}),
    ("create_pad", ("p", "init"), "createPad", "POST", {"padID": "p", "text": "init"}),
    ("get_revisions_count", ("p",), "getRevisionsCount", "GET", {"padID": "p"}),
    ("delete_pad", ("p",), "deletePad", "POST", {"padID": "p"}),
    ("get_read_only_id", ("p",), "getReadOnlyID", "GET", {"padID": "p"}),
    ("set_public_status", ("g.1$p", True), "setPublicStatus", "POST", {"padID": "g.1$p", "publicStatus": "true"}),
    ("get_public_status", ("g.1$p",), "getPublicStatus", "GET", {"padID": "g.1$p"}),
    ("set_password", ("g.1$p", "pw"), "setPassword", "POST", {"padID": "g.1$p", "password": "pw"}),
    ("is_password_protected", ("g.1$p",), "isPasswordProtected", "GET", {"padID": "g.1$p"}),
]


@pytest.mark.parametrize("name,args,remote,verb,expected", CASES)
def test_wrapper_maps_onto_invoke(client, transport, name, args, remote, verb, expected):
    getattr(client, name)(*args)
    call = transport.sent[0]
    assert call.verb is HttpVerb(verb)
    assert urlsplit(call.url).path == f"/api/1/{remote}"
    got = sent_args(call)
    assert got.pop("apikey")
    assert got == expected


def test_wrapper_returns_payload(client, transport):
    transport.body = '{"code":0,"message":"ok","data":{"groupID":"g.s8oes9dhwrvt0zif"}}'
    assert client.create_group()["groupID"] == "g.s8oes9dhwrvt0zif"


def test_hours_from_now():
    assert hours_from_now(2, now=1000.0) == 1000 + 7200
    assert hours_from_now(0, now=1000.9) == 1000


def test_to_unix_seconds():
    aware = datetime(2056, 1, 15, 20, 15, tzinfo=timezone.utc)
    assert to_unix_seconds(aware) == int(aware.timestamp())
    assert to_unix_seconds(datetime(2056, 1, 15, 20, 15)) == to_unix_seconds(aware)


def test_create_session_with_datetime(client, transport):
    until = datetime(2030, 1, 1, tzinfo=timezone.utc)
    client.create_session("g.1", "a.1", to_unix_seconds(until))
    assert sent_args(transport.sent[0])["validUntil"] == str(int(until.timestamp()))


@pytest.mark.parametrize("value,wire", [(False, "false"), (True, "true"), ("false", "false")])
def test_public_status_is_not_truthiness_coerced(client, transport, value, wire):
    client.set_public_status("g.1$p", value)
    assert sent_args(transport.sent[0])["publicStatus"] == wire
