from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import structlog.testing

from ccapictl import (
    ConsoleClient,
    ConsoleFramingError,
    ConsoleStatusError,
    ConsoleTransportError,
    ConsoleUsageError,
    ErrorKind,
)
from ccapictl.client import parse_i32, parse_u32
from tests.fakes import FakeResponse, FakeSession


def make_client(*replies, **kwargs):
    session = FakeSession(*replies)
    return ConsoleClient("192.168.1.20", session=session, **kwargs), session


def test_request_url_uses_default_port():
    client, _ = make_client()
    req = client.request("ringbuzzer")
    assert req.url == "http://192.168.1.20:6333/ccapi/ringbuzzer"


def test_param_is_fluent_and_stringifies_values():
    client, _ = make_client()
    req = client.request("notify").param("id", 3).param("msg", "hello")
    assert req.parameters == {"id": "3", "msg": "hello"}


def test_send_passes_query_parameters_and_timeout():
    client, session = make_client("0", timeout_s=1.5)
    resp = client.request("setconsoleled").param("color", 1).param("status", 2).send()

    assert resp.status_code == 0
    assert session.calls == [
        {
            "url": "http://192.168.1.20:6333/ccapi/setconsoleled",
            "params": {"color": "1", "status": "2"},
            "timeout": 1.5,
        }
    ]


def test_query_string_round_trip_ignores_insertion_order():
    first = {"pid": "1", "addr": "0x10000", "size": "4"}
    second = dict(reversed(list(first.items())))

    def parsed(params):
        url = requests.Request("GET", "http://10.0.0.1:6333/ccapi/getmemory", params=params).prepare().url
        return {k: v[0] for k, v in parse_qs(urlsplit(url).query).items()}

    assert parsed(first) == first
    assert parsed(second) == first


def test_endpoint_changes_apply_to_later_requests():
    client, session = make_client("0")
    client.set_console_ip("10.0.0.7")
    client.set_console_port(8080)
    client.request("gettemperature").send()

    assert str(client.endpoint) == "10.0.0.7:8080"
    assert session.calls[0]["url"] == "http://10.0.0.7:8080/ccapi/gettemperature"


def test_request_keeps_endpoint_it_was_built_with():
    client, _ = make_client()
    req = client.request("getprocesslist")
    client.set_console_port(7000)
    assert req.url == "http://192.168.1.20:6333/ccapi/getprocesslist"


@pytest.mark.parametrize("bad", ["", "300.1.1.1", "console.local", "::1"])
def test_invalid_ip_is_a_usage_error(bad):
    with pytest.raises(ConsoleUsageError):
        ConsoleClient(bad, session=FakeSession())


def test_invalid_port_is_a_usage_error():
    client, _ = make_client()
    with pytest.raises(ConsoleUsageError):
        client.set_console_port(70000)


def test_success_keeps_payload_lines():
    client, _ = make_client("0\nfirst\r\nsecond")
    resp = client.request("getprocessname").send()
    assert resp.lines == ["0", "first", "second"]
    assert resp.payload == ["first", "second"]
    assert resp.line(3) is None


@pytest.mark.parametrize("body", ["", "\n", "\nfoo"])
def test_missing_status_line_is_framing_error(body):
    client, _ = make_client(body)
    with pytest.raises(ConsoleFramingError):
        client.request("getfirmwareinfo").send()


@pytest.mark.parametrize("body", ["zz\n1", "-1", "100000000", "0_0\n1", "0x0\n1", "+-0", "\u0660"])
def test_invalid_status_line_is_framing_error(body):
    client, _ = make_client(body)
    with pytest.raises(ConsoleFramingError):
        client.request("getfirmwareinfo").send()


def test_non_zero_status_raises_classified_error():
    client, _ = make_client("80010005\n")
    with pytest.raises(ConsoleStatusError) as info:
        client.request("getprocessname").param("pid", 42).send()

    err = info.value
    assert err.kind is ErrorKind.ESRCH
    assert err.status_code == 0x80010005
    assert err.command == "getprocessname"
    assert err.parameters == {"pid": "42"}
    assert "0x80010005" in str(err)
    assert "'pid': '42'" in str(err)


def test_unmapped_status_is_unknown_kind():
    client, _ = make_client("1")
    with pytest.raises(ConsoleStatusError) as info:
        client.request("ringbuzzer").send()
    assert info.value.kind is ErrorKind.UNKNOWN
    assert info.value.status_code == 1


def test_connection_error_is_transport_error():
    client, _ = make_client(requests.ConnectionError("refused"))
    with pytest.raises(ConsoleTransportError) as info:
        client.request("gettemperature").send()
    assert isinstance(info.value.__cause__, requests.ConnectionError)


def test_http_error_status_is_transport_error():
    client, _ = make_client(FakeResponse("not found", status_code=404))
    with pytest.raises(ConsoleTransportError):
        client.request("bogus").send()


def test_close_closes_session():
    client, session = make_client()
    client.close()
    assert session.closed


@pytest.mark.parametrize("port", ["x", None, "80.5"])
def test_non_numeric_port_is_a_usage_error(port):
    client, _ = make_client()
    with pytest.raises(ConsoleUsageError):
        client.set_console_port(port)


@pytest.mark.parametrize("text", ["1_0", "0x10", "\u0661", " 1", ""])
def test_parse_u32_accepts_plain_digits_only(text):
    with pytest.raises(ValueError):
        parse_u32(text)


def test_parse_integers_in_both_radixes():
    assert parse_u32("+10") == 10
    assert parse_u32("ffffffff", 16) == 0xFFFFFFFF
    assert parse_i32("-1a", 16) == -26
    with pytest.raises(ValueError):
        parse_u32("-1")
    with pytest.raises(ValueError):
        parse_i32("80000000", 16)


def test_request_and_response_are_logged():
    client, _ = make_client("0")
    with structlog.testing.capture_logs() as logs:
        client.request("ringbuzzer").param("type", 1).send()

    events = [entry["event"] for entry in logs]
    assert events == ["ccapi.request", "ccapi.response"]
    assert logs[0]["params"] == {"type": "1"}
    assert logs[1]["status"] == "0x0"
