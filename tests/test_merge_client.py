import pytest
import requests

from core.candidates import CandidateFile
from core.merge_client import MergeClient, MergeError


def test_posts_files_in_order_under_files_field(make_file, fake_http):
    first = make_file("b-first.pdf", b"%PDF-first")
    second = make_file("a-second.pdf", b"%PDF-second")
    http = fake_http()

    payload = MergeClient("http://merge.local", session=http).merge([first, second])

    assert payload == b"%PDF-merged"
    assert len(http.calls) == 1
    call = http.calls[0]
    assert call["url"] == "http://merge.local/api/merge"
    assert call["files"] == [
        ("files", ("b-first.pdf", b"%PDF-first", "application/pdf")),
        ("files", ("a-second.pdf", b"%PDF-second", "application/pdf")),
    ]
    assert call["timeout"] is None


def test_endpoint_ignores_trailing_slash():
    client = MergeClient("https://api.example.com/", session=object())
    assert client.endpoint == "https://api.example.com/api/merge"


def test_any_2xx_is_success(make_file, fake_http, fake_response):
    http = fake_http(response=fake_response(201, b"bytes"))
    assert MergeClient("http://m", session=http).merge([make_file("x.pdf")]) == b"bytes"


def test_error_field_becomes_message(make_file, fake_http, fake_response):
    http = fake_http(response=fake_response(413, b'{"error": "too large"}'))

    with pytest.raises(MergeError) as exc_info:
        MergeClient("http://m", session=http).merge([make_file("x.pdf")])

    assert exc_info.value.message == "too large"
    assert exc_info.value.status_code == 413


@pytest.mark.parametrize("body", [
    b"<html>Bad Gateway</html>",
    b"",
    b'{"detail": "nope"}',
    b'{"error": ""}',
    b'["too large"]',
])
def test_unusable_failure_body_falls_back_to_generic_message(
    make_file, fake_http, fake_response, body,
):
    http = fake_http(response=fake_response(502, body))

    with pytest.raises(MergeError) as exc_info:
        MergeClient("http://m", session=http).merge([make_file("x.pdf")])

    assert exc_info.value.message == "Failed to merge PDFs"


def test_generic_message_can_be_replaced(make_file, fake_http, fake_response):
    http = fake_http(response=fake_response(500, b"<html>oops</html>"))
    client = MergeClient("http://m", session=http, generic_error="No se pudieron combinar los PDF")

    with pytest.raises(MergeError) as exc_info:
        client.merge([make_file("x.pdf")])

    assert exc_info.value.message == "No se pudieron combinar los PDF"
    assert exc_info.value.status_code == 500


def test_network_failure_raises_merge_error(make_file, fake_http):
    http = fake_http(exc=requests.exceptions.ConnectionError("connection refused"))

    with pytest.raises(MergeError) as exc_info:
        MergeClient("http://m", session=http).merge([make_file("x.pdf")])

    assert "connection refused" in exc_info.value.message
    assert exc_info.value.status_code is None


def test_unreadable_file_fails_before_any_request(tmp_path, fake_http):
    missing = CandidateFile(
        path=str(tmp_path / "gone.pdf"), name="gone.pdf", content_type="application/pdf",
    )
    http = fake_http()

    with pytest.raises(MergeError):
        MergeClient("http://m", session=http).merge([missing])

    assert http.calls == []


def test_timeout_is_passed_through(make_file, fake_http):
    http = fake_http()
    MergeClient("http://m", session=http, timeout=30).merge([make_file("x.pdf")])
    assert http.calls[0]["timeout"] == 30
