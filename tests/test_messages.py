import pytest

from netshell.messages import (
    STATUS_MESSAGES,
    Method,
    Request,
    Response,
    StatusCode,
)


def test_request_round_trip():
    request = Request(Method.PUT, "/users/7", {"name": "alice"})
    assert Request.from_json(request.to_json()) == request


def test_request_method_serialises_as_integer():
    data = Request(Method.GET, "/x").to_json()
    assert data == {"method": 0, "path": "/x", "body": None}


def test_request_from_json_accepts_plain_integer_method():
    request = Request.from_json({"method": 3, "path": "/a", "body": [1, 2]})
    assert request.method is Method.DELETE
    assert request.body == [1, 2]


def test_request_from_json_missing_key():
    with pytest.raises(KeyError):
        Request.from_json({"method": 0, "path": "/a"})


def test_request_from_json_bad_method():
    with pytest.raises(ValueError):
        Request.from_json({"method": 9, "path": "/a", "body": None})


def test_request_from_json_bad_path_type():
    with pytest.raises(TypeError):
        Request.from_json({"method": 0, "path": 5, "body": None})


def test_response_round_trip():
    response = Response(StatusCode.NOT_FOUND, "Not Found", {"detail": "x"})
    assert Response.from_json(response.to_json()) == response


def test_response_to_json_keys():
    data = Response(StatusCode.UNAUTHORIZED, "Unauthorised").to_json()
    assert data["status_code"] == 401
    assert data["status_message"] == "Unauthorised"
    assert data["body"] is None


def test_response_from_json_bad_status():
    with pytest.raises(ValueError):
        Response.from_json({"status_code": 999, "status_message": "", "body": None})


def test_method_str():
    methods = [
        Request.from_json({"method": value, "path": "/", "body": None}).method
        for value in range(4)
    ]
    assert [str(method) for method in methods] == ["GET", "POST", "PUT", "DELETE"]


def test_status_values_and_messages():
    response = Response.from_json(
        {"status_code": 405, "status_message": "", "body": None}
    )
    assert response.status_code is StatusCode.METHOD_NOT_ALLOWED
    assert STATUS_MESSAGES[response.status_code] == "Methode Not Allowed"
    assert STATUS_MESSAGES[StatusCode.NOT_FOUND] == "Not Found"