import pytest

from netshell.endpoint import Endpoint


def test_explicit_host_and_port():
    endpoint = Endpoint(8080, "127.0.0.1")
    assert endpoint.port == 8080
    assert endpoint.hostname == "127.0.0.1"
    assert endpoint.address == ("127.0.0.1", 8080)


def test_empty_host_means_any():
    endpoint = Endpoint(21)
    assert endpoint.hostname == "0.0.0.0"
    assert endpoint.port == 21


def test_default_endpoint():
    endpoint = Endpoint()
    assert endpoint.address == ("0.0.0.0", 0)


@pytest.mark.parametrize("host", ["localhost", "256.1.1.1", "not an address"])
def test_invalid_host(host):
    with pytest.raises(ValueError, match="Invalid network address"):
        Endpoint(80, host)


def test_from_address_round_trip():
    endpoint = Endpoint.from_address(("10.0.0.1", 4242))
    assert endpoint.hostname == "10.0.0.1"
    assert endpoint.port == 4242
    assert Endpoint.from_address(endpoint.address) == endpoint


def test_equality_and_hash():
    first = Endpoint(1234, "192.168.1.2")
    second = Endpoint.from_address(("192.168.1.2", 1234))
    assert first == second
    assert hash(first) == hash(second)
    assert first != Endpoint(1235, "192.168.1.2")