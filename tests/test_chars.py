import os
import string

import pytest

from minitalk import chars


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    files = {"read": read_fd, "write": write_fd}
    yield files
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


def _drain(pipe):
    os.close(pipe["write"])
    chunks = []
    while True:
        chunk = os.read(pipe["read"], 4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r+17", 17),
        ("123abc", 123),
        ("-0", 0),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("+-5", 0),
        ("  12 34", 12),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
    ],
)
def test_atoi(text, expected):
    assert chars.atoi(text) == expected


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trip(n):
    assert chars.atoi(chars.itoa(n)) == n


def test_itoa_values():
    assert chars.itoa(-2147483648) == "-2147483648"
    assert chars.itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        chars.itoa("12")


def test_classification_over_ascii():
    for code in range(128):
        ch = chr(code)
        assert chars.isalpha(code) == (ch in string.ascii_letters)
        assert chars.isdigit(code) == (ch in string.digits)
        assert chars.isalnum(code) == (ch in string.ascii_letters + string.digits)
        assert chars.isprint(code) == (32 <= code < 127)
        assert chars.isascii(code)


def test_classification_accepts_characters():
    assert chars.isalpha("a") is True
    assert chars.isdigit("a") is False
    assert chars.isalnum("9") is True
    assert chars.isprint(" ") is True
    assert chars.isprint("\x7f") is False


def test_isascii_bounds():
    assert chars.isascii(127) is True
    assert chars.isascii(128) is False
    assert chars.isascii(-1) is False


def test_non_ascii_letters_are_not_alpha():
    assert chars.isalpha("é") is False


def test_classification_rejects_long_string():
    with pytest.raises(ValueError):
        chars.isalpha("ab")


def test_classification_rejects_other_types():
    with pytest.raises(TypeError):
        chars.isdigit(1.5)


def test_case_conversion_strings():
    assert chars.toupper("q") == "Q"
    assert chars.tolower("Q") == "q"
    assert chars.toupper("5") == "5"
    assert chars.tolower("[") == "["


def test_case_conversion_codes():
    assert chars.toupper(ord("a")) == ord("A")
    assert chars.tolower(ord("Z")) == ord("z")
    assert chars.toupper(200) == 200


def test_case_conversion_round_trip():
    for letter in string.ascii_lowercase:
        assert chars.tolower(chars.toupper(letter)) == letter
    for letter in string.ascii_uppercase:
        assert chars.toupper(chars.tolower(letter)) == letter


def test_putchar_fd_string(pipe):
    chars.putchar_fd("x", pipe["write"])
    assert _drain(pipe) == b"x"


def test_putchar_fd_int_is_single_byte(pipe):
    chars.putchar_fd(ord("A"), pipe["write"])
    chars.putchar_fd(0, pipe["write"])
    assert _drain(pipe) == b"A\x00"


def test_putstr_fd(pipe):
    chars.putstr_fd("hello world", pipe["write"])
    assert _drain(pipe) == b"hello world"


def test_putstr_fd_large(pipe):
    payload = "z" * 50000
    read_fd = pipe["read"]
    # Drain concurrently so a full pipe buffer does not block the writer.
    import threading

    received = []

    def reader():
        while True:
            chunk = os.read(read_fd, 65536)
            if not chunk:
                break
            received.append(chunk)

    thread = threading.Thread(target=reader)
    thread.start()
    chars.putstr_fd(payload, pipe["write"])
    os.close(pipe["write"])
    thread.join()
    assert b"".join(received) == payload.encode()


def test_putendl_fd(pipe):
    chars.putendl_fd("line", pipe["write"])
    assert _drain(pipe) == b"line\n"


@pytest.mark.parametrize("n", [0, 9, 10, -1, 2147483647, -2147483648])
def test_putnbr_fd_round_trip(pipe, n):
    chars.putnbr_fd(n, pipe["write"])
    assert chars.atoi(_drain(pipe).decode()) == n


def test_putnbr_fd_min_int(pipe):
    chars.putnbr_fd(-2147483648, pipe["write"])
    assert _drain(pipe) == b"-2147483648"