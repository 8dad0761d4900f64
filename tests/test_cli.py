import socket
import logging
import argparse

import pytest

import pyprompt
from pyprompt._cli import cli, make_parser, parse_yes_no
from pyprompt.utils import UDPHandler


def test_version(capsys):
    cli(["--version"])
    assert capsys.readouterr().out.strip() == f"pyprompt {pyprompt.__version__}"


def test_help_without_command(capsys):
    cli([])
    assert "confirm" in capsys.readouterr().out


def test_parse_yes_no():
    assert parse_yes_no("yes") is True
    assert parse_yes_no("Y") is True
    assert parse_yes_no("no") is False
    assert parse_yes_no("N") is False
    with pytest.raises(argparse.ArgumentTypeError):
        parse_yes_no("maybe")


def test_parser():
    args = make_parser().parse_args(["confirm", "Go?", "--default", "no"])
    assert args.command == "confirm"
    assert args.message == "Go?"
    assert args.default is False

    args = make_parser().parse_args(
        ["select", "Pick", "a", "b", "c", "--selected", "0", "--selected", "2"]
    )
    assert args.command == "select"
    assert args.options == ["a", "b", "c"]
    assert args.selected == [0, 2]
    assert not args.no_clear


def test_udp_handler():
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2)
    port = sock.getsockname()[1]

    handler = UDPHandler(port)
    logger = logging.getLogger("pyprompt.test")
    logger.setLevel(logging.INFO)
    logger.addHandler(handler)
    try:
        logger.info("hello there")
        data, _ = sock.recvfrom(2**16)
    finally:
        logger.removeHandler(handler)
        handler.close()
        sock.close()
    assert data.decode() == "hello there"


# %% Commands, with the terminal faked


def run_cli(terminal, argv, *chunks):
    terminal.feed(*chunks)
    with pytest.raises(SystemExit) as err:
        cli(argv, manager=terminal.manager())
    return err.value.code


def test_confirm_yes(terminal):
    assert run_cli(terminal, ["confirm", "Go?"], b"y", b"\r") == 0
    assert "Go?" in terminal.text


def test_confirm_no(terminal):
    assert run_cli(terminal, ["confirm", "Go?"], b"n", b"\r") == 1


def test_confirm_default(terminal):
    assert run_cli(terminal, ["confirm", "Go?", "--default", "no"], b"\r") == 1


def test_confirm_cancelled(terminal):
    assert run_cli(terminal, ["confirm", "Go?"], b"\x03") == 120


def test_select_prints_indices(terminal, capsys):
    argv = ["select", "Pick", "a", "b", "c", "--selected", "0"]
    terminal.feed(b"\x1b[B", b" ", b"\r")
    cli(argv, manager=terminal.manager())
    assert capsys.readouterr().out == "0\n1\n"
    # The prompt itself is not on stdout
    assert "Pick" in terminal.text


def test_select_cancelled(terminal, capsys):
    assert run_cli(terminal, ["select", "Pick", "a", "b"], b"\x03") == 120
    assert capsys.readouterr().out == ""
