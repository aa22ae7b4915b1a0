import io
import socket

import pytest

from lemonlab.chat_client import Client, main


def _feeder(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def pair():
    a, b = socket.socketpair()
    b.settimeout(5)
    yield a, b
    a.close()
    b.close()


def _client(sock, lines):
    return Client(sock, input_func=_feeder(lines), output=io.StringIO())


def _drain(sock):
    chunks = []
    while True:
        data = sock.recv(4096)
        if not data:
            return b"".join(chunks)
        chunks.append(data)


def test_public_chat_sends_non_empty_messages(pair):
    a, b = pair
    client = _client(a, ["hello", "", "bye", "exit"])
    client.public_chat()
    client.close()
    assert _drain(b) == b"hello\nbye\n"
    assert ">>>>请输入聊天的内容,exit退出" in client.output.getvalue()


def test_public_chat_sends_first_word_only(pair):
    a, b = pair
    client = _client(a, ["hello world", "exit"])
    client.public_chat()
    client.close()
    assert client.output.getvalue().count(">>>>请输入聊天的内容,exit退出") == 2
    assert _drain(b) == b"hello\n"


def test_private_chat_protocol(pair):
    a, b = pair
    client = _client(a, ["bob", "hi", "exit", "exit"])
    client.private_chat()
    client.close()
    shown = client.output.getvalue()
    assert shown.count(">>>>>请输入聊天对象[用户名], exit 退出") == 2
    assert shown.count(">>>>>>请输入消息内容, exit 退出") == 2
    assert _drain(b) == b"who\nto|bob|hi\nwho\n"


def test_update_name_sends_rename(pair):
    a, b = pair
    client = _client(a, ["alice"])
    assert client.update_name() is True
    client.close()
    assert client.name == "alice"
    assert _drain(b) == b"rename|alice\n"


def test_update_name_keeps_old_name_on_empty_input(pair):
    a, b = pair
    client = _client(a, ["alice", ""])
    client.update_name()
    client.update_name()
    client.close()
    assert client.name == "alice"
    assert _drain(b) == b"rename|alice\nrename|alice\n"


def test_menu_rejects_out_of_range(pair):
    a, _ = pair
    client = _client(a, ["7"])
    assert client.menu() is False
    assert client.mode == 999
    assert ">>>>>>>请输入合法范围内的数字<<<<<<<<" in client.output.getvalue()


def test_menu_accepts_choice(pair):
    a, _ = pair
    client = _client(a, ["2"])
    assert client.menu() is True
    assert client.mode == 2


def test_menu_treats_non_number_as_quit(pair):
    a, _ = pair
    client = _client(a, ["abc"])
    assert client.menu() is True
    assert client.mode == 0


def test_run_dispatches_until_quit(pair):
    a, b = pair
    client = _client(a, ["9", "3", "alice", "1", "hi", "exit", "0"])
    client.run()
    client.close()
    assert client.mode == 0
    assert _drain(b) == b"rename|alice\nhi\n"


def test_run_stops_on_end_of_input(pair):
    a, _ = pair
    client = _client(a, ["1"])
    with pytest.raises(EOFError):
        client.run()


def test_deal_response_copies_server_output(pair):
    a, b = pair
    client = _client(a, [])
    b.sendall("你被踢了".encode())
    b.shutdown(socket.SHUT_WR)
    client.deal_response()
    assert client.output.getvalue() == "你被踢了"


def _free_port():
    with socket.socket() as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


def test_connect_refused_raises():
    with pytest.raises(OSError):
        Client.connect("127.0.0.1", _free_port())


def test_connect_sets_address():
    with socket.socket() as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen()
        port = listener.getsockname()[1]
        client = Client.connect("127.0.0.1", port)
        try:
            assert (client.server_ip, client.server_port) == ("127.0.0.1", port)
            assert client.mode == 999
        finally:
            client.close()


def test_main_reports_connection_failure(capsys):
    assert main(["-ip", "127.0.0.1", "-port", str(_free_port())]) == 1
    out = capsys.readouterr().out
    assert "net.Dial err:" in out
    assert ">>>>> 连接服务器失败..." in out


def test_main_runs_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", _feeder(["0"]))
    with socket.socket() as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen()
        port = listener.getsockname()[1]
        assert main(["-ip", "127.0.0.1", "-port", str(port)]) == 0
    assert ">>>>>> 链接服务器成功..." in capsys.readouterr().out