"""Interactive terminal client for the chat server."""

from __future__ import annotations

import argparse
import codecs
import contextlib
import socket
import sys
import threading
from typing import Callable, TextIO


class Client:
    """A connection to the chat server driven by line-based user input."""

    def __init__(
        self,
        sock: socket.socket,
        server_ip: str = "",
        server_port: int = 0,
        input_func: Callable[[], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self.sock = sock
        self.server_ip = server_ip
        self.server_port = server_port
        self.name = ""
        self.mode = 999
        self.input_func = input_func if input_func is not None else input
        self.output = output if output is not None else sys.stdout

    @classmethod
    def connect(cls, server_ip: str, server_port: int) -> Client:
        """Open a TCP connection to the server; raises OSError on failure."""
        sock = socket.create_connection((server_ip, server_port))
        return cls(sock, server_ip, server_port)

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.output, flush=True)

    def _scan(self, default: str = "") -> str:
        tokens = self.input_func().split()
        return tokens[0] if tokens else default

    def _send(self, text: str) -> bool:
        try:
            self.sock.sendall(text.encode())
        except OSError as err:
            self._say("conn.Write err:", err)
            return False
        return True

    def deal_response(self) -> None:
        """Copy everything the server sends to the output until it closes."""
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            try:
                data = self.sock.recv(4096)
            except OSError:
                break
            if not data:
                break
            self.output.write(decoder.decode(data))
            self.output.flush()
        tail = decoder.decode(b"", final=True)
        if tail:
            self.output.write(tail)
            self.output.flush()

    def menu(self) -> bool:
        """Show the menu and read a mode; False if the choice is out of range."""
        self._say("1、公聊模式")
        self._say("2、私聊模式")
        self._say("3、更新用户名")
        self._say("0、退出")
        try:
            choice = int(self._scan())
        except ValueError:
            choice = 0
        if 0 <= choice <= 3:
            self.mode = choice
            return True
        self._say(">>>>>>>请输入合法范围内的数字<<<<<<<<")
        return False

    def select_users(self) -> None:
        """Ask the server for the list of online users."""
        self._send("who\n")

    def private_chat(self) -> None:
        """Send messages to chosen users until 'exit' is entered."""
        name_prompt = ">>>>>请输入聊天对象[用户名], exit 退出"
        msg_prompt = ">>>>>>请输入消息内容, exit 退出"
        self.select_users()
        self._say(name_prompt)
        remote = self._scan()
        chat = ""
        while remote != "exit":
            self._say(msg_prompt)
            chat = self._scan(chat)
            while chat != "exit":
                if chat and not self._send(f"to|{remote}|{chat}\n"):
                    break
                self._say(msg_prompt)
                chat = self._scan()
            self.select_users()
            self._say(name_prompt)
            remote = self._scan(remote)

    def public_chat(self) -> None:
        """Send messages to everyone until 'exit' is entered."""
        prompt = ">>>>请输入聊天的内容,exit退出"
        self._say(prompt)
        chat = self._scan()
        while chat != "exit":
            if chat and not self._send(chat + "\n"):
                break
            self._say(prompt)
            chat = self._scan()

    def update_name(self) -> bool:
        """Read a new name and ask the server to apply it."""
        self._say(">>>>>>>请输入用户名：")
        self.name = self._scan(self.name)
        return self._send(f"rename|{self.name}\n")

    def run(self) -> None:
        """Loop over the menu until the user chooses to quit."""
        actions = {1: self.public_chat, 2: self.private_chat, 3: self.update_name}
        while self.mode != 0:
            while not self.menu():
                pass
            action = actions.get(self.mode)
            if action is not None:
                action()

    def close(self) -> None:
        """Shut down and close the connection."""
        with contextlib.suppress(OSError):
            self.sock.shutdown(socket.SHUT_RDWR)
        self.sock.close()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Connect to the chat server.")
    parser.add_argument("-ip", "--ip", default="127.0.0.1", help="设置服务器IP地址(默认127.0.0.1)")
    parser.add_argument("-port", "--port", type=int, default=8888, help="设置服务器端口（默认8888）")
    args = parser.parse_args(argv)
    try:
        client = Client.connect(args.ip, args.port)
    except OSError as err:
        print("net.Dial err:", err)
        print(">>>>> 连接服务器失败...")
        return 1
    threading.Thread(target=client.deal_response, daemon=True).start()
    print(">>>>>> 链接服务器成功...")
    try:
        client.run()
    except (EOFError, KeyboardInterrupt):
        pass
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())