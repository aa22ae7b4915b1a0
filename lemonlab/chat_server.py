"""Line-based TCP chat server with public, private and rename commands."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
from typing import Any, Protocol

IDLE_TIMEOUT = 300.0
KICK_NOTICE = "你被踢了"


class _Writer(Protocol):
    def write(self, data: bytes) -> Any: ...


def _format_addr(peer: Any) -> str:
    if isinstance(peer, tuple) and len(peer) >= 2:
        host, port = peer[0], peer[1]
        if ":" in str(host):
            return f"[{host}]:{port}"
        return f"{host}:{port}"
    return str(peer)


class User:
    """One connected client, known to the server under a unique name."""

    def __init__(self, server: Server, writer: _Writer, addr: str) -> None:
        self.name = addr
        self.addr = addr
        self.server = server
        self.writer = writer
        self.inbox: asyncio.Queue[str] = asyncio.Queue()

    def online(self) -> None:
        """Register with the server and announce the arrival."""
        self.server.online_map[self.name] = self
        self.server.broadcast(self, "已上线")

    def offline(self) -> None:
        """Leave the server and announce the departure."""
        self.server.online_map.pop(self.name, None)
        self.server.broadcast(self, "下线")

    def send_message(self, msg: str) -> None:
        """Write text straight to this user's connection."""
        self.writer.write(msg.encode())

    def do_message(self, msg: str) -> None:
        """Act on one line received from this user."""
        users = self.server.online_map
        size = len(msg.encode())
        if msg == "who":
            for user in list(users.values()):
                self.send_message(f"[{user.addr}]{user.name}:在线....\n")
        elif size > 7 and msg.startswith("rename|"):
            new_name = msg.split("|")[1]
            if new_name in users:
                self.send_message("当前用户名被使用\n")
            else:
                users.pop(self.name, None)
                users[new_name] = self
                self.name = new_name
                self.send_message(f"您已经更新用户名:{self.name}\n")
        elif size > 4 and msg.startswith("to|"):
            parts = msg.split("|")
            remote_name = parts[1]
            if not remote_name:
                self.send_message('消息格式不正确，请使用 "to|张三|你好啊"格式。\n')
                return
            remote = users.get(remote_name)
            if remote is None:
                self.send_message("该用户名不存在\n")
                return
            content = parts[2] if len(parts) > 2 else ""
            if not content:
                self.send_message("无消息内容，请重发")
                return
            remote.send_message(f"{self.name}对您说：{content}")
        else:
            self.server.broadcast(self, msg)

    async def _pump(self) -> None:
        while True:
            msg = await self.inbox.get()
            self.writer.write((msg + "\n").encode())


class Server:
    """Accepts connections and relays messages between online users."""

    def __init__(
        self,
        ip: str = "127.0.0.1",
        port: int = 8888,
        idle_timeout: float = IDLE_TIMEOUT,
    ) -> None:
        self.ip = ip
        self.port = port
        self.idle_timeout = idle_timeout
        self.online_map: dict[str, User] = {}
        self.messages: asyncio.Queue[str] = asyncio.Queue()
        self._listener: asyncio.Task[None] | None = None

    def broadcast(self, user: User, msg: str) -> None:
        """Queue a message from ``user`` for every online user."""
        self.messages.put_nowait(f"[{user.addr}]{user.name}:{msg}")

    async def listen_message(self) -> None:
        """Forward every queued broadcast to each online user."""
        while True:
            msg = await self.messages.get()
            for user in list(self.online_map.values()):
                user.inbox.put_nowait(msg)

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        """Serve one connection until it closes or stays idle too long."""
        user = User(self, writer, _format_addr(writer.get_extra_info("peername")))
        pump = asyncio.create_task(user._pump())
        user.online()
        try:
            while True:
                try:
                    line = await asyncio.wait_for(reader.readline(), self.idle_timeout)
                except asyncio.TimeoutError:
                    user.send_message(KICK_NOTICE)
                    if self.online_map.get(user.name) is user:
                        del self.online_map[user.name]
                    break
                except ConnectionError as err:
                    print("Conn Read err:", err)
                    user.offline()
                    break
                if not line:
                    user.offline()
                    break
                msg = line.decode(errors="replace")
                if msg.endswith("\n"):
                    msg = msg[:-1]
                user.do_message(msg)
        finally:
            pump.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await pump
            writer.close()
            with contextlib.suppress(Exception):
                await writer.wait_closed()

    async def start(self) -> asyncio.AbstractServer:
        """Bind the listening socket and start relaying broadcasts."""
        server = await asyncio.start_server(self.handle, self.ip, self.port)
        self.port = server.sockets[0].getsockname()[1]
        self._listener = asyncio.create_task(self.listen_message())
        return server

    async def serve_forever(self) -> None:
        """Start the server and accept connections until cancelled."""
        server = await self.start()
        try:
            async with server:
                await server.serve_forever()
        finally:
            if self._listener is not None:
                self._listener.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await self._listener
                self._listener = None


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the chat server.")
    parser.add_argument("--ip", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8888)
    args = parser.parse_args(argv)
    server = Server(args.ip, args.port)
    try:
        asyncio.run(server.serve_forever())
    except KeyboardInterrupt:
        pass
    except OSError as err:
        print("net.Listen err:", err)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())