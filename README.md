# lemonlab

A line-based TCP chat server built on asyncio, with an interactive terminal
client to go with it. The package also holds a set of small, tested helpers: a
closable thread channel, dataclass records with tags and a JSON round trip,
grid and image helpers, a slice type with length and capacity, and a few
mapping, operator and recursion utilities.

It depends on nothing outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The chat server

```
lemonlab-server [--ip IP] [--port PORT]
```

By default the server listens on `127.0.0.1:8888`. Each user starts out named
after their remote address, and everyone online is told `[addr]name:已上线`
when they connect and `[addr]name:下线` when they leave. Every message is one
line:

| Message             | Effect                                           |
|---------------------|--------------------------------------------------|
| `who`               | lists each online user as `[addr]name:在线....`  |
| `rename|<name>`     | changes your name, unless someone else has it    |
| `to|<name>|<text>`  | sends `<text>` to `<name>` alone                 |
| anything else       | is broadcast to everyone as `[addr]name:text`    |

A user who sends nothing for 300 seconds receives `你被踢了` and is
disconnected.

From Python, `lemonlab.chat_server.Server(ip, port, idle_timeout)` offers
`start()`, which binds the socket and returns the `asyncio` server (the bound
port is written back to `server.port`, so port 0 works), and
`serve_forever()`.

## The chat client

```
lemonlab-client [-ip IP] [-port PORT]
```

Both options default to `127.0.0.1` and `8888`; `--ip` and `--port` are
accepted as well. After connecting, the client prints everything the server
sends and offers a menu:

```
1、公聊模式      public chat
2、私聊模式      private chat
3、更新用户名    change your name
0、退出          quit
```

A number outside 0–3 shows the menu again; input that is not a number is
taken as 0. In public and private chat, type `exit` to go back to the menu.
Private chat first asks the server who is online, then asks for the user to
write to.

## Using the library

```python
from lemonlab.channels import Channel, fibonacci_stream, produce
from lemonlab.records import Movie

print(list(fibonacci_stream(6)))   # [1, 1, 2, 4, 8, 16]
print(list(produce(3)))            # [0, 1, 2]

movie = Movie.from_json(
    '{"title":"喜剧之王","year":2000,"rmb":10,"actors":["zhouxingchi"]}'
)
print(movie.to_json())
```

The modules:

- `lemonlab.channels` – `Channel` (unbuffered or buffered, closable,
  iterable; raises `ChannelClosed`), `fibonacci_stream`, `produce`.
- `lemonlab.records` – `User`, `Resume`, `Movie`, `describe_fields`,
  `find_tags`. `Movie.from_json` ignores unknown keys and matches keys
  without regard to case.
- `lemonlab.models` – `Book`, `Hero`, `Human`, `SuperMan`, `Animal`, `Cat`,
  `Dog`, `Books`, `show_animal`, `describe_value`, `format_book`.
- `lemonlab.recursion` – `factorial`, `fibonacci`, `sqrt` (Newton's method),
  `walk_dir` (yields sorted entry names, indented by depth).
- `lemonlab.functions` – `maximum`, `swap`, `get_sequence`, `calculate`,
  `Circle`, `defer_order`.
- `lemonlab.grids` – `new_board`, `render_board`, `student_averages`,
  `course_averages`, `gradient_image`, `brighten`, `render_image`,
  `average_score`, `get_average`, `doubled`, `render_cube`.
- `lemonlab.slices` – `Slice` (with `Slice.make`, `append`, `copy_from`,
  `cap`, `is_nil`; sub-slices share storage) and `format_slice`.
- `lemonlab.operators` – `format_query`, `arithmetic` (division truncates
  toward zero), `bitwise` (64-bit unsigned), `grade_for`, `describe_grade`,
  `describe_type`.
- `lemonlab.mappings` – `format_map`, `powers_of_two`, `rune_positions`,
  `describe_capitals`, `lookup_site`.

## What it does not do

The chat server keeps everything in memory: there are no accounts, no
passwords, no message history and no encryption, and names are lost when the
server stops. The client sends only the first word of each line you type, so
a message cannot contain spaces.