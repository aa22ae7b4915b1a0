"""Record types inspected through their fields, tags and JSON form."""

import dataclasses
import inspect
import json
import typing
from dataclasses import dataclass, field
from typing import Any


def _type_name(tp: Any) -> str:
    if isinstance(tp, str):
        return tp
    if typing.get_origin(tp) is not None:
        return str(tp)
    return getattr(tp, "__name__", repr(tp))


def _go_value(obj: Any) -> str:
    values = (str(getattr(obj, f.name)) for f in dataclasses.fields(obj))
    return "{" + " ".join(values) + "}"


def _describe_signature(func: Any) -> str:
    code = func.__code__
    annotations = getattr(func, "__annotations__", {})
    params = []
    for name in code.co_varnames[: code.co_argcount]:
        if name in annotations:
            params.append(f"{name}: {_type_name(annotations[name])}")
        else:
            params.append(name)
    text = "(" + ", ".join(params) + ")"
    if "return" in annotations:
        text += f" -> {_type_name(annotations['return'])}"
    return text


@dataclass
class User:
    """A user with an id, name and age."""

    id: int = 0
    name: str = ""
    age: int = 0

    def call(self) -> str:
        """Return the call notice followed by the user's field values."""
        return "user is called .. \n" + _go_value(self)


def describe_fields(obj: Any) -> list[str]:
    """List a dataclass instance's fields with types and values, then its methods."""
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"expected a dataclass instance, got {type(obj).__name__}")
    lines = [
        f"{f.name}: {_type_name(f.type)} = {getattr(obj, f.name)}"
        for f in dataclasses.fields(obj)
    ]
    for name, func in inspect.getmembers(type(obj), inspect.isfunction):
        if not name.startswith("_"):
            lines.append(f"{name}: {_describe_signature(func)}")
    return lines


@dataclass
class Resume:
    """A resume whose fields carry descriptive tags."""

    name: str = field(default="", metadata={"info": "name", "doc": "我的名字"})
    sex: str = field(default="", metadata={"info": "sex"})


def find_tags(cls: Any) -> list[tuple[str, str]]:
    """Return the (info, doc) tags of each field; a missing tag is empty."""
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"expected a dataclass, got {cls!r}")
    return [
        (f.metadata.get("info", ""), f.metadata.get("doc", ""))
        for f in dataclasses.fields(cls)
    ]


def _check(value: Any, tp: type, key: str) -> Any:
    if tp is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif tp is str:
        ok = isinstance(value, str)
    else:
        ok = isinstance(value, list) and all(isinstance(v, str) for v in value)
    if not ok:
        raise ValueError(f"cannot decode {value!r} into field {key!r}")
    return value


@dataclass
class Movie:
    """A movie serialised to JSON under tagged key names."""

    title: str = field(default="", metadata={"json": "title"})
    year: int = field(default=0, metadata={"json": "year"})
    price: int = field(default=0, metadata={"json": "rmb"})
    actors: list = field(default_factory=list, metadata={"json": "actors"})

    _TYPES = {"title": str, "year": int, "price": int, "actors": list}

    def to_json(self) -> str:
        """Encode as compact JSON using the tagged key names."""
        data = {f.metadata["json"]: getattr(self, f.name) for f in dataclasses.fields(self)}
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str | bytes) -> "Movie":
        """Decode JSON; unknown keys are ignored and key matching ignores case."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("cannot decode non-object JSON into Movie")
        by_key = {f.metadata["json"].casefold(): f.name for f in dataclasses.fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = by_key.get(key.casefold())
            if name is None:
                continue
            if value is None:
                values.pop(name, None)
                continue
            values[name] = _check(value, cls._TYPES[name], key)
        return cls(**values)