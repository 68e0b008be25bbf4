# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Farcaster Dev MCP Contributors

"""Shared helpers for building markdown tool output."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any

CHECK = "✅"
CROSS = "❌"
PENDING = "⏳"
WARN = "⚠️"


def mark(flag: bool) -> str:
    return CHECK if flag else CROSS


def code_block(lang: str, body: str) -> str:
    """Fence ``body`` as a markdown code block."""
    return f"```{lang}\n{body.strip(chr(10))}\n```"


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def meta_content(data: Any) -> str:
    """Compact JSON safe inside a single-quoted HTML attribute."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False).replace("&", "&amp;").replace("'", "&#39;")


def bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def numbered(items: Iterable[str]) -> str:
    return "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))


def join_blocks(*blocks: str | None) -> str:
    """Join non-empty blocks with a blank line between them."""
    return "\n\n".join(block.strip("\n") for block in blocks if block and block.strip())


def slugify(name: str) -> str:
    """Lower-case ``name`` and collapse whitespace runs into hyphens."""
    return re.sub(r"\s+", "-", name.strip().lower())


def pascal_case(value: str) -> str:
    """``user-action`` -> ``UserAction``."""
    return "".join(part[:1].upper() + part[1:] for part in re.split(r"[-_\s]+", value) if part)


def camel_case(value: str) -> str:
    pascal = pascal_case(value)
    return pascal[:1].lower() + pascal[1:]


def indent(text: str, spaces: int) -> str:
    pad = " " * spaces
    return "\n".join(pad + line if line else line for line in text.splitlines())


def js_identifier(value: str, fallback: str = "custom") -> str:
    """Turn a free-form name into a camelCase JavaScript identifier."""
    ident = camel_case(re.sub(r"[^A-Za-z0-9]+", " ", value))
    if not ident:
        return fallback
    if ident[0].isdigit():
        return fallback + ident
    return ident
