# domain/sandbox/denylist.py
"""
Names and syntax kinds that must never appear in a template expression.

Both sets are the single place to audit or extend the sandbox policy;
the checker only reads them.
"""
from __future__ import annotations

from typing import FrozenSet

DISALLOWED_IDENTIFIERS: FrozenSet[str] = frozenset(
    {
        # global namespaces
        "globals",
        "locals",
        "vars",
        "__builtins__",
        "builtins",
        "sys",
        "os",
        # code construction / loading
        "eval",
        "exec",
        "compile",
        "__import__",
        "importlib",
        "super",
        # I/O, timers, network, processes
        "open",
        "breakpoint",
        "input",
        "threading",
        "asyncio",
        "sched",
        "socket",
        "subprocess",
        "urllib",
        "requests",
    }
)

# ast class names
DISALLOWED_NODE_TYPES: FrozenSet[str] = frozenset(
    {
        "Lambda",
        "FunctionDef",
        "AsyncFunctionDef",
        "ClassDef",
        "Import",
        "ImportFrom",
        "NamedExpr",
        "AugAssign",
        "With",
        "AsyncWith",
        "Yield",
        "YieldFrom",
        "Await",
        "Global",
        "Nonlocal",
    }
)
