"""JavaScript minification for the theme configuration script.

The configuration file is parsed into an ES5 syntax tree with ``calmjs.parse``,
simplified in place and printed back on a single line. Identifiers keep
their original names unless ``mangle`` is enabled, so theme keys such as
``brand`` or ``accent`` stay readable in the output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from calmjs.parse import asttypes, es5
from calmjs.parse.exceptions import ECMARegexSyntaxError, ECMASyntaxError
from calmjs.parse.unparsers.es5 import minify_print

from src.errors import MinificationError


_JUMP_STATEMENTS = (asttypes.Return, asttypes.Throw, asttypes.Break, asttypes.Continue)
_HOISTED_STATEMENTS = (asttypes.FuncDecl, asttypes.VarStatement)


@dataclass(frozen=True)
class MinifyOptions:
    dead_code: bool = True
    drop_console: bool = False
    drop_debugger: bool = True
    mangle: bool = False

    @classmethod
    def from_config(cls, minify_cfg: Optional[Dict[str, Any]]) -> "MinifyOptions":
        cfg = minify_cfg if isinstance(minify_cfg, dict) else {}
        return cls(
            dead_code=bool(cfg.get("dead_code", True)),
            drop_console=bool(cfg.get("drop_console", False)),
            drop_debugger=bool(cfg.get("drop_debugger", True)),
            mangle=bool(cfg.get("mangle", False)),
        )


def _is_console_call(node: Any) -> bool:
    if not isinstance(node, asttypes.ExprStatement):
        return False
    call = node.expr
    if not isinstance(call, asttypes.FunctionCall):
        return False
    target = call.identifier
    while isinstance(target, (asttypes.DotAccessor, asttypes.BracketAccessor)):
        target = target.node
    return isinstance(target, asttypes.Identifier) and target.value == "console"


def _declared_names(node: Any, names: List[str]) -> List[str]:
    """Collect ``var`` and function names hoisted out of ``node`` (nested functions excluded)."""
    if isinstance(node, asttypes.FuncDecl):
        if node.identifier is not None and node.identifier.value not in names:
            names.append(node.identifier.value)
        return names
    if isinstance(node, asttypes.FuncExpr):
        return names
    if isinstance(node, asttypes.VarDecl):
        if node.identifier.value not in names:
            names.append(node.identifier.value)
    for value in vars(node).values():
        children = value if isinstance(value, list) else [value]
        for child in children:
            if isinstance(child, asttypes.Node):
                _declared_names(child, names)
    return names


def _literal_branch(node: Any) -> Optional[List[Any]]:
    """Return the statements an ``if`` with a literal boolean predicate reduces to.

    Names declared in the dropped branch stay declared through an
    initializer-free ``var`` statement.
    """
    if not isinstance(node, asttypes.If) or not isinstance(node.predicate, asttypes.Boolean):
        return None
    if node.predicate.value == "true":
        taken, dropped = node.consequent, node.alternative
    else:
        taken, dropped = node.alternative, node.consequent

    statements: List[Any] = []
    names = _declared_names(dropped, []) if dropped is not None else []
    if names:
        statements.append(asttypes.VarStatement([
            asttypes.VarDecl(asttypes.Identifier(name)) for name in names
        ]))
    if taken is None:
        return statements
    if isinstance(taken, asttypes.Block):
        return statements + list(taken.children())
    return statements + [taken]


class _Simplifier:
    """In-place tree rewriter applying the enabled minify options."""

    def __init__(self, options: MinifyOptions):
        self.options = options
        self._seen: set[int] = set()

    def _drops(self, node: Any) -> bool:
        if self.options.drop_debugger and isinstance(node, asttypes.Debugger):
            return True
        if self.options.drop_console and _is_console_call(node):
            return True
        return False

    def _rewrite_statements(self, statements: List[Any]) -> List[Any]:
        pending = list(statements)
        result: List[Any] = []
        unreachable = False
        while pending:
            node = pending.pop(0)
            if not isinstance(node, asttypes.Node):
                result.append(node)
                continue
            if self._drops(node):
                continue
            if self.options.dead_code:
                branch = _literal_branch(node)
                if branch is not None:
                    pending[:0] = branch
                    continue
                if unreachable and not isinstance(node, _HOISTED_STATEMENTS):
                    continue
            self.visit(node)
            result.append(node)
            if self.options.dead_code and isinstance(node, _JUMP_STATEMENTS):
                unreachable = True
        return result

    def _rewrite_single(self, node: Any) -> Any:
        if self._drops(node):
            return asttypes.EmptyStatement(";")
        if self.options.dead_code:
            branch = _literal_branch(node)
            if branch is not None:
                if not branch:
                    return asttypes.EmptyStatement(";")
                if len(branch) == 1:
                    return self._rewrite_single(branch[0])
                return self._rewrite_single(asttypes.Block(branch))
        self.visit(node)
        return node

    def visit(self, node: Any) -> None:
        if id(node) in self._seen:
            return
        self._seen.add(id(node))
        for name, value in list(vars(node).items()):
            if isinstance(value, list):
                value[:] = self._rewrite_statements(value)
            elif isinstance(value, asttypes.Node):
                setattr(node, name, self._rewrite_single(value))


def parse_js(source: str) -> asttypes.Node:
    try:
        return es5(source)
    except (ECMASyntaxError, ECMARegexSyntaxError) as exc:
        raise MinificationError(f"Could not parse JavaScript: {exc}") from exc


def minify_js(source: str, options: Optional[MinifyOptions] = None) -> str:
    """Minify an ES5 script and return the single-line result.

    Raises:
        MinificationError: the script is not valid ES5.
    """
    options = options or MinifyOptions()
    program = parse_js(source)
    _Simplifier(options).visit(program)
    try:
        return minify_print(program, obfuscate=options.mangle, obfuscate_globals=False)
    except Exception as exc:
        raise MinificationError(f"Could not print minified JavaScript: {exc}") from exc
