"""Check that public docstrings carry a closed ```python example block."""

import ast
import re
from pathlib import Path
from typing import NamedTuple, TypeIs

import rich
import rich.table
import rich.text

from pyoptional import Optional

SRC_DIR = Path().joinpath("src", "pyoptional")
CODE_BLOCK_PATTERN = re.compile(r"^```(\w*)", re.MULTILINE)
SKIP_DECORATORS = frozenset({"overload", "override", "no_doctest", "wraps", "property"})


class DocstringError(NamedTuple):
    """Error found in a docstring."""

    file_path: Path
    func_name: str
    line_no: int
    errors: list[str]


def _is_documentable(node: ast.AST) -> TypeIs[ast.FunctionDef | ast.AsyncFunctionDef]:
    return isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))


def _is_public(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    return not node.name.startswith("_")


def _has_skip_decorator(node: ast.FunctionDef | ast.AsyncFunctionDef) -> bool:
    """Check if function has a decorator that should skip the example check."""
    return any(
        (isinstance(d, ast.Name) and d.id in SKIP_DECORATORS)
        or (isinstance(d, ast.Attribute) and d.attr in SKIP_DECORATORS)
        for d in node.decorator_list
    )


def _private_class_methods(tree: ast.Module) -> set[int]:
    """Line numbers of methods defined inside private classes."""
    return {
        method.lineno
        for node in ast.walk(tree)
        if isinstance(node, ast.ClassDef) and node.name.startswith("_")
        for method in ast.walk(node)
        if _is_documentable(method)
    }


def _check_code_blocks(docstring: str) -> list[str]:
    """Unclosed or unmatched fences, and a missing python block."""
    errors: list[str] = []
    stack: list[tuple[int, str]] = []
    for idx, line in enumerate(docstring.split("\n"), start=1):
        match = CODE_BLOCK_PATTERN.search(line.strip())
        if match is None:
            continue
        if line.strip() == "```":
            if stack:
                stack.pop()
            else:
                errors.append(f"line {idx}: closing block ``` without matching opening")
        else:
            stack.append((idx, match.group(1) or "plaintext"))
    errors.extend(f"line {idx}: unclosed ```{lang} block" for idx, lang in stack)
    if "```python" not in docstring and "@no_doctest" not in docstring:
        errors.append("missing doctest: no ```python block found in docstring")
    return errors


def _process_node(
    file_path: Path, node: ast.FunctionDef | ast.AsyncFunctionDef
) -> Optional[DocstringError]:
    return (
        Optional.of_nullable(ast.get_docstring(node))
        .map(_check_code_blocks)
        .or_(lambda: Optional.of(["missing docstring"]))
        .filter(bool)
        .map(lambda errors: DocstringError(file_path, node.name, node.lineno, errors))
    )


def _check_file(file_path: Path) -> list[DocstringError]:
    try:
        tree = ast.parse(file_path.read_text(encoding="utf-8"))
    except SyntaxError:
        return []
    skipped = _private_class_methods(tree)
    return [
        error
        for node in ast.walk(tree)
        if _is_documentable(node)
        and _is_public(node)
        and not _has_skip_decorator(node)
        and node.lineno not in skipped
        for error in _process_node(file_path, node).iter()
    ]


def main() -> None:
    """Check all docstrings in the project."""
    rich.print(rich.text.Text(f"Checking docstrings in {SRC_DIR}", style="bold"))
    errors = [err for path in sorted(SRC_DIR.rglob("*.py")) for err in _check_file(path)]
    if not errors:
        rich.print(rich.text.Text("All docstrings are valid.", style="bold green"))
        return
    table = rich.table.Table(title=f"{len(errors)} docstring error(s)")
    table.add_column("File", style="cyan")
    table.add_column("Function", style="magenta")
    table.add_column("Line", justify="right")
    table.add_column("Errors", style="red")
    for err in errors:
        table.add_row(
            str(err.file_path), err.func_name, str(err.line_no), "\n".join(err.errors)
        )
    rich.print(table)
    raise SystemExit(1)


if __name__ == "__main__":
    main()
