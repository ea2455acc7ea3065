from ceceio.types.builtin import BuiltIn
from ceceio.types.expression import (
    Expression,
    is_atom,
    Application,
    If,
    IfElse,
    Binding,
    Lambda,
    Cond,
    List,
)
from ceceio.types.symbol import Symbol, Identifier

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_IDENTIFIER = "\033[94m"
COLOR_SYMBOL = "\033[96m"
COLOR_BUILTIN = "\033[95m"
COLOR_LAMBDA = "\033[92m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 32,
    "display_legend": False,
    "color": True,
}


# ----------------- Colorize utility -----------------
def colorize(text: str, color: str, options: dict = DEFAULT_OPTIONS) -> str:
    if not options.get("color", True):
        return text
    return f"{color}{text}{RESET}"


def _atom(expr: Expression, options: dict) -> str:
    if isinstance(expr, Identifier):
        return colorize(str(expr), COLOR_IDENTIFIER, options)
    if isinstance(expr, Symbol):
        return colorize(str(expr), COLOR_SYMBOL, options)
    if isinstance(expr, BuiltIn):
        return colorize(str(expr), COLOR_BUILTIN, options)
    return str(expr)


def _keyword(word: str, options: dict) -> str:
    return colorize(word, COLOR_SPECIAL_FORM, options)


def _layout(expr: Expression, indent: int, options: dict, depth: int):
    """Split a compound node into (open, rendered children, close)."""
    def sub(e):
        return pprint_expr(e, indent + 1, options, _current_depth=depth + 1)

    match expr:
        case Application():
            head = expr.name
            head_str = _atom(head, options) if isinstance(head, (BuiltIn, Identifier)) else sub(head)
            return "(", [head_str, *map(sub, expr.arguments)], ")"
        case If():
            return "(", [_keyword("if", options), sub(expr.condition), sub(expr.do_this)], ")"
        case IfElse():
            return "(", [
                _keyword("if", options),
                sub(expr.condition),
                sub(expr.if_true),
                sub(expr.if_false),
            ], ")"
        case Binding():
            return "(", [_keyword("def", options), _atom(expr.identifier, options), sub(expr.expression)], ")"
        case Lambda():
            formals = "[" + " ".join(_atom(f, options) for f in expr.arguments) + "]"
            return "(", [colorize("fn", COLOR_LAMBDA, options), formals, sub(expr.body)], ")"
        case Cond():
            return "(", [_keyword("cond", options), *map(sub, expr.expressions)], ")"
        case List():
            return "[", list(map(sub, expr.elements)), "]"
    raise TypeError(f"Cannot pretty-print {expr!r}")


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr: Expression,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    legend_str = ""
    if options.get("display_legend", False) and indent == 0:
        legend_items = [
            colorize("Identifier", COLOR_IDENTIFIER, options),
            colorize(":symbol", COLOR_SYMBOL, options),
            colorize("Built-in", COLOR_BUILTIN, options),
            colorize("Lambda", COLOR_LAMBDA, options),
            colorize("Special Form", COLOR_SPECIAL_FORM, options),
        ]
        legend_str = "Color Key: " + " | ".join(legend_items) + "\n"

    if is_atom(expr):
        return legend_str + _atom(expr, options)

    if _current_depth >= options.get("max_depth", 32):
        return legend_str + "..."

    opening, parts, closing = _layout(expr, indent, options, _current_depth)
    # Measure without color codes
    if len(str(expr)) + indent * 2 <= options.get("max_line_length", 80):
        return legend_str + opening + " ".join(parts) + closing

    if not parts:
        return legend_str + opening + closing
    aligned_lines = [opening + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += closing
    return legend_str + "\n".join(aligned_lines)
