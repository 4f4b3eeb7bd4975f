"""A small web form that computes the greatest common divisor of two numbers."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence

from flask import Flask, Response, request

from algopad.gcd import gcd

INDEX_PAGE = """
                <title>GCD Calculator</title>
                <form action="/gcd" method="post">
                <input type="text" name="n"/>
                <input type="text" name="m"/>
                <button type="submit">Compute GCD</button>
                </form>
            """

ZERO_MESSAGE = "Computing the GCD with zero is boring."

_U64 = re.compile(r"\+?[0-9]+")


def _html(body: str, status: int = 200) -> Response:
    return Response(body, status=status, content_type="text/html")


def _form_number(name: str) -> int:
    raw = request.form.get(name)
    if raw is None:
        raise ValueError(f"missing field `{name}`")
    if not _U64.fullmatch(raw) or int(raw) >= 1 << 64:
        raise ValueError(f"invalid number in field `{name}`")
    return int(raw)


def create_app() -> Flask:
    """Build the application with the form page and the computing endpoint."""
    app = Flask(__name__)

    @app.get("/")
    def get_index() -> Response:
        return _html(INDEX_PAGE)

    @app.post("/gcd")
    def post_gcd() -> Response:
        try:
            n = _form_number("n")
            m = _form_number("m")
        except ValueError as exc:
            return Response(f"Parse error: {exc}", status=400, content_type="text/plain")
        if n == 0 or m == 0:
            return _html(ZERO_MESSAGE, status=400)
        return _html(
            f"The greatest common divisor of the numbers {n} and {m} "
            f"is <b>{gcd(n, m)}</b>\n"
        )

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the application until interrupted."""
    parser = argparse.ArgumentParser(description="Serve the GCD calculator.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=3000)
    args = parser.parse_args(argv)
    print(f"Serving on http://localhost:{args.port}...")
    create_app().run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())