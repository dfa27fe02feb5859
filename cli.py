#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os
import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_test(args: argparse.Namespace) -> int:
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    pytest_args = [sys.executable, "-m", "pytest"]
    if args.quiet:
        pytest_args.append("-q")
    if args.k:
        pytest_args += ["-k", args.k]
    return run(pytest_args)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("blogcms.main:app", host=args.host, port=args.port, reload=args.reload)
    return 0


async def _init_db() -> None:
    from blogcms.db import pool as db_pool
    from blogcms.db import sa as db_sa
    from blogcms.db import schema as db_schema

    await db_pool.connect_db()
    await db_sa.init_sa_engine()
    try:
        await db_schema.ensure_articles_table()
        await db_sa.create_kv_tables()
    finally:
        await db_sa.close_sa_engine()
        await db_pool.close_db()


def cmd_init_db(args: argparse.Namespace) -> int:
    asyncio.run(_init_db())
    print("schema ready")
    return 0


def main(argv: list[str] | None = None) -> int:
    from blogcms.config import HOST, PORT

    parser = argparse.ArgumentParser(prog="blogcms", description="Blog CMS backend")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the API server")
    p_serve.add_argument("--host", default=HOST)
    p_serve.add_argument("--port", type=int, default=PORT)
    p_serve.add_argument("--reload", action="store_true", help="Auto-reload on code changes")
    p_serve.set_defaults(func=cmd_serve)

    p_init = sub.add_parser("init-db", help="Create the articles and kv_store tables")
    p_init.set_defaults(func=cmd_init_db)

    p_test = sub.add_parser("test", help="Run pytest")
    p_test.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (-q)")
    p_test.add_argument("-k", help="Only run tests matching expression")
    p_test.set_defaults(func=cmd_test)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
