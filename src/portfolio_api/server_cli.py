"""CLI entry point for the Portfolio API server."""

import argparse

from portfolio_api.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="portfolio-server",
        description="Portfolio API server: CRUD over portfolio project entries",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args(argv)

    import uvicorn

    uvicorn.run("portfolio_api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
