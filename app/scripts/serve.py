"""
Run the API with uvicorn on settings.PORT:

  python -m app.scripts.serve [--host 0.0.0.0]
"""

import argparse

import uvicorn

from app.core.config import get_settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the Fleetrent API server.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--reload", action="store_true")
    args = parser.parse_args()
    settings = get_settings()
    uvicorn.run("app.main:app", host=args.host, port=settings.PORT, reload=args.reload)


if __name__ == "__main__":
    main()
