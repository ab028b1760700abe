import argparse

import uvicorn

from moviebuddy.config.logging import configure_logging
from moviebuddy.config.settings import settings
from moviebuddy.serving.api import create_app


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Serve the movie catalog over HTTP")
    parser.add_argument("--host", default=settings.host)
    parser.add_argument("--port", type=int, default=settings.port)
    parser.add_argument("--log-level", default=settings.log_level)
    parser.add_argument("--data-dir", default=settings.data_dir, help="Directory holding movies.json and users.json")
    args = parser.parse_args(argv)

    cfg = settings.model_copy(
        update={"host": args.host, "port": args.port, "log_level": args.log_level, "data_dir": args.data_dir}
    )
    configure_logging(cfg.log_level)
    uvicorn.run(
        create_app(cfg),
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
