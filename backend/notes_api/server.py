import uvicorn

from notes_api.config import load_settings
from notes_api.main import create_app

settings = load_settings()
app = create_app(settings=settings)


def main() -> None:
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
