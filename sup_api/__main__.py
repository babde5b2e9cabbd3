import uvicorn

from sup_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("sup_api.app:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
