import uvicorn

from balance_hook.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("balance_hook.main:app", host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
