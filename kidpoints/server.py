import uvicorn
from kidpoints.config import settings


def run():  # pragma: no cover
    uvicorn.run(
        "kidpoints.main:app",
        host=settings.SERVER_HOST,
        port=settings.SERVER_PORT,
        reload=settings.ENV in ["test", "dev"],
        log_level="debug" if settings.ENV in ["test", "dev"] else "info",
    )


if __name__ == "__main__":  # pragma: no cover
    run()
